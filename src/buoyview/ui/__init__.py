"""
BuoyView terminal UI — ``src/buoyview/ui/``.

Textual front end for the core table model.  The screen owns the input
channel; the render loop in ``buoyview.core.loop`` is the only consumer.

Entry point::

    from buoyview.ui.app import run
    run(feed, rows)
"""
