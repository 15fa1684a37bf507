"""
BuoyView UI — Textual application shell.

Launched by ``buoyview stations`` / ``buoyview observations`` once the feed
has been fetched and parsed.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from textual.app import App, ComposeResult
from textual.binding import Binding

from buoyview import __version__
from buoyview.core.feeds import Feed
from buoyview.core.table import Row, SelectableTable


class BuoyViewApp(App):  # type: ignore[type-arg]
    """Scrollable table of one NDBC feed."""

    TITLE = f"BuoyView {__version__}"
    CSS_PATH = str(Path(__file__).parent / "css" / "buoyview.tcss")

    BINDINGS = [
        Binding("ctrl+c", "app.quit", "Quit", show=False, priority=True),
    ]

    def __init__(self, feed: Feed, rows: Sequence[Row]) -> None:
        super().__init__()
        self.feed = feed
        self.table = SelectableTable.from_rows(rows)
        self.sub_title = feed.title

    def compose(self) -> ComposeResult:
        # The feed screen is pushed in on_mount; compose yields nothing here.
        return iter([])

    def on_mount(self) -> None:
        from buoyview.ui.screens.feed import FeedScreen

        self.push_screen(FeedScreen(self.feed, self.table))


def run(feed: Feed, rows: Sequence[Row]) -> None:
    """Entry point called from the CLI."""
    BuoyViewApp(feed, rows).run()
