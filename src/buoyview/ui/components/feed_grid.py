"""
FeedGrid — read-only DataTable for one feed.

The grid never takes focus and never scrolls itself: keys go to the screen,
and mouse wheel events are turned into ``FeedGrid.Scrolled`` messages so the
screen can route them through the input pump.  The row cursor is the
selection highlight and stays hidden until the first navigation.
"""

from __future__ import annotations

from collections.abc import Sequence

from rich.text import Text
from textual import events
from textual.message import Message
from textual.widgets import DataTable

from buoyview.core.events import ScrollDirection


class FeedGrid(DataTable[Text], can_focus=False):
    """Table of feed rows with an externally driven row cursor."""

    class Scrolled(Message):
        """Mouse wheel over the grid."""

        def __init__(self, direction: ScrollDirection) -> None:
            super().__init__()
            self.direction = direction

    def __init__(self, columns: Sequence[str], *, id: str | None = None) -> None:  # noqa: A002
        super().__init__(cursor_type="row", show_cursor=False, zebra_stripes=True, id=id)
        self._column_labels = tuple(columns)

    def load(self, rows: Sequence[Sequence[str]]) -> None:
        self.clear(columns=True)
        self.add_columns(*self._column_labels)
        width = len(self._column_labels)
        # DataTable rejects rows wider than the header; pad short ones too.
        # Cells are wrapped in Text so "[" in feed values is not parsed as markup.
        self.add_rows(
            [[Text(cell) for cell in (list(r) + [""] * width)[:width]] for r in rows]
        )

    def show_selection(self, index: int | None) -> None:
        if index is None:
            self.show_cursor = False
            return
        self.show_cursor = True
        self.move_cursor(row=index, animate=False)

    def on_mouse_scroll_down(self, event: events.MouseScrollDown) -> None:
        event.prevent_default()
        event.stop()
        self.post_message(self.Scrolled(ScrollDirection.DOWN))

    def on_mouse_scroll_up(self, event: events.MouseScrollUp) -> None:
        event.prevent_default()
        event.stop()
        self.post_message(self.Scrolled(ScrollDirection.UP))
