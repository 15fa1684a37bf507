"""
FeedScreen — the one and only BuoyView screen.

Widget tree::

    Header
    #feed-title  (Label — feed title and row count)
    #feed-grid   (FeedGrid)
    #feed-hint   (Label — key help)

Keybindings (dispatched by the render loop, not Textual bindings):
  down / wheel down — next row
  up / wheel up     — previous row
  q                 — quit
"""

from __future__ import annotations

import asyncio

from textual import events
from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import Header, Label

from buoyview.core.events import InputEvent
from buoyview.core.feeds import Feed
from buoyview.core.loop import RenderLoop
from buoyview.core.table import SelectableTable
from buoyview.ui.components.feed_grid import FeedGrid
from buoyview.ui.pump import InputPump

HINT = "↑/↓ or mouse wheel to move   q to quit"


class FeedScreen(Screen):  # type: ignore[type-arg]
    """Shows one feed and runs the render loop for it."""

    def __init__(self, feed: Feed, table: SelectableTable) -> None:
        super().__init__()
        self._feed = feed
        self._channel: asyncio.Queue[InputEvent] = asyncio.Queue()
        self.pump = InputPump(self._channel)
        self.render_loop = RenderLoop(table, self._channel, draw=self._draw)

    # ------------------------------------------------------------------
    # Compose
    # ------------------------------------------------------------------

    def compose(self) -> ComposeResult:
        table = self.render_loop.table
        yield Header(show_clock=False)
        yield Label(f"{self._feed.title}  ({len(table)} rows)", id="feed-title")
        yield FeedGrid(self._feed.columns, id="feed-grid")
        yield Label(HINT, id="feed-hint")

    def on_mount(self) -> None:
        self.query_one(FeedGrid).load(self.render_loop.table.items)
        self.run_worker(self._run_render_loop(), name="render-loop", exclusive=True)

    async def _run_render_loop(self) -> None:
        await self.render_loop.run()
        self.app.exit()

    def _draw(self, table: SelectableTable) -> None:
        self.query_one(FeedGrid).show_selection(table.selected)

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def on_key(self, event: events.Key) -> None:
        self.pump.feed(event)

    def on_mouse_scroll_down(self, event: events.MouseScrollDown) -> None:
        event.prevent_default()
        self.pump.feed(event)

    def on_mouse_scroll_up(self, event: events.MouseScrollUp) -> None:
        event.prevent_default()
        self.pump.feed(event)

    def on_feed_grid_scrolled(self, message: FeedGrid.Scrolled) -> None:
        self.pump.scroll(message.direction)
