"""
Render loop — draw, wait for the next input event, dispatch, repeat.

The loop is the single consumer of the input channel and the only code that
mutates the ``SelectableTable``.  It never times out: the only way out of
``run()`` is a quit command.

Usage::

    channel: asyncio.Queue[InputEvent] = asyncio.Queue()
    loop = RenderLoop(table, channel, draw=grid.show)
    await loop.run()      # returns when "q" arrives
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable

import structlog

from buoyview.core.events import Command, InputEvent, command_for
from buoyview.core.table import SelectableTable

logger = structlog.get_logger()

DrawFn = Callable[[SelectableTable], None]


class RenderLoop:
    """Cooperative draw-then-wait cycle over one ``SelectableTable``."""

    def __init__(
        self,
        table: SelectableTable,
        channel: asyncio.Queue[InputEvent],
        draw: DrawFn,
    ) -> None:
        self._table = table
        self._channel = channel
        self._draw_fn = draw
        self._draw_count = 0
        self._running = False

    @property
    def table(self) -> SelectableTable:
        return self._table

    @property
    def draw_count(self) -> int:
        """Number of times the table has been drawn, initial draw included."""
        return self._draw_count

    @property
    def running(self) -> bool:
        return self._running

    def _draw(self) -> None:
        self._draw_fn(self._table)
        self._draw_count += 1

    async def run(self) -> None:
        """Run until a quit command is received."""
        self._running = True
        logger.debug("render_loop_started", rows=len(self._table))
        self._draw()
        try:
            while True:
                event = await self._channel.get()
                command = command_for(event)

                if command is Command.QUIT:
                    logger.info("render_loop_quit", draws=self._draw_count)
                    return
                if command is Command.NEXT:
                    self._table.next()
                elif command is Command.PREVIOUS:
                    self._table.previous()
                else:
                    continue

                self._draw()
        finally:
            self._running = False


__all__ = ["DrawFn", "RenderLoop"]
