"""
Input pump — normalises terminal input and sends it to the render loop.

Textual's driver runs the blocking terminal poll on its own input thread
and delivers ``Key`` / ``MouseScroll*`` events to the screen.  The screen
hands them to ``InputPump.feed()``, which translates them into
``buoyview.core.events`` values and puts them on the channel.  Nothing is
sent when no input arrives: there is no tick event.
"""

from __future__ import annotations

import asyncio

import structlog
from textual import events

from buoyview.core.events import InputEvent, KeyPress, MouseScroll, ScrollDirection

logger = structlog.get_logger()


class InputPump:
    """Producer side of the input channel.  The render loop is the consumer."""

    def __init__(self, channel: asyncio.Queue[InputEvent]) -> None:
        self._channel = channel
        self._forwarded = 0

    @property
    def forwarded(self) -> int:
        return self._forwarded

    def feed(self, event: events.Event) -> bool:
        """Forward a Textual input event.  Returns False if it was not one we map."""
        if isinstance(event, events.Key):
            self.key(event.key)
        elif isinstance(event, events.MouseScrollDown):
            self.scroll(ScrollDirection.DOWN)
        elif isinstance(event, events.MouseScrollUp):
            self.scroll(ScrollDirection.UP)
        else:
            return False
        return True

    def key(self, code: str) -> None:
        self.send(KeyPress(code))

    def scroll(self, direction: ScrollDirection) -> None:
        self.send(MouseScroll(direction))

    def send(self, event: InputEvent) -> None:
        self._channel.put_nowait(event)
        self._forwarded += 1
        if isinstance(event, KeyPress):
            logger.debug("input_event", kind="key", code=event.code)
        else:
            logger.debug("input_event", kind="mouse", direction=event.direction.name.lower())
