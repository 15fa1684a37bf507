"""
Input events and the key map.

The input pump produces ``InputEvent`` values; the render loop consumes each
one exactly once and turns it into a ``Command`` via ``command_for()``.

Key map::

    q                    -> QUIT
    down / scroll down   -> NEXT
    up / scroll up       -> PREVIOUS
    anything else        -> IGNORE
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class ScrollDirection(Enum):
    UP = auto()
    DOWN = auto()


@dataclass(frozen=True)
class KeyPress:
    """A key press; ``code`` is the terminal backend's key name ("down", "q")."""

    code: str


@dataclass(frozen=True)
class MouseScroll:
    direction: ScrollDirection


InputEvent = KeyPress | MouseScroll


class Command(Enum):
    QUIT = auto()
    NEXT = auto()
    PREVIOUS = auto()
    IGNORE = auto()


QUIT_KEYS: frozenset[str] = frozenset({"q"})
NEXT_KEYS: frozenset[str] = frozenset({"down"})
PREVIOUS_KEYS: frozenset[str] = frozenset({"up"})


def command_for(event: InputEvent) -> Command:
    """Map an input event to the command the render loop should run."""
    if isinstance(event, KeyPress):
        if event.code in QUIT_KEYS:
            return Command.QUIT
        if event.code in NEXT_KEYS:
            return Command.NEXT
        if event.code in PREVIOUS_KEYS:
            return Command.PREVIOUS
        return Command.IGNORE

    if isinstance(event, MouseScroll):
        if event.direction is ScrollDirection.DOWN:
            return Command.NEXT
        return Command.PREVIOUS

    return Command.IGNORE


__all__ = [
    "Command",
    "InputEvent",
    "KeyPress",
    "MouseScroll",
    "NEXT_KEYS",
    "PREVIOUS_KEYS",
    "QUIT_KEYS",
    "ScrollDirection",
    "command_for",
]
