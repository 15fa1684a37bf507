"""Unit tests for buoyview.core.events — key map."""

from __future__ import annotations

import pytest

from buoyview.core.events import (
    Command,
    KeyPress,
    MouseScroll,
    ScrollDirection,
    command_for,
)


class TestKeyMap:
    def test_q_quits(self) -> None:
        assert command_for(KeyPress("q")) is Command.QUIT

    def test_down_is_next(self) -> None:
        assert command_for(KeyPress("down")) is Command.NEXT

    def test_up_is_previous(self) -> None:
        assert command_for(KeyPress("up")) is Command.PREVIOUS

    @pytest.mark.parametrize("code", ["Q", "x", "enter", "left", "right", "escape", "ctrl+q"])
    def test_other_keys_ignored(self, code: str) -> None:
        assert command_for(KeyPress(code)) is Command.IGNORE


class TestMouseMap:
    def test_scroll_down_is_next(self) -> None:
        assert command_for(MouseScroll(ScrollDirection.DOWN)) is Command.NEXT

    def test_scroll_up_is_previous(self) -> None:
        assert command_for(MouseScroll(ScrollDirection.UP)) is Command.PREVIOUS


class TestEventValues:
    def test_events_are_hashable_values(self) -> None:
        assert KeyPress("q") == KeyPress("q")
        assert {MouseScroll(ScrollDirection.UP), MouseScroll(ScrollDirection.UP)} == {
            MouseScroll(ScrollDirection.UP)
        }
