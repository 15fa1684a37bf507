"""Unit tests for buoyview.core.loop — RenderLoop dispatch and redraw rules."""

from __future__ import annotations

import asyncio

import pytest

from buoyview.core.events import InputEvent, KeyPress, MouseScroll, ScrollDirection
from buoyview.core.loop import RenderLoop
from buoyview.core.table import SelectableTable


def _make_loop(n: int = 3) -> tuple[RenderLoop, asyncio.Queue[InputEvent], list[int | None]]:
    table = SelectableTable.from_rows([[str(i)] for i in range(n)])
    channel: asyncio.Queue[InputEvent] = asyncio.Queue()
    drawn: list[int | None] = []
    loop = RenderLoop(table, channel, draw=lambda t: drawn.append(t.selected))
    return loop, channel, drawn


class TestQuit:
    @pytest.mark.asyncio()
    async def test_quit_returns(self) -> None:
        loop, channel, drawn = _make_loop()
        channel.put_nowait(KeyPress("q"))
        await asyncio.wait_for(loop.run(), timeout=1.0)
        assert drawn == [None]
        assert not loop.running

    @pytest.mark.asyncio()
    async def test_events_after_quit_not_consumed(self) -> None:
        loop, channel, _ = _make_loop()
        for event in (KeyPress("q"), KeyPress("down")):
            channel.put_nowait(event)
        await asyncio.wait_for(loop.run(), timeout=1.0)
        assert channel.qsize() == 1
        assert loop.table.selected is None


class TestDispatch:
    @pytest.mark.asyncio()
    async def test_keys_move_selection_and_redraw(self) -> None:
        loop, channel, drawn = _make_loop(3)
        for event in (KeyPress("down"), KeyPress("down"), KeyPress("up"), KeyPress("up")):
            channel.put_nowait(event)
        channel.put_nowait(KeyPress("q"))
        await asyncio.wait_for(loop.run(), timeout=1.0)
        assert drawn == [None, 0, 1, 0, 2]
        assert loop.draw_count == 5

    @pytest.mark.asyncio()
    async def test_mouse_scroll_moves_selection(self) -> None:
        loop, channel, drawn = _make_loop(3)
        channel.put_nowait(MouseScroll(ScrollDirection.DOWN))
        channel.put_nowait(MouseScroll(ScrollDirection.DOWN))
        channel.put_nowait(MouseScroll(ScrollDirection.UP))
        channel.put_nowait(KeyPress("q"))
        await asyncio.wait_for(loop.run(), timeout=1.0)
        assert drawn == [None, 0, 1, 0]

    @pytest.mark.asyncio()
    async def test_ignored_input_does_not_redraw(self) -> None:
        loop, channel, drawn = _make_loop(3)
        for code in ("x", "enter", "left", "q"):
            channel.put_nowait(KeyPress(code))
        await asyncio.wait_for(loop.run(), timeout=1.0)
        assert drawn == [None]

    @pytest.mark.asyncio()
    async def test_empty_table_navigation_does_not_crash(self) -> None:
        loop, channel, drawn = _make_loop(0)
        for event in (KeyPress("down"), KeyPress("up"), KeyPress("q")):
            channel.put_nowait(event)
        await asyncio.wait_for(loop.run(), timeout=1.0)
        assert loop.table.selected is None
        assert all(sel is None for sel in drawn)


class TestNoSpuriousRedraw:
    @pytest.mark.asyncio()
    async def test_idle_channel_draws_once(self) -> None:
        loop, channel, drawn = _make_loop()
        task = asyncio.create_task(loop.run())
        await asyncio.sleep(0.5)
        assert loop.running
        assert loop.draw_count == 1
        assert drawn == [None]

        channel.put_nowait(KeyPress("q"))
        await asyncio.wait_for(task, timeout=1.0)
        assert loop.draw_count == 1

    @pytest.mark.asyncio()
    async def test_waits_indefinitely_without_quit(self) -> None:
        loop, channel, _ = _make_loop()
        task = asyncio.create_task(loop.run())
        channel.put_nowait(KeyPress("down"))
        await asyncio.sleep(0.3)
        assert not task.done()
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
        assert not loop.running
