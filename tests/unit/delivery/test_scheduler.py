"""Unit tests for the scheduler port implementations."""
from __future__ import annotations

import asyncio

import pytest

from mp_logger.delivery import AsyncioScheduler
from mp_logger.testing import ManualScheduler


class TestAsyncioScheduler:
    def test_call_later_fires(self) -> None:
        fired: list[str] = []

        async def run() -> None:
            scheduler = AsyncioScheduler()
            scheduler.call_later(0.01, lambda: fired.append("x"))
            await asyncio.sleep(0.05)

        asyncio.run(run())
        assert fired == ["x"]

    def test_call_later_can_be_cancelled(self) -> None:
        fired: list[str] = []

        async def run() -> None:
            handle = AsyncioScheduler().call_later(0.01, lambda: fired.append("x"))
            handle.cancel()
            await asyncio.sleep(0.05)
            assert handle.cancelled()

        asyncio.run(run())
        assert fired == []

    def test_spawn_runs_coroutine(self) -> None:
        done: list[int] = []

        async def work() -> None:
            done.append(1)

        async def run() -> None:
            await AsyncioScheduler().spawn(work())

        asyncio.run(run())
        assert done == [1]

    def test_no_running_loop_raises(self) -> None:
        scheduler = AsyncioScheduler()
        with pytest.raises(RuntimeError):
            scheduler.call_later(1.0, lambda: None)

        async def work() -> None:
            pass

        with pytest.raises(RuntimeError):
            scheduler.spawn(work())


class TestManualScheduler:
    def test_timers_fire_in_virtual_time_order(self) -> None:
        scheduler = ManualScheduler()
        fired: list[str] = []
        scheduler.call_later(2.0, lambda: fired.append("b"))
        scheduler.call_later(1.0, lambda: fired.append("a"))
        assert scheduler.next_delay() == 1.0
        assert scheduler.advance(1.5) == 1
        assert fired == ["a"]
        assert scheduler.now == 1.5
        scheduler.advance(0.5)
        assert fired == ["a", "b"]
        assert scheduler.next_delay() is None

    def test_cancelled_timer_is_skipped(self) -> None:
        scheduler = ManualScheduler()
        fired: list[str] = []
        timer = scheduler.call_later(1.0, lambda: fired.append("x"))
        timer.cancel()
        assert scheduler.timers == []
        scheduler.advance(5.0)
        assert fired == []

    def test_settle_waits_for_chained_tasks(self) -> None:
        scheduler = ManualScheduler()
        order: list[str] = []

        async def second() -> None:
            await asyncio.sleep(0)
            order.append("second")

        async def first() -> None:
            order.append("first")
            scheduler.spawn(second())

        async def run() -> None:
            scheduler.spawn(first())
            await scheduler.settle()

        asyncio.run(run())
        assert order == ["first", "second"]

    def test_run_next_jumps_to_next_timer(self) -> None:
        scheduler = ManualScheduler()
        fired: list[float] = []
        scheduler.call_later(3.0, lambda: fired.append(scheduler.now))

        async def run() -> None:
            assert await scheduler.run_next() == 3.0
            assert await scheduler.run_next() is None

        asyncio.run(run())
        assert fired == [3.0]
