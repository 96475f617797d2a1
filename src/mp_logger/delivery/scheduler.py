"""Delivery – Scheduler port and the asyncio implementation.

Transports never touch the event loop directly: timers and background
sends go through a :class:`Scheduler` so tests can swap in a virtual-time
scheduler (see :class:`mp_logger.testing.ManualScheduler`).
"""
from __future__ import annotations

import asyncio
from typing import Any, Callable, Coroutine, Protocol


class ScheduledTask(Protocol):
    """Handle to a deferred callback."""

    def cancel(self) -> None: ...
    def cancelled(self) -> bool: ...


class Scheduler(Protocol):
    """Port: deferred callbacks and background coroutines.

    Both methods raise :class:`RuntimeError` when no event loop is running;
    callers keep their work queued and retry on the next trigger.
    """

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledTask: ...

    def spawn(self, coro: Coroutine[Any, Any, None]) -> asyncio.Future[None]: ...


class AsyncioScheduler:
    """Scheduler backed by the running asyncio event loop."""

    def __init__(self) -> None:
        self._tasks: set[asyncio.Task[None]] = set()

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledTask:
        loop = asyncio.get_running_loop()
        return loop.call_later(delay, callback)

    def spawn(self, coro: Coroutine[Any, Any, None]) -> asyncio.Future[None]:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            coro.close()
            raise
        task = loop.create_task(coro)
        # the loop only keeps weak references to tasks
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task


__all__ = ["AsyncioScheduler", "ScheduledTask", "Scheduler"]
