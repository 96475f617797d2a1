"""Kernel time – where entry timestamps come from.

Entries carry integer milliseconds since the Unix epoch; a clock only has
to produce that number.
"""
from __future__ import annotations

import time
from datetime import UTC, datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    """Port: source of entry timestamps."""

    def timestamp_ms(self) -> int: ...


class SystemClock:
    """Wall-clock time."""

    def timestamp_ms(self) -> int:
        return time.time_ns() // 1_000_000

    def now(self) -> datetime:
        return datetime.now(UTC)


class FrozenClock:
    """Clock that only moves when told to.

    *start* is an aware datetime or epoch milliseconds.
    """

    def __init__(self, start: datetime | int) -> None:
        self._ms = start if isinstance(start, int) else int(start.timestamp() * 1000)

    def timestamp_ms(self) -> int:
        return self._ms

    def now(self) -> datetime:
        return datetime.fromtimestamp(self._ms / 1000, tz=UTC)

    def advance(self, ms: int = 0, **kwargs: float) -> None:
        """Move forward by *ms* plus any ``timedelta`` keyword arguments."""
        self._ms += ms + round(timedelta(**kwargs).total_seconds() * 1000)

    def set(self, start: datetime | int) -> None:
        self._ms = start if isinstance(start, int) else int(start.timestamp() * 1000)


__all__ = ["Clock", "FrozenClock", "SystemClock"]
