"""Kernel – transport contract."""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from mp_logger.kernel.entry import LogEntry


@runtime_checkable
class Transport(Protocol):
    """Port: a sink that receives log entries.

    ``log`` must not raise; implementations recover from their own
    delivery failures.
    """

    def log(self, entry: LogEntry) -> None: ...


@runtime_checkable
class ClosableTransport(Transport, Protocol):
    """A transport holding resources that must be released on shutdown."""

    async def close(self) -> None: ...


__all__ = ["ClosableTransport", "Transport"]
