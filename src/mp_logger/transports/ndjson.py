"""Transports – NDJsonTransport."""
from __future__ import annotations

from mp_logger.formatters.ndjson import format_ndjson
from mp_logger.kernel.entry import LogEntry


class NDJsonTransport:
    """Accumulate entries in memory as newline-delimited JSON.

    Typical use is periodic export::

        data = transport.get_data()
        if data:
            upload(data)
            transport.reset()
    """

    def __init__(self) -> None:
        self._lines: list[str] = []

    def log(self, entry: LogEntry) -> None:
        self._lines.append(format_ndjson(entry))

    def get_data(self) -> str:
        """All lines joined with ``\\n``; empty string when nothing was logged."""
        return "\n".join(self._lines)

    def reset(self) -> None:
        self._lines.clear()

    def __len__(self) -> int:
        return len(self._lines)


__all__ = ["NDJsonTransport"]
