"""Transports – ConsoleTransport."""
from __future__ import annotations

import sys
from typing import TextIO

from mp_logger.formatters.console import DEFAULT_FORMAT, format_console
from mp_logger.kernel.entry import LogEntry


class ConsoleTransport:
    """Write one formatted line per entry to *stream* (stdout by default)."""

    def __init__(self, fmt: str = DEFAULT_FORMAT, colors: bool = True, stream: TextIO | None = None) -> None:
        self._fmt = fmt
        self._colors = colors
        self._stream = stream

    def log(self, entry: LogEntry) -> None:
        stream = self._stream or sys.stdout
        stream.write(format_console(entry, self._fmt, self._colors) + "\n")
        stream.flush()


__all__ = ["ConsoleTransport"]
