"""Logger – level filter and fan-out to transports."""
from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from mp_logger.kernel.contracts import ClosableTransport, Transport
from mp_logger.kernel.entry import LogEntry
from mp_logger.kernel.errors.base import error_fields
from mp_logger.kernel.errors.config import ConfigError
from mp_logger.kernel.levels import Level
from mp_logger.kernel.time import Clock, SystemClock
from mp_logger.transports.console import ConsoleTransport

_diagnostics = logging.getLogger(__name__)


class Logger:
    """Route entries at or above the configured level to every transport.

    Each instance owns its level and transport list; nothing is shared
    between loggers.  A transport that raises is reported on the
    ``mp_logger`` diagnostic logger and skipped, and so is a call made
    with an unknown level: logging never raises into the caller.  Only the
    constructor and :meth:`set_level` reject a bad level.

    Usage::

        logger = Logger(level=Level.DEBUG, transports=[ConsoleTransport(), LokiTransport(url=...)])
        logger.info("user signed in", {"user_id": "42"})
        await logger.close()
    """

    def __init__(
        self,
        level: Level | str | int = Level.INFO,
        transports: Iterable[Transport] | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._level = Level.parse(level)
        self._transports: list[Transport] = list(transports) if transports is not None else [ConsoleTransport()]
        self._clock: Clock = clock or SystemClock()

    async def __aenter__(self) -> "Logger":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def level(self) -> Level:
        return self._level

    @level.setter
    def level(self, value: Level | str | int) -> None:
        self._level = Level.parse(value)

    def set_level(self, value: Level | str | int) -> None:
        self.level = value

    @property
    def transports(self) -> tuple[Transport, ...]:
        return tuple(self._transports)

    def add_transport(self, transport: Transport) -> None:
        self._transports.append(transport)

    def remove_transport(self, transport: Transport) -> None:
        self._transports = [t for t in self._transports if t is not transport]

    def is_enabled_for(self, level: Level) -> bool:
        return level.enabled_for(self._level)

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------

    def log(self, level: Level | str | int, message: str, metadata: Mapping[str, Any] | None = None) -> None:
        try:
            entry_level = Level.parse(level)
        except ConfigError as exc:
            _diagnostics.warning("logger.invalid_level", extra={"requested_level": repr(level), **error_fields(exc)})
            return
        if not self.is_enabled_for(entry_level):
            return
        entry = LogEntry(message=str(message), level=entry_level, timestamp=self._clock.timestamp_ms(), metadata=metadata)
        for transport in list(self._transports):
            try:
                transport.log(entry)
            except Exception:  # noqa: BLE001 – logging must not crash the host
                _diagnostics.warning(
                    "logger.transport_failed",
                    extra={"transport": type(transport).__name__},
                    exc_info=True,
                )

    def error(self, message: str, metadata: Mapping[str, Any] | None = None) -> None:
        self.log(Level.ERROR, message, metadata)

    def warn(self, message: str, metadata: Mapping[str, Any] | None = None) -> None:
        self.log(Level.WARN, message, metadata)

    def audit(self, message: str, metadata: Mapping[str, Any] | None = None) -> None:
        self.log(Level.AUDIT, message, metadata)

    def info(self, message: str, metadata: Mapping[str, Any] | None = None) -> None:
        self.log(Level.INFO, message, metadata)

    def http(self, message: str, metadata: Mapping[str, Any] | None = None) -> None:
        self.log(Level.HTTP, message, metadata)

    def debug(self, message: str, metadata: Mapping[str, Any] | None = None) -> None:
        self.log(Level.DEBUG, message, metadata)

    def verbose(self, message: str, metadata: Mapping[str, Any] | None = None) -> None:
        self.log(Level.VERBOSE, message, metadata)

    def silly(self, message: str, metadata: Mapping[str, Any] | None = None) -> None:
        self.log(Level.SILLY, message, metadata)

    async def close(self) -> None:
        """Close every transport that holds resources, in registration order."""
        for transport in list(self._transports):
            if isinstance(transport, ClosableTransport):
                try:
                    await transport.close()
                except Exception:  # noqa: BLE001
                    _diagnostics.warning(
                        "logger.transport_close_failed",
                        extra={"transport": type(transport).__name__},
                        exc_info=True,
                    )


__all__ = ["Logger"]
