"""Syslog transport – persistent connection with unbounded reconnect.

State machine::

    DISCONNECTED -> CONNECTING -> CONNECTED -> DISCONNECTED
                                            \\-> CLOSED (terminal)

UDP skips ``CONNECTING``: the socket exists as soon as it is opened.
Formatted lines wait in a bounded queue while the connection is down and
are flushed in order once it is back.  Lines also stay queued while a
stream's write buffer is above its high-water mark, so a daemon that stops
reading cannot grow memory past the queue bound.  Reconnects never give
up; only the delay is capped.
"""
from __future__ import annotations

import asyncio
import enum
import logging
from typing import Any

from mp_logger.delivery.backoff import ExponentialBackoff
from mp_logger.delivery.queue import BoundedQueue
from mp_logger.delivery.scheduler import AsyncioScheduler, ScheduledTask, Scheduler
from mp_logger.formatters.syslog import format_syslog
from mp_logger.kernel.entry import LogEntry
from mp_logger.kernel.errors.base import error_fields
from mp_logger.transports.syslog.config import SyslogConfig, SyslogProtocol
from mp_logger.transports.syslog.connection import (
    Connection,
    DatagramConnection,
    StreamConnection,
    build_ssl_context,
)

logger = logging.getLogger(__name__)


class SyslogState(str, enum.Enum):
    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"
    CLOSED = "closed"


class SyslogTransport:
    """Deliver entries to a syslog daemon over UDP, TCP or TLS.

    Accepts a :class:`SyslogConfig` or its fields as keyword arguments.
    Construction opens the UDP socket, or starts the first stream connect
    when an event loop is running; otherwise the first :meth:`log` call
    does.
    """

    def __init__(
        self,
        config: SyslogConfig | None = None,
        *,
        scheduler: Scheduler | None = None,
        **options: Any,
    ) -> None:
        self._config = config or SyslogConfig(**options)
        self._scheduler: Scheduler = scheduler or AsyncioScheduler()
        self._backoff = ExponentialBackoff(self._config.retry_base_delay, self._config.max_retry_delay)
        self._queue: BoundedQueue[str] = BoundedQueue(self._config.max_queue_size)
        self._connection: Connection = self._make_connection()

        self._state = SyslogState.DISCONNECTED
        self._retry_count = 0
        self._reconnect_timer: ScheduledTask | None = None
        self._connect_task: asyncio.Future[None] | None = None
        self._drain_task: asyncio.Future[None] | None = None
        self._closed = False

        self._sent = 0
        self._reconnects = 0

        self._connect()

    def _make_connection(self) -> Connection:
        address = self._config.address
        match self._config.protocol:
            case SyslogProtocol.UDP:
                return DatagramConnection(address)
            case SyslogProtocol.TCP:
                return StreamConnection(
                    address, on_lost=self._on_connection_lost, timeout=self._config.connect_timeout
                )
            case SyslogProtocol.TLS:
                return StreamConnection(
                    address,
                    on_lost=self._on_connection_lost,
                    ssl_context=build_ssl_context(self._config.tls),
                    timeout=self._config.connect_timeout,
                )

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def config(self) -> SyslogConfig:
        return self._config

    @property
    def state(self) -> SyslogState:
        return self._state

    @property
    def retry_count(self) -> int:
        return self._retry_count

    @property
    def pending(self) -> list[str]:
        return list(self._queue)

    @property
    def stats(self) -> dict[str, int]:
        return {
            "sent": self._sent,
            "evicted": self._queue.evicted,
            "pending": len(self._queue),
            "reconnects": self._reconnects,
        }

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def format(self, entry: LogEntry) -> str:
        return format_syslog(
            entry,
            facility=self._config.facility,
            hostname=self._config.hostname,
            app_name=self._config.app_name,
            pid=self._config.pid,
            fmt=self._config.format,
        )

    def log(self, entry: LogEntry) -> None:
        if self._closed:
            return
        if self._queue.append(self.format(entry)) is not None and self._config.debug:
            logger.warning("syslog.queue_full", extra={"max_queue_size": self._queue.maxsize})

        if self._state is SyslogState.CONNECTED:
            self._flush()
        elif self._state is SyslogState.DISCONNECTED and self._reconnect_timer is None:
            self._connect()

    async def close(self) -> None:
        """Cancel reconnects and tear the socket down; returns once it is closed."""
        if self._closed:
            return
        self._closed = True
        self._state = SyslogState.CLOSED
        if self._reconnect_timer is not None:
            self._reconnect_timer.cancel()
            self._reconnect_timer = None
        if self._connect_task is not None and not self._connect_task.done():
            self._connect_task.cancel()
            await asyncio.gather(self._connect_task, return_exceptions=True)
        self._connect_task = None
        if self._drain_task is not None:
            self._drain_task.cancel()
            await asyncio.gather(self._drain_task, return_exceptions=True)
            self._drain_task = None
        await self._connection.close()

    # ------------------------------------------------------------------
    # Connection lifecycle
    # ------------------------------------------------------------------

    def _connect(self) -> None:
        if self._closed or self._state is not SyslogState.DISCONNECTED:
            return
        match self._connection:
            case DatagramConnection():
                try:
                    self._connection.open()
                except Exception as exc:  # noqa: BLE001 – bad addresses are retried too
                    self._on_disconnect(exc)
                    return
                self._on_connected()
            case StreamConnection():
                self._state = SyslogState.CONNECTING
                try:
                    self._connect_task = self._scheduler.spawn(self._open_stream(self._connection))
                except RuntimeError:
                    # no running loop yet: the next log() call retries
                    self._state = SyslogState.DISCONNECTED

    async def _open_stream(self, connection: StreamConnection) -> None:
        try:
            await connection.open()
        except Exception as exc:  # noqa: BLE001 – every connect failure is retried
            self._connect_task = None
            self._on_disconnect(exc)
            return
        self._connect_task = None
        if self._closed:
            await connection.close()
            return
        self._on_connected()

    def _on_connected(self) -> None:
        self._state = SyslogState.CONNECTED
        self._retry_count = 0
        if self._config.debug:
            logger.info("syslog.connected", extra={"address": self._config.address, "pending": len(self._queue)})
        self._flush()

    def _on_connection_lost(self, exc: BaseException | None) -> None:
        if self._state is SyslogState.CONNECTED:
            self._on_disconnect(exc)

    def _on_disconnect(self, exc: BaseException | None) -> None:
        if self._closed:
            return
        self._cancel_drain()
        self._connection.abort()
        self._state = SyslogState.DISCONNECTED
        if self._reconnect_timer is not None:
            return
        self._retry_count += 1
        self._reconnects += 1
        delay = self._backoff.compute(self._retry_count)
        if self._config.debug:
            logger.warning(
                "syslog.disconnected",
                extra={"attempt": self._retry_count, "retry_in": delay, **error_fields(exc)},
            )
        try:
            self._reconnect_timer = self._scheduler.call_later(delay, self._on_reconnect)
        except RuntimeError:
            pass

    def _on_reconnect(self) -> None:
        self._reconnect_timer = None
        self._connect()

    def _flush(self) -> None:
        while self._queue and self._state is SyslogState.CONNECTED:
            if not self._connection.writable:
                self._wait_for_drain()
                return
            line = self._queue.popleft()
            try:
                self._connection.send(line)
            except OSError as exc:
                self._queue.push_front(line)
                self._on_disconnect(exc)
                return
            self._sent += 1

    def _wait_for_drain(self) -> None:
        if self._drain_task is not None:
            return
        if self._config.debug:
            logger.debug("syslog.backpressure", extra={"pending": len(self._queue)})
        try:
            self._drain_task = self._scheduler.spawn(self._drain())
        except RuntimeError:
            pass

    async def _drain(self) -> None:
        try:
            await self._connection.drain()
        except Exception as exc:  # noqa: BLE001
            self._drain_task = None
            if self._state is SyslogState.CONNECTED:
                self._on_disconnect(exc)
            return
        self._drain_task = None
        self._flush()

    def _cancel_drain(self) -> None:
        if self._drain_task is not None:
            self._drain_task.cancel()
            self._drain_task = None


__all__ = ["SyslogState", "SyslogTransport"]
