"""Loki transport – batching HTTP push with bounded retry.

State machine per instance::

    IDLE -> SCHEDULED -> SENDING -> IDLE
                            \\-> RETRY_SCHEDULED -> SENDING -> ...

Entries are queued as Loki streams.  A batch is the first ``batch_size``
queued streams; it stays in the queue while its request is in flight and
is removed only on success or once its retry budget is spent.  Only one
request is ever in flight, so a failed batch is always re-sent before any
newer entry.
"""
from __future__ import annotations

import asyncio
import base64
import enum
import logging
from typing import Any

from mp_logger.adapters.http.client import HttpxHttpClient
from mp_logger.delivery.backoff import ExponentialBackoff
from mp_logger.delivery.queue import BoundedQueue
from mp_logger.delivery.scheduler import AsyncioScheduler, ScheduledTask, Scheduler
from mp_logger.formatters.loki import LokiStream, format_loki_push, format_loki_stream
from mp_logger.kernel.entry import LogEntry
from mp_logger.kernel.errors.base import error_fields
from mp_logger.kernel.errors.config import MissingRequiredSettingError
from mp_logger.transports.loki.config import LokiConfig

logger = logging.getLogger(__name__)


class LokiState(str, enum.Enum):
    IDLE = "idle"
    SCHEDULED = "scheduled"
    SENDING = "sending"
    RETRY_SCHEDULED = "retry_scheduled"
    CLOSED = "closed"


class LokiTransport:
    """Ship entries to a Grafana Loki push endpoint.

    Parameters
    ----------
    config:
        Full :class:`LokiConfig`.  Alternatively pass its fields as keyword
        arguments (``LokiTransport(url="http://loki:3100", batch_size=50)``).
    scheduler:
        Timer/task port; defaults to the running asyncio loop.
    http_client:
        Client exposing ``async post(url, **kwargs)``.  When omitted an
        :class:`HttpxHttpClient` is created and closed by :meth:`close`.

    Raises
    ------
    MissingRequiredSettingError
        When no URL is configured.
    """

    def __init__(
        self,
        config: LokiConfig | None = None,
        *,
        scheduler: Scheduler | None = None,
        http_client: Any | None = None,
        **options: Any,
    ) -> None:
        if config is None:
            if not options.get("url"):
                raise MissingRequiredSettingError("url")
            config = LokiConfig(**options)
        self._config = config
        self._scheduler: Scheduler = scheduler or AsyncioScheduler()
        self._owns_client = http_client is None
        self._client = http_client or HttpxHttpClient(timeout=config.timeout)
        self._backoff = ExponentialBackoff(config.retry_base_delay, config.max_retry_delay)
        self._headers = self._build_headers(config)
        self._queue: BoundedQueue[LokiStream] = BoundedQueue(config.max_queue_size)

        self._sending = False
        self._inflight: asyncio.Future[None] | None = None
        self._linger_timer: ScheduledTask | None = None
        self._retry_timer: ScheduledTask | None = None
        self._retry_count = 0
        self._closed = False

        self._sent = 0
        self._dropped = 0
        self._retries = 0

    @staticmethod
    def _build_headers(config: LokiConfig) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if config.tenant_id:
            headers["X-Scope-OrgID"] = config.tenant_id
        if config.basic_auth is not None:
            token = f"{config.basic_auth.username}:{config.basic_auth.password}"
            headers["Authorization"] = "Basic " + base64.b64encode(token.encode("utf-8")).decode("ascii")
        return headers

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def config(self) -> LokiConfig:
        return self._config

    @property
    def state(self) -> LokiState:
        if self._closed:
            return LokiState.CLOSED
        if self._sending:
            return LokiState.SENDING
        if self._retry_timer is not None:
            return LokiState.RETRY_SCHEDULED
        if self._linger_timer is not None:
            return LokiState.SCHEDULED
        return LokiState.IDLE

    @property
    def retry_count(self) -> int:
        return self._retry_count

    @property
    def pending(self) -> list[LokiStream]:
        """Snapshot of queued streams, oldest first."""
        return list(self._queue)

    @property
    def stats(self) -> dict[str, int]:
        return {
            "sent": self._sent,
            "dropped": self._dropped,
            "evicted": self._queue.evicted,
            "pending": len(self._queue),
            "retries": self._retries,
        }

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def log(self, entry: LogEntry) -> None:
        if self._closed:
            return
        stream = format_loki_stream(entry, self._config.labels, self._config.max_label_count)
        if self._queue.append(stream) is not None and self._config.debug:
            logger.warning("loki.queue_full", extra={"max_queue_size": self._queue.maxsize})
        self._schedule()

    async def flush(self) -> None:
        """Send everything queued now.

        Returns early when a batch fails: the pending retry owns it.
        """
        while self._queue and not self._closed:
            self._cancel_linger()
            if self._inflight is not None and not self._inflight.done():
                await self._inflight
                continue
            if self._retry_timer is not None:
                return
            self._start_send()
            if not self._sending:
                return

    async def close(self) -> None:
        """Stop timers, make one last delivery attempt and release the client."""
        if self._closed:
            return
        self._closed = True
        self._cancel_linger()
        if self._retry_timer is not None:
            self._retry_timer.cancel()
            self._retry_timer = None
        if self._inflight is not None and not self._inflight.done():
            await asyncio.gather(self._inflight, return_exceptions=True)

        while self._queue:
            batch = self._queue.peek(self._config.batch_size)
            try:
                await self._push(batch)
            except Exception as exc:  # noqa: BLE001
                if self._config.debug:
                    logger.warning("loki.close_flush_failed", extra={"pending": len(self._queue), **error_fields(exc)})
                break
            self._sent += self._queue.remove_leading(batch)

        if self._owns_client:
            await self._client.aclose()

    # ------------------------------------------------------------------
    # Scheduling
    # ------------------------------------------------------------------

    def _schedule(self, immediate: bool = False) -> None:
        if self._closed or self._sending or self._retry_timer is not None or not self._queue:
            return
        if immediate or len(self._queue) >= self._config.batch_size:
            self._cancel_linger()
            self._start_send()
        elif self._linger_timer is None:
            try:
                self._linger_timer = self._scheduler.call_later(self._config.batch_timeout, self._on_linger)
            except RuntimeError:
                # no running loop: stay queued until a call made inside one
                pass

    def _start_send(self) -> None:
        batch = self._queue.peek(self._config.batch_size)
        self._sending = True
        try:
            self._inflight = self._scheduler.spawn(self._send(batch))
        except RuntimeError:
            self._sending = False

    def _on_linger(self) -> None:
        self._linger_timer = None
        self._schedule(immediate=True)

    def _on_retry(self) -> None:
        self._retry_timer = None
        self._schedule(immediate=True)

    def _cancel_linger(self) -> None:
        if self._linger_timer is not None:
            self._linger_timer.cancel()
            self._linger_timer = None

    # ------------------------------------------------------------------
    # Sending
    # ------------------------------------------------------------------

    async def _push(self, batch: list[LokiStream]) -> None:
        await self._client.post(self._config.push_url, json=format_loki_push(batch), headers=self._headers)

    async def _send(self, batch: list[LokiStream]) -> None:
        try:
            await self._push(batch)
        except Exception as exc:  # noqa: BLE001 – every delivery failure is retryable
            self._sending = False
            self._on_failure(batch, exc)
        else:
            self._sending = False
            self._on_success(batch)

    def _on_success(self, batch: list[LokiStream]) -> None:
        self._sent += self._queue.remove_leading(batch)
        self._retry_count = 0
        if self._config.debug:
            logger.debug("loki.batch_sent", extra={"size": len(batch), "pending": len(self._queue)})
        self._schedule()

    def _on_failure(self, batch: list[LokiStream], exc: Exception) -> None:
        if self._closed:
            return
        self._retry_count += 1
        if self._retry_count <= self._config.max_retries:
            self._retries += 1
            delay = self._backoff.compute(self._retry_count)
            if self._config.debug:
                logger.warning(
                    "loki.batch_failed",
                    extra={"attempt": self._retry_count, "retry_in": delay, **error_fields(exc)},
                )
            try:
                self._retry_timer = self._scheduler.call_later(delay, self._on_retry)
            except RuntimeError:
                pass
            return

        dropped = self._queue.remove_leading(batch)
        self._dropped += dropped
        self._retry_count = 0
        if self._config.debug:
            logger.error(
                "loki.batch_dropped",
                extra={"size": dropped, "attempts": self._config.max_retries + 1, **error_fields(exc)},
            )
        self._schedule()


__all__ = ["LokiState", "LokiTransport"]
