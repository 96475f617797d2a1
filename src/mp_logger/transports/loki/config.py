"""Loki transport – configuration."""
from __future__ import annotations

import dataclasses
from typing import Any, ClassVar

from mp_logger.config.settings.base import Settings
from mp_logger.delivery.backoff import MAX_RETRY_DELAY
from mp_logger.kernel.errors.config import InvalidSettingValueError, MissingRequiredSettingError

PUSH_PATH = "/loki/api/v1/push"


@dataclasses.dataclass(frozen=True)
class BasicAuth:
    username: str
    password: str

    def __repr__(self) -> str:
        return f"BasicAuth(username={self.username!r}, password='***')"


@dataclasses.dataclass
class LokiConfig(Settings):
    """Settings for :class:`~mp_logger.transports.loki.LokiTransport` (``LOKI_*``).

    Durations are in seconds.  ``url`` is the server base URL; pushes go to
    ``{url}/loki/api/v1/push`` unless the URL already ends with that path.
    """

    _prefix: ClassVar[str] = "LOKI"

    url: str
    labels: dict[str, str] = dataclasses.field(default_factory=dict)
    basic_auth: BasicAuth | None = None
    tenant_id: str | None = None
    max_label_count: int = 50
    batch_size: int = 10
    batch_timeout: float = 5.0
    max_queue_size: int = 10_000
    max_retries: int = 5
    retry_base_delay: float = 1.0
    max_retry_delay: float = MAX_RETRY_DELAY
    timeout: float = 10.0
    debug: bool = False

    def _validate(self) -> None:
        if not self.url or not self.url.strip():
            raise MissingRequiredSettingError("url")
        self.url = self.url.strip().rstrip("/")
        self.labels = {str(k): str(v) for k, v in (self.labels or {}).items()}
        self._require(self.batch_size >= 1, "batch_size", self.batch_size, "must be >= 1")
        self._require(self.max_queue_size >= 1, "max_queue_size", self.max_queue_size, "must be >= 1")
        self._require(self.max_retries >= 0, "max_retries", self.max_retries, "must be >= 0")
        self._require(self.max_label_count >= 0, "max_label_count", self.max_label_count, "must be >= 0")
        for name in ("batch_timeout", "retry_base_delay", "max_retry_delay", "timeout"):
            value = getattr(self, name)
            self._require(value >= 0, name, value, "must be >= 0")

    @staticmethod
    def _require(ok: bool, name: str, value: Any, reason: str) -> None:
        if not ok:
            raise InvalidSettingValueError(name, value, reason)

    @property
    def push_url(self) -> str:
        return self.url if self.url.endswith(PUSH_PATH) else self.url + PUSH_PATH


__all__ = ["BasicAuth", "LokiConfig", "PUSH_PATH"]
