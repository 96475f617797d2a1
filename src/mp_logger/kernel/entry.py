"""Kernel – LogEntry value object."""
from __future__ import annotations

import dataclasses
from datetime import UTC, datetime
from types import MappingProxyType
from typing import Any, Mapping

from mp_logger.kernel.levels import Level


@dataclasses.dataclass(frozen=True)
class LogEntry:
    """A single log record, immutable once created.

    ``timestamp`` is milliseconds since the Unix epoch.  ``metadata`` is
    copied and exposed as a read-only mapping, so neither the caller nor a
    transport can change it after construction.
    """

    message: str
    level: Level
    timestamp: int
    metadata: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        if self.metadata is not None:
            object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    @property
    def datetime(self) -> datetime:
        """Timestamp as an aware UTC datetime."""
        return datetime.fromtimestamp(self.timestamp / 1000, tz=UTC)

    @property
    def has_metadata(self) -> bool:
        return bool(self.metadata)

    @classmethod
    def create(
        cls,
        message: str,
        level: Level,
        metadata: Mapping[str, Any] | None = None,
        *,
        timestamp: int | None = None,
    ) -> LogEntry:
        """Build an entry stamped with the current wall-clock time."""
        if timestamp is None:
            timestamp = int(datetime.now(UTC).timestamp() * 1000)
        return cls(message=message, level=level, timestamp=timestamp, metadata=metadata)


__all__ = ["LogEntry"]
