"""Config – LoggerSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from mp_logger.config.settings.base import Settings
from mp_logger.formatters.console import DEFAULT_FORMAT
from mp_logger.kernel.levels import Level


@dataclasses.dataclass
class LoggerSettings(Settings):
    """Which transports to build and at what threshold (``LOG_*``)."""

    _prefix: ClassVar[str] = "LOG"

    level: Level = Level.INFO
    console: bool = True
    colors: bool = True
    console_format: str = DEFAULT_FORMAT
    ndjson: bool = False
    loki: bool = False
    syslog: bool = False

    def _validate(self) -> None:
        self.level = Level.parse(self.level)


__all__ = ["LoggerSettings"]
