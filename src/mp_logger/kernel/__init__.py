"""Kernel – levels, entries, clocks, errors and the transport contract."""

from mp_logger.kernel.contracts import ClosableTransport, Transport
from mp_logger.kernel.entry import LogEntry
from mp_logger.kernel.errors import (
    BaseError,
    ConfigError,
    ExternalServiceError,
    InfrastructureError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    TimeoutError,
)
from mp_logger.kernel.levels import Level
from mp_logger.kernel.time import Clock, FrozenClock, SystemClock

__all__ = [
    "BaseError",
    "Clock",
    "ClosableTransport",
    "ConfigError",
    "ExternalServiceError",
    "FrozenClock",
    "InfrastructureError",
    "InvalidSettingValueError",
    "Level",
    "LogEntry",
    "MissingRequiredSettingError",
    "SystemClock",
    "TimeoutError",
    "Transport",
]
