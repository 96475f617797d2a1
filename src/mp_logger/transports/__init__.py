"""Transports – sinks a Logger fans entries out to."""
from mp_logger.transports.console import ConsoleTransport
from mp_logger.transports.loki import BasicAuth, LokiConfig, LokiState, LokiTransport
from mp_logger.transports.ndjson import NDJsonTransport
from mp_logger.transports.syslog import (
    SyslogConfig,
    SyslogFormat,
    SyslogProtocol,
    SyslogState,
    SyslogTransport,
    TLSOptions,
)

__all__ = [
    "BasicAuth",
    "ConsoleTransport",
    "LokiConfig",
    "LokiState",
    "LokiTransport",
    "NDJsonTransport",
    "SyslogConfig",
    "SyslogFormat",
    "SyslogProtocol",
    "SyslogState",
    "SyslogTransport",
    "TLSOptions",
]
