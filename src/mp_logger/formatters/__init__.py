"""Formatters – pure functions rendering a LogEntry for a destination."""
from mp_logger.formatters.console import DEFAULT_FORMAT, format_console
from mp_logger.formatters.loki import LokiStream, build_labels, format_loki_push, format_loki_stream
from mp_logger.formatters.ndjson import format_ndjson
from mp_logger.formatters.syslog import SYSLOG_SEVERITY, SyslogFormat, format_syslog, structured_data

__all__ = [
    "DEFAULT_FORMAT",
    "LokiStream",
    "SYSLOG_SEVERITY",
    "SyslogFormat",
    "build_labels",
    "format_console",
    "format_loki_push",
    "format_loki_stream",
    "format_ndjson",
    "format_syslog",
    "structured_data",
]
