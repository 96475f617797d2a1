"""Syslog transport – RFC 3164/5424 lines over UDP, TCP or TLS."""
from mp_logger.formatters.syslog import SyslogFormat
from mp_logger.transports.syslog.config import SyslogConfig, SyslogProtocol, TLSOptions
from mp_logger.transports.syslog.connection import DatagramConnection, StreamConnection, build_ssl_context
from mp_logger.transports.syslog.transport import SyslogState, SyslogTransport

__all__ = [
    "DatagramConnection",
    "StreamConnection",
    "SyslogConfig",
    "SyslogFormat",
    "SyslogProtocol",
    "SyslogState",
    "SyslogTransport",
    "TLSOptions",
    "build_ssl_context",
]
