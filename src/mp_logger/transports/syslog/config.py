"""Syslog transport – configuration."""
from __future__ import annotations

import dataclasses
import enum
import os
import socket
from typing import ClassVar

from mp_logger.config.settings.base import Settings
from mp_logger.delivery.backoff import MAX_RETRY_DELAY
from mp_logger.formatters.syslog import SyslogFormat
from mp_logger.kernel.errors.config import InvalidSettingValueError


class SyslogProtocol(str, enum.Enum):
    """Socket flavour used to reach the daemon."""

    UDP = "udp"
    TCP = "tcp"
    TLS = "tls"

    @classmethod
    def _missing_(cls, value: object) -> SyslogProtocol | None:
        text = str(value).strip().lower()
        if text in ("tcp-tls", "tcp+tls", "tls"):
            return cls.TLS
        for member in cls:
            if member.value == text:
                return member
        return None

    @property
    def default_port(self) -> int:
        return 6514 if self is SyslogProtocol.TLS else 514


@dataclasses.dataclass(frozen=True)
class TLSOptions:
    """Client-side TLS material; certificate validation is left to :mod:`ssl`."""

    ca_file: str | None = None
    cert_file: str | None = None
    key_file: str | None = None
    verify: bool = True


@dataclasses.dataclass
class SyslogConfig(Settings):
    """Settings for :class:`~mp_logger.transports.syslog.SyslogTransport` (``SYSLOG_*``).

    ``port`` defaults to 514 (UDP/TCP) or 6514 (TLS) and ``format`` to the
    legacy RFC 3164 line.  Durations are seconds.
    """

    _prefix: ClassVar[str] = "SYSLOG"

    host: str = "localhost"
    port: int | None = None
    protocol: SyslogProtocol = SyslogProtocol.UDP
    facility: int = 1
    app_name: str = "python"
    pid: int = dataclasses.field(default_factory=os.getpid)
    hostname: str = dataclasses.field(default_factory=socket.gethostname)
    format: SyslogFormat = SyslogFormat.RFC3164
    tls: TLSOptions = dataclasses.field(default_factory=TLSOptions)
    max_queue_size: int = 1000
    retry_base_delay: float = 1.0
    max_retry_delay: float = MAX_RETRY_DELAY
    connect_timeout: float = 10.0
    debug: bool = False

    def _validate(self) -> None:
        try:
            self.protocol = SyslogProtocol(self.protocol)
        except ValueError as exc:
            raise InvalidSettingValueError("protocol", self.protocol, "expected udp, tcp or tls") from exc
        try:
            self.format = SyslogFormat(self.format)
        except ValueError as exc:
            raise InvalidSettingValueError("format", self.format, "expected rfc3164 or rfc5424") from exc
        if not 0 <= self.facility <= 23:
            raise InvalidSettingValueError("facility", self.facility, "must be between 0 and 23")
        if self.port is None:
            self.port = self.protocol.default_port
        elif not 0 < self.port < 65536:
            raise InvalidSettingValueError("port", self.port, "must be between 1 and 65535")
        if self.max_queue_size < 1:
            raise InvalidSettingValueError("max_queue_size", self.max_queue_size, "must be >= 1")
        for name in ("retry_base_delay", "max_retry_delay", "connect_timeout"):
            if getattr(self, name) < 0:
                raise InvalidSettingValueError(name, getattr(self, name), "must be >= 0")

    @property
    def address(self) -> tuple[str, int]:
        port = self.port if self.port is not None else self.protocol.default_port
        return self.host, port


__all__ = ["SyslogConfig", "SyslogProtocol", "TLSOptions"]
