"""Formatters – syslog lines (RFC 3164 and RFC 5424).

``priority = facility << 3 | severity``; severity comes from
:data:`SYSLOG_SEVERITY`.  Output is always a single line: CR and LF are
escaped so a stream framed by newlines cannot be split mid-message.
"""
from __future__ import annotations

import enum
import json
import re
from typing import Any, Mapping

from mp_logger.kernel.entry import LogEntry
from mp_logger.kernel.levels import Level

SYSLOG_SEVERITY: dict[Level, int] = {
    Level.ERROR: 3,
    Level.WARN: 4,
    Level.AUDIT: 5,
    Level.INFO: 6,
    Level.HTTP: 6,
    Level.DEBUG: 7,
    Level.VERBOSE: 7,
    Level.SILLY: 7,
}

SD_ID = "meta@1"

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
_SD_NAME_INVALID = re.compile(r'[^!-~]|[= \]"]')


class SyslogFormat(str, enum.Enum):
    """Syslog line format."""

    RFC3164 = "rfc3164"
    RFC5424 = "rfc5424"

    @classmethod
    def _missing_(cls, value: object) -> SyslogFormat | None:
        text = str(value).strip().lower()
        for member in cls:
            if text in (member.value, member.value.removeprefix("rfc")):
                return member
        return None


def priority(level: Level, facility: int) -> int:
    return (facility << 3) | SYSLOG_SEVERITY[level]


def _single_line(text: str) -> str:
    return text.replace("\r", "\\r").replace("\n", "\\n")


def _sd_value(value: Any) -> str:
    text = value if isinstance(value, str) else json.dumps(value, default=str, ensure_ascii=False)
    return text.replace("\\", "\\\\").replace('"', '\\"').replace("]", "\\]")


def structured_data(metadata: Mapping[str, Any] | None) -> str:
    """Render metadata as one SD-ELEMENT, or ``-`` when there is none."""
    if not metadata:
        return "-"
    params = " ".join(
        f'{_SD_NAME_INVALID.sub("_", str(key))[:32]}="{_sd_value(value)}"'
        for key, value in metadata.items()
    )
    return f"[{SD_ID} {params}]"


def format_rfc3164(entry: LogEntry, *, facility: int, hostname: str, app_name: str, pid: int) -> str:
    """``<pri>Mmm dd HH:MM:SS host app[pid]: message {json}`` in local time."""
    local = entry.datetime.astimezone()
    timestamp = f"{_MONTHS[local.month - 1]} {local.day:2d} {local:%H:%M:%S}"
    message = entry.message
    if entry.metadata:
        message = f"{message} {json.dumps(dict(entry.metadata), default=str, ensure_ascii=False)}"
    line = f"<{priority(entry.level, facility)}>{timestamp} {hostname} {app_name}[{pid}]: {message}"
    return _single_line(line)


def format_rfc5424(entry: LogEntry, *, facility: int, hostname: str, app_name: str, pid: int) -> str:
    """``<pri>1 iso host app pid - SD message``."""
    timestamp = entry.datetime.isoformat(timespec="milliseconds").replace("+00:00", "Z")
    line = (
        f"<{priority(entry.level, facility)}>1 {timestamp} {hostname or '-'} {app_name or '-'} "
        f"{pid} - {structured_data(entry.metadata)} {entry.message}"
    )
    return _single_line(line)


def format_syslog(
    entry: LogEntry,
    *,
    facility: int = 1,
    hostname: str,
    app_name: str,
    pid: int,
    fmt: SyslogFormat = SyslogFormat.RFC5424,
) -> str:
    match SyslogFormat(fmt):
        case SyslogFormat.RFC3164:
            return format_rfc3164(entry, facility=facility, hostname=hostname, app_name=app_name, pid=pid)
        case SyslogFormat.RFC5424:
            return format_rfc5424(entry, facility=facility, hostname=hostname, app_name=app_name, pid=pid)


__all__ = [
    "SD_ID",
    "SYSLOG_SEVERITY",
    "SyslogFormat",
    "format_rfc3164",
    "format_rfc5424",
    "format_syslog",
    "priority",
    "structured_data",
]
