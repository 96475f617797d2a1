"""Formatters – human-readable console lines.

Placeholders
------------
UTC: ``{iso}`` ``{datetime}`` ``{date}`` ``{time}`` ``{utc}`` ``{ms}``

Local time: ``{datetime-local}`` ``{date-local}`` ``{time-local}``
``{full-local}``

Content: ``{type}`` ``{message}`` ``{metadata}`` (single-line JSON)
``{metadata-ml}`` (indented JSON)

Timestamps are taken from the entry, not from the moment of formatting.
"""
from __future__ import annotations

import json
import re
from email.utils import format_datetime
from typing import Any, Mapping

from mp_logger.formatters.colors import LEVEL_COLORS, Color, colorize
from mp_logger.kernel.entry import LogEntry

DEFAULT_FORMAT = "[{datetime-local}] {type} {message} {metadata}"

_PLACEHOLDER = re.compile(r"\{[a-z-]+\}")
_EMPTY_METADATA = re.compile(r" ?\{metadata(?:-ml)?\}")


def _timestamps(entry: LogEntry) -> dict[str, str]:
    utc = entry.datetime
    local = utc.astimezone()
    return {
        "{iso}": utc.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        "{datetime}": utc.strftime("%Y-%m-%d %H:%M:%S"),
        "{date}": utc.strftime("%Y-%m-%d"),
        "{time}": utc.strftime("%H:%M:%S"),
        "{utc}": format_datetime(utc, usegmt=True),
        "{ms}": str(entry.timestamp),
        "{datetime-local}": local.strftime("%Y-%m-%d %H:%M:%S"),
        "{date-local}": local.strftime("%Y-%m-%d"),
        "{time-local}": local.strftime("%H:%M:%S"),
        "{full-local}": local.strftime("%a %b %d %Y %H:%M:%S GMT%z (%Z)"),
    }


def _dump(metadata: Mapping[str, Any], indent: int | None = None) -> str:
    return json.dumps(dict(metadata), indent=indent, default=str, ensure_ascii=False)


def format_console(entry: LogEntry, fmt: str = DEFAULT_FORMAT, colors: bool = True) -> str:
    """Render *entry* through the *fmt* template.

    Unknown placeholders are left untouched.  ``{metadata}`` and
    ``{metadata-ml}`` (with one leading space) vanish when the entry has no
    metadata.
    """
    values = _timestamps(entry)
    level_name = entry.level.name
    message = entry.message
    if colors:
        color = LEVEL_COLORS[entry.level]
        values = {key: colorize(value, Color.BRIGHT_BLACK) for key, value in values.items()}
        level_name = colorize(level_name, Color.BOLD, color)
        message = colorize(message, color)
    values["{type}"] = level_name
    values["{message}"] = message

    if entry.metadata:
        single, multi = _dump(entry.metadata), _dump(entry.metadata, indent=2)
        if colors:
            single = colorize(single, Color.BRIGHT_BLACK)
            multi = colorize(multi, Color.BRIGHT_BLACK)
        values["{metadata}"] = single
        values["{metadata-ml}"] = multi
    else:
        fmt = _EMPTY_METADATA.sub("", fmt)

    # single pass: substituted text is never re-scanned for placeholders
    return _PLACEHOLDER.sub(lambda m: values.get(m.group(0), m.group(0)), fmt)


__all__ = ["DEFAULT_FORMAT", "format_console"]
