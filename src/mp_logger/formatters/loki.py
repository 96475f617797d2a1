"""Formatters – Loki push streams.

A stream carries its label set and a single ``[nanoseconds, line]`` value::

    {"stream": {"level": "INFO", "app": "api"}, "values": [["1700000000000000000", "hi"]]}
"""
from __future__ import annotations

import json
from typing import Any, Mapping

from mp_logger.kernel.entry import LogEntry

LokiStream = dict[str, Any]


def _label_value(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, default=str, separators=(",", ":"))
    return str(value)


def build_labels(
    entry: LogEntry,
    static_labels: Mapping[str, Any] | None = None,
    max_label_count: int = 0,
) -> dict[str, str]:
    """Merge ``level``, *static_labels* and entry metadata into one label set.

    Later sources win on key conflicts.  When ``max_label_count`` is
    positive and exceeded, the result keeps ``level``, then the static
    labels in order, then per-entry labels in order until the cap is hit.
    """
    static = {k: _label_value(v) for k, v in (static_labels or {}).items() if k != "level"}
    per_entry = {k: _label_value(v) for k, v in (entry.metadata or {}).items() if k != "level"}

    merged: dict[str, str] = {"level": entry.level.name, **static, **per_entry}
    if max_label_count <= 0 or len(merged) <= max_label_count:
        return merged

    capped: dict[str, str] = {"level": entry.level.name}
    for key in static:
        if len(capped) >= max_label_count:
            break
        capped[key] = merged[key]
    for key in per_entry:
        if len(capped) >= max_label_count:
            break
        capped.setdefault(key, merged[key])
    return capped


def format_loki_stream(
    entry: LogEntry,
    static_labels: Mapping[str, Any] | None = None,
    max_label_count: int = 0,
) -> LokiStream:
    return {
        "stream": build_labels(entry, static_labels, max_label_count),
        "values": [[str(entry.timestamp * 1_000_000), entry.message]],
    }


def format_loki_push(streams: list[LokiStream]) -> dict[str, Any]:
    """Wrap queued streams into one push request body."""
    return {"streams": list(streams)}


__all__ = ["LokiStream", "build_labels", "format_loki_push", "format_loki_stream"]
