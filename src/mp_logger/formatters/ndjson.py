"""Formatters – newline-delimited JSON."""
from __future__ import annotations

import json
from typing import Any

from mp_logger.kernel.entry import LogEntry


def format_ndjson(entry: LogEntry) -> str:
    """One compact JSON object per entry: ``time``, ``level``, ``msg``, then metadata.

    Metadata keys are merged at the top level and may shadow the fixed keys.
    """
    payload: dict[str, Any] = {
        "time": entry.datetime.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        "level": int(entry.level),
        "msg": entry.message,
    }
    if entry.metadata:
        payload.update(entry.metadata)
    return json.dumps(payload, separators=(",", ":"), default=str, ensure_ascii=False)


__all__ = ["format_ndjson"]
