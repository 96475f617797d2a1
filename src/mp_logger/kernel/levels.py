"""Kernel – severity levels."""
from __future__ import annotations

import enum

from mp_logger.kernel.errors.config import InvalidSettingValueError


class Level(enum.IntEnum):
    """Ordered severity levels.

    Lower value means higher severity: a logger configured at ``INFO``
    emits ``ERROR``, ``WARN``, ``AUDIT`` and ``INFO`` entries and drops the
    rest.
    """

    ERROR = 0
    WARN = 1
    AUDIT = 2
    INFO = 3
    HTTP = 4
    DEBUG = 5
    VERBOSE = 6
    SILLY = 7

    @classmethod
    def parse(cls, value: Level | str | int) -> Level:
        """Return the level named or numbered by *value*.

        Accepts a :class:`Level`, its name in any case (``"warn"``) or its
        integer value (``1`` or ``"1"``).

        Raises
        ------
        InvalidSettingValueError
            When *value* does not identify a level.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            text = value.strip()
            if text.isdigit():
                return cls.parse(int(text))
            try:
                return cls[text.upper()]
            except KeyError:
                pass
        elif isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                pass
        raise InvalidSettingValueError(
            "level", value, f"expected one of {', '.join(m.name for m in cls)}"
        )

    def enabled_for(self, threshold: Level) -> bool:
        """True when an entry at this level passes a *threshold* filter."""
        return self <= threshold


__all__ = ["Level"]
