"""Formatters – ANSI colour codes."""
from __future__ import annotations

import enum

from mp_logger.kernel.levels import Level


class Color(str, enum.Enum):
    """ANSI escape sequences for terminal output."""

    RESET = "\x1b[0m"
    BOLD = "\x1b[1m"
    RED = "\x1b[31m"
    GREEN = "\x1b[32m"
    YELLOW = "\x1b[33m"
    BLUE = "\x1b[34m"
    MAGENTA = "\x1b[35m"
    CYAN = "\x1b[36m"
    BRIGHT_BLACK = "\x1b[90m"
    BRIGHT_YELLOW = "\x1b[93m"


LEVEL_COLORS: dict[Level, Color] = {
    Level.ERROR: Color.RED,
    Level.WARN: Color.BRIGHT_YELLOW,
    Level.AUDIT: Color.MAGENTA,
    Level.INFO: Color.CYAN,
    Level.HTTP: Color.BLUE,
    Level.DEBUG: Color.BRIGHT_BLACK,
    Level.VERBOSE: Color.BLUE,
    Level.SILLY: Color.BRIGHT_BLACK,
}


def colorize(text: str, *codes: Color) -> str:
    return "".join(code.value for code in codes) + text + Color.RESET.value


__all__ = ["Color", "LEVEL_COLORS", "colorize"]
