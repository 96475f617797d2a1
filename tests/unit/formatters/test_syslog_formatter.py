"""Unit tests for syslog line formatting."""
from __future__ import annotations

import re

import pytest

from mp_logger.formatters import SYSLOG_SEVERITY, SyslogFormat, format_syslog, structured_data
from mp_logger.formatters.syslog import priority
from mp_logger.kernel import Level, LogEntry

TS = 1_700_000_000_123


def _line(entry: LogEntry, fmt: SyslogFormat, facility: int = 1) -> str:
    return format_syslog(entry, facility=facility, hostname="host", app_name="app", pid=123, fmt=fmt)


class TestPriority:
    @pytest.mark.parametrize(
        ("level", "severity"),
        [
            (Level.ERROR, 3),
            (Level.WARN, 4),
            (Level.AUDIT, 5),
            (Level.INFO, 6),
            (Level.HTTP, 6),
            (Level.DEBUG, 7),
            (Level.VERBOSE, 7),
            (Level.SILLY, 7),
        ],
    )
    def test_severity_map(self, level: Level, severity: int) -> None:
        assert SYSLOG_SEVERITY[level] == severity

    def test_priority_combines_facility(self) -> None:
        assert priority(Level.INFO, 1) == 14
        assert priority(Level.ERROR, 16) == 131


class TestRfc5424:
    def test_without_metadata(self) -> None:
        line = _line(LogEntry("hello", Level.INFO, TS), SyslogFormat.RFC5424)
        assert line == "<14>1 2023-11-14T22:13:20.123Z host app 123 - - hello"

    def test_structured_data(self) -> None:
        line = _line(LogEntry("hello", Level.WARN, TS, {"user": "42"}), SyslogFormat.RFC5424)
        assert line == '<12>1 2023-11-14T22:13:20.123Z host app 123 - [meta@1 user="42"] hello'

    def test_sd_values_escaped(self) -> None:
        assert structured_data({"q": 'a"b]c\\'}) == '[meta@1 q="a\\"b\\]c\\\\"]'

    def test_sd_names_sanitised(self) -> None:
        assert structured_data({"a b=c": 1}) == '[meta@1 a_b_c="1"]'

    def test_no_metadata_is_dash(self) -> None:
        assert structured_data(None) == "-"
        assert structured_data({}) == "-"


class TestRfc3164:
    def test_layout(self) -> None:
        line = _line(LogEntry("hello", Level.INFO, TS, {"user": "42"}), SyslogFormat.RFC3164)
        assert re.fullmatch(
            r'<14>[A-Z][a-z]{2} [ \d]\d \d{2}:\d{2}:\d{2} host app\[123\]: hello \{"user": "42"\}',
            line,
        )

    def test_without_metadata(self) -> None:
        line = _line(LogEntry("hello", Level.ERROR, TS), SyslogFormat.RFC3164)
        assert line.endswith(" host app[123]: hello")


class TestSingleLine:
    @pytest.mark.parametrize("fmt", list(SyslogFormat))
    def test_newlines_escaped(self, fmt: SyslogFormat) -> None:
        line = _line(LogEntry("a\nb\r\nc", Level.INFO, TS, {"k": "x\ny"}), fmt)
        assert "\n" not in line and "\r" not in line
        assert "a\\nb\\r\\nc" in line


class TestSyslogFormatParsing:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("rfc3164", SyslogFormat.RFC3164), ("3164", SyslogFormat.RFC3164), ("RFC5424", SyslogFormat.RFC5424)],
    )
    def test_aliases(self, raw: str, expected: SyslogFormat) -> None:
        assert SyslogFormat(raw) is expected
