"""Unit tests for severity levels."""
from __future__ import annotations

import pytest

from mp_logger.kernel import InvalidSettingValueError, Level


class TestLevelOrdering:
    def test_lower_value_is_more_severe(self) -> None:
        assert Level.ERROR < Level.WARN < Level.AUDIT < Level.INFO
        assert Level.INFO < Level.HTTP < Level.DEBUG < Level.VERBOSE < Level.SILLY

    def test_enabled_for_threshold(self) -> None:
        assert Level.ERROR.enabled_for(Level.INFO)
        assert Level.INFO.enabled_for(Level.INFO)
        assert not Level.DEBUG.enabled_for(Level.INFO)


class TestLevelParse:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("warn", Level.WARN),
            ("SILLY", Level.SILLY),
            (" info ", Level.INFO),
            (0, Level.ERROR),
            ("5", Level.DEBUG),
            (Level.HTTP, Level.HTTP),
        ],
    )
    def test_accepts_names_and_values(self, raw: object, expected: Level) -> None:
        assert Level.parse(raw) is expected  # type: ignore[arg-type]

    @pytest.mark.parametrize("raw", ["loud", 42, "-1", True])
    def test_rejects_unknown(self, raw: object) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            Level.parse(raw)  # type: ignore[arg-type]
        assert exc_info.value.setting_name == "level"
