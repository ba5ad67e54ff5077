"""Tests for severity levels and level parsing"""

import pytest

from log_engine import SeverityLevel, parse_level
from log_engine.core.severity import coerce_level, try_parse_level, RESET_COLORS


class TestSeverityLevel:
    """Test severity ordering and rendering."""

    def test_levels_are_ordered(self):
        assert SeverityLevel.TRACE < SeverityLevel.DEBUG
        assert SeverityLevel.DEBUG < SeverityLevel.INFO
        assert SeverityLevel.INFO < SeverityLevel.WARNING
        assert SeverityLevel.WARNING < SeverityLevel.ERROR
        assert SeverityLevel.ERROR < SeverityLevel.FATAL

    def test_off_is_above_every_real_level(self):
        for level in SeverityLevel:
            if level is not SeverityLevel.OFF:
                assert level < SeverityLevel.OFF

    def test_str_is_upper_case_name(self):
        assert str(SeverityLevel.ERROR) == "ERROR"
        assert str(SeverityLevel.WARNING) == "WARNING"

    def test_color_codes(self):
        assert SeverityLevel.ERROR.color_code == "\033[31;0m"
        assert SeverityLevel.FATAL.color_code == "\033[31;1m"
        assert SeverityLevel.OFF.color_code == RESET_COLORS
        assert SeverityLevel.INFO.reset_code == RESET_COLORS


class TestParseLevel:
    """Test level parsing with fallback."""

    @pytest.mark.parametrize("text,expected", [
        ("trace", SeverityLevel.TRACE),
        ("debug", SeverityLevel.DEBUG),
        ("info", SeverityLevel.INFO),
        ("warning", SeverityLevel.WARNING),
        ("error", SeverityLevel.ERROR),
        ("fatal", SeverityLevel.FATAL),
        ("off", SeverityLevel.OFF),
    ])
    def test_names(self, text, expected):
        assert try_parse_level(text) is expected

    def test_names_are_case_sensitive(self):
        assert try_parse_level("WARNING") is None
        assert try_parse_level("Info") is None

    def test_numeric_ordinals(self):
        assert try_parse_level("0") is SeverityLevel.TRACE
        assert try_parse_level("3") is SeverityLevel.WARNING
        assert try_parse_level("5") is SeverityLevel.FATAL

    def test_numeric_off_is_rejected(self):
        assert try_parse_level("6") is None
        assert try_parse_level("42") is None

    def test_numeric_reads_leading_digits(self):
        assert try_parse_level("4xyz") is SeverityLevel.ERROR

    def test_unrecognized(self):
        assert try_parse_level("verbose9") is None
        assert try_parse_level("²") is None
        assert try_parse_level("3²") is SeverityLevel.WARNING
        assert try_parse_level("") is None
        assert try_parse_level("-1") is None

    def test_parse_level_falls_back(self):
        assert parse_level("verbose9", SeverityLevel.INFO) is SeverityLevel.INFO
        assert parse_level("error", SeverityLevel.INFO) is SeverityLevel.ERROR


class TestCoerceLevel:
    """Test conversion of API level arguments."""

    def test_enum_passthrough(self):
        assert coerce_level(SeverityLevel.DEBUG) is SeverityLevel.DEBUG

    def test_int_ordinals(self):
        assert coerce_level(2) is SeverityLevel.INFO
        assert coerce_level(6) is SeverityLevel.OFF
        assert coerce_level(7) is None

    def test_bool_is_rejected(self):
        assert coerce_level(True) is None

    def test_strings(self):
        assert coerce_level("fatal") is SeverityLevel.FATAL
        assert coerce_level("nope") is None

    def test_other_types(self):
        assert coerce_level(None) is None
        assert coerce_level(2.0) is None
