"""Unit tests for ISO 8601 duration and time validation."""

from __future__ import annotations

import pytest

from stdcodes.iso import is_iso8601_duration, is_iso8601_time
from stdcodes.iso.validation import validate_by_parsing, validate_strict

# =============================================================================
# Duration Validation Tests
# =============================================================================

VALID_IN_BOTH_MODES = [
    "P1Y", "P2M", "P3D", "P1Y2M3D", "PT1H", "PT30M", "PT45S", "PT2H30M15S", "P1Y2M3DT4H5M6S",
    "P5DT12H", "P1YT30M", "P1W", "P4W", "P52W", "P0D", "PT0S", "P0Y", "P999Y", "P100Y50M999D",
    "PT9999H", "P1Y3D", "P2MT4H", "PT2H45S",
]

INVALID_IN_BOTH_MODES = [
    "", "INVALID", "1Y2M3D", "P", "PT", "D5", "PY1", "P1Y2", "P1Y2M3", "PT1H2", "P T", "P1Y T1H", "p1y",
    "P1.5Y", "P2.5M", "P3.5D", "PT1.5H", "PT30.5M", "P1D2Y", "P1M2Y", "PT1M2H", "P1YT", "P5DT", "-P1D",
]


class TestDurationValidation:
    """Tests for is_iso8601_duration in both modes."""

    @pytest.mark.parametrize("text", VALID_IN_BOTH_MODES)
    def test_valid(self, text: str) -> None:
        """Test durations accepted by the parser and the grammar."""
        assert is_iso8601_duration(text)
        assert is_iso8601_duration(text, strict=True)

    @pytest.mark.parametrize("text", INVALID_IN_BOTH_MODES)
    def test_invalid(self, text: str) -> None:
        """Test durations rejected by the parser and the grammar."""
        assert not is_iso8601_duration(text)
        assert not is_iso8601_duration(text, strict=True)

    @pytest.mark.parametrize(
        "text", ["PT1.5S", "PT30.25S", "PT0.001S"], ids=["one_and_half", "two_decimals", "milliseconds"]
    )
    def test_fractional_seconds_strict_only(self, text: str) -> None:
        """Test that fractional seconds pass the grammar but not the parser."""
        assert validate_strict(text)
        assert not validate_by_parsing(text)

    def test_alternative_format_parser_only(self) -> None:
        """Test that the alternative format passes the parser but not the grammar."""
        assert validate_by_parsing("P0001-02-03T04:05:06")
        assert not validate_strict("P0001-02-03T04:05:06")

    def test_non_string(self) -> None:
        """Test that non-string input is invalid in both modes."""
        assert not is_iso8601_duration(None)  # type: ignore[arg-type]
        assert not is_iso8601_duration(None, strict=True)  # type: ignore[arg-type]


# =============================================================================
# Time Validation Tests
# =============================================================================


class TestTimeValidation:
    """Tests for is_iso8601_time."""

    @pytest.mark.parametrize(
        "text",
        ["T00:00:00", "T23:59:59", "T14:30:00Z", "T08:15:30+02:00", "T12:34:56.789", "T08:15:30-0530", "T08"],
        ids=["midnight", "end_of_day", "utc", "offset", "fraction", "compact_offset", "hours_only"],
    )
    def test_valid_in_both_modes(self, text: str) -> None:
        """Test times with a leading T."""
        assert is_iso8601_time(text)
        assert is_iso8601_time(text, strict=True)

    def test_missing_t(self) -> None:
        """Test that the leading T is only required in strict mode."""
        assert is_iso8601_time("14:30:00")
        assert not is_iso8601_time("14:30:00", strict=True)

    @pytest.mark.parametrize(
        "text",
        ["INVALID", "T24:00:00", "T12:60:00", "T12:00:60", "T", "", "T12:00:00+2:00", "12:00:00ZZ"],
        ids=["garbage", "hour_24", "minute_60", "second_60", "bare_t", "empty", "short_offset", "double_zone"],
    )
    def test_invalid(self, text: str) -> None:
        """Test times rejected in both modes."""
        assert not is_iso8601_time(text)
        assert not is_iso8601_time(text, strict=True)
