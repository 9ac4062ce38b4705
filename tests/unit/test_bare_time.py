"""Unit tests for the BareTime value and its formatter."""

from __future__ import annotations

from datetime import UTC, datetime, time, timedelta, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import pytest

from stdcodes import InvalidFormatError
from stdcodes.iso import BareTime, to_iso8601_time
from stdcodes.iso import bare_time as bare_time_module

# =============================================================================
# Formatter Tests
# =============================================================================


def _offset(hours: int, minutes: int = 0) -> timezone:
    sign = -1 if hours < 0 else 1
    return timezone(sign * timedelta(hours=abs(hours), minutes=minutes))


def _zone(key: str) -> ZoneInfo:
    try:
        return ZoneInfo(key)
    except ZoneInfoNotFoundError:
        pytest.skip(f"time zone data for {key} not available")


class TestToIso8601Time:
    """Tests for to_iso8601_time."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (time(14, 30, 15, tzinfo=UTC), "T14:30:15Z"),
            (time(8, 15, 5, tzinfo=_offset(2)), "T08:15:05+02:00"),
            (time(20, 0, 0, tzinfo=_offset(-5)), "T20:00:00-05:00"),
            (time(10, 0, 0, tzinfo=_offset(5, 30)), "T10:00:00+05:30"),
            (time(12, 30, 0, tzinfo=_offset(-9, 45)), "T12:30:00-09:45"),
            (time(1, 2, 3, tzinfo=_offset(-7)), "T01:02:03-07:00"),
            (time(9, 0, 0), "T09:00:00Z"),
            (time(9, 0, 0, tzinfo=_offset(0)), "T09:00:00Z"),
            (time(23, 59, 59, 999999), "T23:59:59Z"),
        ],
        ids=["utc", "plus_two", "minus_five", "half_hour", "minus_quarter", "minus_seven", "naive",
             "zero_offset", "fraction_dropped"],
    )
    def test_format(self, value: time, expected: str) -> None:
        """Test formatting of times with and without offsets."""
        assert to_iso8601_time(value) == expected

    def test_format_datetime(self) -> None:
        """Test that datetimes format their time of day."""
        assert to_iso8601_time(datetime(2024, 6, 1, 7, 45, 0, tzinfo=_offset(1))) == "T07:45:00+01:00"

    def test_zero_offset_never_plus_zero(self) -> None:
        """Test that a zero offset always formats as Z."""
        assert not to_iso8601_time(time(0, 0, tzinfo=timezone(timedelta(0)))).endswith("+00:00")


# =============================================================================
# BareTime Tests
# =============================================================================


class TestBareTimeConstruction:
    """Tests for BareTime construction."""

    def test_constants(self) -> None:
        """Test the time designator constants."""
        assert bare_time_module.TIME == "T"
        assert bare_time_module.TIME_ZONE == "Z"
        assert bare_time_module.FORMAT == "%H:%M:%S"
        assert bare_time_module.MIDNIGHT == "T00:00:00"

    def test_default_is_midnight(self) -> None:
        """Test that the default value is a naive midnight."""
        value = BareTime()
        assert value.iso == "T00:00:00"
        assert (value.hours, value.minutes, value.seconds) == (0, 0, 0)
        assert value.timezone is None

    def test_from_utc_string(self) -> None:
        """Test parsing a UTC time."""
        value = BareTime("T14:30:15Z")
        assert (value.hours, value.minutes, value.seconds) == (14, 30, 15)
        assert value.iso == "T14:30:15Z"
        assert value.timezone is UTC

    def test_from_offset_string(self) -> None:
        """Test parsing a time with a UTC offset."""
        value = BareTime("T08:15:30+02:00")
        assert (value.hours, value.minutes, value.seconds) == (8, 15, 30)
        assert value.iso == "T08:15:30+02:00"
        assert value.time.utcoffset() == timedelta(hours=2)

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("23:45:01Z", "T23:45:01Z"),
            ("08:15", "T08:15:00Z"),
            ("T08", "T08:00:00Z"),
            ("20:00-0500", "T20:00:00-05:00"),
            ("T12:34:56.789", "T12:34:56Z"),
            ("T12:30:00-09:45", "T12:30:00-09:45"),
        ],
        ids=["missing_t", "no_seconds", "hours_only", "compact_offset", "fraction", "negative_quarter"],
    )
    def test_text_is_canonicalised(self, text: str, expected: str) -> None:
        """Test that text is always reformatted."""
        assert BareTime(text).iso == expected

    def test_fraction_kept_on_time(self) -> None:
        """Test that fractional seconds survive on the time value."""
        assert BareTime("T12:34:56.789").time.microsecond == 789000
        assert BareTime("T12:34:56.1234567").time.microsecond == 123456

    def test_from_time(self) -> None:
        """Test construction from a time value."""
        value = BareTime(time(15, 45, tzinfo=UTC))
        assert value.iso == "T15:45:00Z"
        assert value.to_time() == time(15, 45, tzinfo=UTC)

    def test_from_datetime(self) -> None:
        """Test that a datetime contributes its time of day and offset."""
        value = BareTime(datetime(2024, 1, 1, 15, 45, 0, tzinfo=_offset(-3)))
        assert value.iso == "T15:45:00-03:00"
        assert isinstance(value.time, time)
        assert value.time.utcoffset() == timedelta(hours=-3)

    def test_from_naive_datetime(self) -> None:
        """Test that a naive datetime gives a naive time."""
        value = BareTime(datetime(2024, 1, 1, 6, 5, 4))
        assert value.time == time(6, 5, 4)
        assert value.timezone is None

    @pytest.mark.parametrize(
        "text",
        ["INVALID", "T", "", "T24:00:00", "T12:60:00", "T12:00:60", "T12:00:00+24:00", "T12:00:00+05:60",
         "T1:00:00", "T12:00:00 Z", "t12:00:00"],
        ids=["garbage", "bare_t", "empty", "hour_24", "minute_60", "second_60", "offset_hour", "offset_minute",
             "single_digit_hour", "space", "lowercase_t"],
    )
    def test_invalid_string(self, text: str) -> None:
        """Test that malformed text raises InvalidFormatError."""
        with pytest.raises(InvalidFormatError, match="Invalid ISO 8601 time") as exc_info:
            BareTime(text)
        assert exc_info.value.value == text

    def test_invalid_type(self) -> None:
        """Test that unsupported sources raise TypeError."""
        with pytest.raises(TypeError, match="Cannot build a BareTime from int"):
            BareTime(1200)  # type: ignore[arg-type]


class TestBareTimeState:
    """Tests for the synchronised iso and time fields."""

    def test_set_iso(self) -> None:
        """Test that assigning text updates the time."""
        value = BareTime()
        value.iso = "T23:59:59+01:00"
        assert (value.hours, value.minutes, value.seconds) == (23, 59, 59)
        assert value.iso == "T23:59:59+01:00"

    def test_set_time(self) -> None:
        """Test that assigning a time regenerates the text."""
        value = BareTime()
        value.time = time(12, 34, 56, tzinfo=UTC)
        assert value.iso == "T12:34:56Z"
        value.set_time(datetime(2024, 1, 1, 1, 2, 3, tzinfo=_offset(4)))
        assert value.iso == "T01:02:03+04:00"

    def test_failed_set_keeps_state(self) -> None:
        """Test that a rejected assignment leaves the previous value intact."""
        value = BareTime("T10:00:00Z")
        with pytest.raises(InvalidFormatError):
            value.iso = "T25:00:00"
        assert value.iso == "T10:00:00Z"
        assert value.hours == 10

    def test_set_time_wrong_type(self) -> None:
        """Test that assigning a non-time is refused without changing state."""
        value = BareTime("T10:00:00Z")
        with pytest.raises(TypeError, match="Expected a time or datetime"):
            value.time = "T11:00:00Z"  # type: ignore[assignment]
        assert value.iso == "T10:00:00Z"

    def test_str_and_repr(self) -> None:
        """Test string conversions."""
        value = BareTime("T07:00:00Z")
        assert str(value) == "T07:00:00Z"
        assert value.to_text() == "T07:00:00Z"
        assert repr(value) == "BareTime('T07:00:00Z')"

    def test_equality(self) -> None:
        """Test that equality needs the same time and UTC offset."""
        assert BareTime("T07:00:00Z") == BareTime("07:00Z")
        assert BareTime("T07:00:00Z") != BareTime("T07:00:00+01:00")
        assert BareTime("T08:00:00+01:00") != BareTime("T07:00:00Z")
        assert BareTime("T07:00:00Z") != "T07:00:00Z"

    def test_default_equals_parsed_naive_midnight(self) -> None:
        """Test that the default midnight equals a parsed naive midnight despite its shorter text."""
        parsed = BareTime("T00:00:00")
        assert parsed.iso == "T00:00:00Z"
        assert BareTime() == parsed
        assert BareTime() == BareTime(time())
        assert BareTime() != BareTime("T00:00:00Z")

    def test_named_zone_time_rejected(self) -> None:
        """Test that a time in a named zone is refused without changing state."""
        value = BareTime("T10:00:00+02:00")
        with pytest.raises(ValueError, match="no fixed UTC offset"):
            value.time = time(12, 0, tzinfo=_zone("Europe/Paris"))
        assert value.iso == "T10:00:00+02:00"
        assert value.time == time(10, 0, tzinfo=_offset(2))

    def test_named_zone_time_rejected_on_construction(self) -> None:
        """Test that construction from a time in a named zone raises ValueError."""
        with pytest.raises(ValueError, match="no fixed UTC offset"):
            BareTime(time(12, 0, tzinfo=_zone("Europe/Paris")))

    def test_named_zone_datetime_reduced_to_offset(self) -> None:
        """Test that a datetime in a named zone keeps text and time in agreement."""
        value = BareTime(datetime(2024, 7, 1, 12, 0, tzinfo=_zone("Europe/Paris")))
        assert value.iso == "T12:00:00+02:00"
        assert value.time.utcoffset() == timedelta(hours=2)
        assert BareTime(value.iso) == value
