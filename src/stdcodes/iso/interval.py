"""Calendar interval primitive for ISO 8601 durations.

This module contains the Interval class, a calendar-aware span of time
expressed in years, months, days, hours, minutes and seconds. It provides:
- A permissive ISO 8601 duration parser (designator and alternative formats)
- Decomposition of timedelta values and of the difference between two dates
- Calendar arithmetic on date and datetime values

Calendar arithmetic rules:
    Years and months move the wall-clock year and month and keep the day
    number. A day number past the end of the target month overflows into the
    following month, so 2024-01-31 + P1M is 2024-03-02. Days are then added
    on the wall clock. Hours, minutes and seconds are added as elapsed time;
    for aware datetimes this happens in UTC so daylight saving transitions
    are honoured.

Reference: ISO 8601-1:2019, 5.5.2 (durations)
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, UTC, date, datetime, timedelta
from typing import Self, TypeVar

from ..exceptions import InvalidFormatError

T = TypeVar("T", bound=date)

# =============================================================================
# Interval Constants
# =============================================================================


SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400
DAYS_PER_WEEK = 7
MONTHS_PER_YEAR = 12

# Designator format: PnYnMnWnDTnHnMnS, integer components only
_DESIGNATOR_PATTERN = re.compile(
    r"P(?:(?P<years>\d+)Y)?(?:(?P<months>\d+)M)?(?:(?P<weeks>\d+)W)?(?:(?P<days>\d+)D)?"
    r"(?:T(?:(?P<hours>\d+)H)?(?:(?P<minutes>\d+)M)?(?:(?P<seconds>\d+)S)?)?",
    re.ASCII,
)

# Alternative format: PYYYY-MM-DDTHH:MM:SS
_ALTERNATIVE_PATTERN = re.compile(
    r"P(?P<years>\d{4})-(?P<months>\d{2})-(?P<days>\d{2})T(?P<hours>\d{2}):(?P<minutes>\d{2}):(?P<seconds>\d{2})",
    re.ASCII,
)


# =============================================================================
# Calendar Helpers
# =============================================================================


def _shift_months(point: date, months: int) -> date:
    """Move ``point`` by a signed number of months, overflowing the day number.

    Raises:
        OverflowError: If the result falls outside the supported year range
    """
    month_index = point.year * MONTHS_PER_YEAR + (point.month - 1) + months
    year, month = divmod(month_index, MONTHS_PER_YEAR)
    if not MINYEAR <= year <= MAXYEAR:
        raise OverflowError("date value out of range")

    first_of_month = point.replace(year=year, month=month + 1, day=1)
    return first_of_month + timedelta(days=point.day - 1)


def _days_in_month(year: int, month: int) -> int:
    if month == MONTHS_PER_YEAR:
        return 31
    return (date(year, month + 1, 1) - date(year, month, 1)).days


# =============================================================================
# Interval
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class Interval:
    """Calendar interval with whole, non-negative components.

    Intervals are immutable; ``Duration`` therefore never shares mutable
    state with the intervals it is given.

    Examples:
        >>> Interval.parse("P1Y2M3DT4H5M6S")
        Interval(years=1, months=2, days=3, hours=4, minutes=5, seconds=6)
        >>> Interval.parse("P2W").days
        14
        >>> Interval(months=1).add_to(date(2024, 1, 31))
        datetime.date(2024, 3, 2)
    """

    years: int = 0
    months: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    def __post_init__(self) -> None:
        for name in ("years", "months", "days", "hours", "minutes", "seconds"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"Interval {name} must be an int, got {type(value).__name__}")
            if value < 0:
                raise ValueError(f"Interval {name} must not be negative, got {value}")

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse an ISO 8601 duration string.

        Accepts the designator format ``PnYnMnWnDTnHnMnS`` (weeks are folded
        into days) and the alternative format ``PYYYY-MM-DDTHH:MM:SS``.
        Components must be whole numbers.

        Args:
            text: ISO 8601 duration string

        Returns:
            The parsed interval

        Raises:
            InvalidFormatError: If the string is not a valid duration
        """
        if not isinstance(text, str):
            raise InvalidFormatError(f"Invalid ISO 8601 duration: {text!r}", text)

        match = _DESIGNATOR_PATTERN.fullmatch(text)
        if match is not None:
            fields = match.groupdict()
            if all(value is None for value in fields.values()) or text.endswith("T"):
                raise InvalidFormatError(f"Invalid ISO 8601 duration: {text}", text)

            numbers = {name: int(value) if value is not None else 0 for name, value in fields.items()}
            weeks = numbers.pop("weeks")
            numbers["days"] += weeks * DAYS_PER_WEEK
            return cls(**numbers)

        match = _ALTERNATIVE_PATTERN.fullmatch(text)
        if match is not None:
            numbers = {name: int(value) for name, value in match.groupdict().items()}
            if numbers["months"] > 12 or numbers["days"] > 31 or numbers["hours"] > 24:
                raise InvalidFormatError(f"Invalid ISO 8601 duration: {text}", text)
            if numbers["minutes"] > 59 or numbers["seconds"] > 59:
                raise InvalidFormatError(f"Invalid ISO 8601 duration: {text}", text)
            return cls(**numbers)

        raise InvalidFormatError(f"Invalid ISO 8601 duration: {text}", text)

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> Self:
        """Decompose a non-negative timedelta into days, hours, minutes and seconds.

        Microseconds are dropped.

        Raises:
            ValueError: If the timedelta is negative
        """
        if delta < timedelta(0):
            raise ValueError(f"Cannot build an interval from a negative timedelta: {delta}")

        hours, remainder = divmod(delta.seconds, SECONDS_PER_HOUR)
        minutes, seconds = divmod(remainder, SECONDS_PER_MINUTE)
        return cls(days=delta.days, hours=hours, minutes=minutes, seconds=seconds)

    @classmethod
    def between(cls, start: date, end: date) -> Self:
        """Calendar difference between two dates or datetimes.

        The difference is absolute: swapping ``start`` and ``end`` gives the
        same interval. Aware datetimes are compared in the zone of the earlier
        value. Missing days are borrowed from the month of the earlier value,
        so 2024-01-31 -> 2024-03-01 is P1M1D.

        Args:
            start: First point in time
            end: Second point in time, of the same type as ``start``

        Returns:
            The non-negative calendar difference
        """
        if type(start) is not type(end):
            raise TypeError(f"Cannot compare {type(start).__name__} with {type(end).__name__}")

        if end < start:
            start, end = end, start

        if isinstance(start, datetime) and isinstance(end, datetime):
            if start.tzinfo is not None and end.tzinfo is not None:
                end = end.astimezone(start.tzinfo)
            start_time = (start.hour, start.minute, start.second)
            end_time = (end.hour, end.minute, end.second)
        else:
            start_time = end_time = (0, 0, 0)

        years = end.year - start.year
        months = end.month - start.month
        days = end.day - start.day
        hours = end_time[0] - start_time[0]
        minutes = end_time[1] - start_time[1]
        seconds = end_time[2] - start_time[2]

        if seconds < 0:
            seconds += SECONDS_PER_MINUTE
            minutes -= 1
        if minutes < 0:
            minutes += 60
            hours -= 1
        if hours < 0:
            hours += 24
            days -= 1

        borrow_year, borrow_month = start.year, start.month
        while days < 0:
            days += _days_in_month(borrow_year, borrow_month)
            months -= 1
            borrow_year, borrow_month = divmod(borrow_year * MONTHS_PER_YEAR + borrow_month, MONTHS_PER_YEAR)
            borrow_month += 1

        if months < 0:
            months += MONTHS_PER_YEAR
            years -= 1

        return cls(years=years, months=months, days=days, hours=hours, minutes=minutes, seconds=seconds)

    # -------------------------------------------------------------------------
    # Calendar Arithmetic
    # -------------------------------------------------------------------------

    def add_to(self, point: T) -> T:
        """Return ``point`` moved forward by this interval.

        Raises:
            OverflowError: If the result is outside the supported date range
        """
        return self._apply(point, 1)

    def subtract_from(self, point: T) -> T:
        """Return ``point`` moved backward by this interval.

        Raises:
            OverflowError: If the result is outside the supported date range
        """
        return self._apply(point, -1)

    def _apply(self, point: T, sign: int) -> T:
        if not isinstance(point, date):
            raise TypeError(f"Expected a date or datetime, got {type(point).__name__}")

        result: date = point
        if self.years or self.months:
            result = _shift_months(result, sign * (self.years * MONTHS_PER_YEAR + self.months))
        if self.days:
            result = result + timedelta(days=sign * self.days)

        elapsed = timedelta(hours=self.hours, minutes=self.minutes, seconds=self.seconds) * sign
        if elapsed and isinstance(result, datetime):
            if result.tzinfo is not None:
                result = (result.astimezone(UTC) + elapsed).astimezone(result.tzinfo)
            else:
                result = result + elapsed
        elif elapsed:
            result = result + timedelta(days=elapsed.days)

        return result  # type: ignore[return-value]

    # -------------------------------------------------------------------------
    # Conversions
    # -------------------------------------------------------------------------

    def to_timedelta(self) -> timedelta:
        """Exact timedelta of the day and time components.

        Raises:
            ValueError: If the interval has year or month components, whose
                length depends on the calendar
        """
        if self.years or self.months:
            raise ValueError("Cannot convert an interval with years or months to an exact timedelta")
        return timedelta(days=self.days, hours=self.hours, minutes=self.minutes, seconds=self.seconds)

    @property
    def is_zero(self) -> bool:
        """True if every component is zero."""
        return not any((self.years, self.months, self.days, self.hours, self.minutes, self.seconds))
