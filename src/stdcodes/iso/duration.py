"""ISO 8601 duration value.

A ``Duration`` keeps two views of the same span in sync: the ISO 8601 text
and the calendar ``Interval``. Text assigned by the caller is kept verbatim
once it parses (``P1W`` stays ``P1W``); text derived from an interval goes
through ``to_iso8601_duration`` and is canonical (``P7D``).

Reference: ISO 8601-1:2019, 5.5.2 (durations)
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Any, TypeVar

from ..exceptions import InvalidFormatError
from .interval import SECONDS_PER_DAY, SECONDS_PER_HOUR, SECONDS_PER_MINUTE, Interval

T = TypeVar("T", bound=date)

_LOGGER = logging.getLogger(__name__)

# =============================================================================
# Duration Constants
# =============================================================================


PERIOD = "P"
TIME = "T"
YEAR = "Y"
MONTH = "M"
WEEK = "W"
DAY = "D"
HOUR = "H"
MINUTE = "M"
SECOND = "S"
ZERO = "P0D"

# Fixed ratios used by Duration.to_seconds
DAYS_PER_MONTH = 30
DAYS_PER_YEAR = 365


def to_iso8601_duration(interval: Interval) -> str:
    """Format an interval as a canonical ISO 8601 duration.

    Zero components are omitted, weeks are never emitted and an all-zero
    interval formats as ``P0D``.

    Examples:
        >>> to_iso8601_duration(Interval(years=1, days=3, minutes=5))
        'P1Y3DT5M'
        >>> to_iso8601_duration(Interval())
        'P0D'
    """
    text = PERIOD
    for value, designator in ((interval.years, YEAR), (interval.months, MONTH), (interval.days, DAY)):
        if value:
            text += f"{value}{designator}"

    time_part = ""
    for value, designator in ((interval.hours, HOUR), (interval.minutes, MINUTE), (interval.seconds, SECOND)):
        if value:
            time_part += f"{value}{designator}"

    if time_part:
        text += TIME + time_part

    return ZERO if text == PERIOD else text


# =============================================================================
# Duration
# =============================================================================


class Duration:
    """ISO 8601 duration with synchronised text and interval.

    Attributes:
        iso: ISO 8601 text; assigning re-parses and replaces the interval
        interval: Calendar interval; assigning regenerates canonical text

    Examples:
        >>> Duration("PT1H30M").to_seconds()
        5400
        >>> Duration(Interval(days=7)).iso
        'P7D'
        >>> Duration().iso
        'P0D'
    """

    _iso: str
    _interval: Interval

    def __init__(self, source: str | Interval | timedelta | None = None) -> None:
        """Create a duration.

        Args:
            source: ISO 8601 text, an Interval, a non-negative timedelta, or
                None for the zero duration

        Raises:
            InvalidFormatError: If ``source`` is text that does not parse
            TypeError: If ``source`` has an unsupported type
        """
        if source is None:
            self._iso, self._interval = ZERO, Interval()
        elif isinstance(source, str):
            self.set_text(source)
        elif isinstance(source, Interval):
            self.set_interval(source)
        elif isinstance(source, timedelta):
            self.set_interval(Interval.from_timedelta(source))
        else:
            raise TypeError(f"Cannot build a Duration from {type(source).__name__}")

    # -------------------------------------------------------------------------
    # Synchronised State
    # -------------------------------------------------------------------------

    def set_text(self, text: str) -> None:
        """Replace the duration with parsed ``text``, kept verbatim.

        Raises:
            InvalidFormatError: If the text is not an ISO 8601 duration; the
                current value is left unchanged
        """
        try:
            interval = Interval.parse(text)
        except InvalidFormatError:
            _LOGGER.debug("Rejected ISO 8601 duration %r", text)
            raise
        self._iso, self._interval = text, interval

    def set_interval(self, interval: Interval) -> None:
        """Replace the duration with ``interval`` and regenerate the text."""
        if not isinstance(interval, Interval):
            raise TypeError(f"Expected an Interval, got {type(interval).__name__}")
        self._iso, self._interval = to_iso8601_duration(interval), interval

    @property
    def iso(self) -> str:
        return self._iso

    @iso.setter
    def iso(self, text: str) -> None:
        self.set_text(text)

    @property
    def interval(self) -> Interval:
        return self._interval

    @interval.setter
    def interval(self, interval: Interval) -> None:
        self.set_interval(interval)

    # -------------------------------------------------------------------------
    # Conversions
    # -------------------------------------------------------------------------

    def to_text(self) -> str:
        return self._iso

    def to_seconds(self) -> int:
        """Approximate length in seconds.

        Months count as 30 days and years as 365 days, so the result is an
        estimate for anything with calendar components.
        """
        interval = self._interval
        days = interval.days + interval.months * DAYS_PER_MONTH + interval.years * DAYS_PER_YEAR
        return (
            interval.seconds
            + interval.minutes * SECONDS_PER_MINUTE
            + interval.hours * SECONDS_PER_HOUR
            + days * SECONDS_PER_DAY
        )

    def add_to(self, point: T) -> T:
        """Return ``point`` moved forward by this duration (calendar aware)."""
        return self._interval.add_to(point)

    def subtract_from(self, point: T) -> T:
        """Return ``point`` moved backward by this duration (calendar aware)."""
        return self._interval.subtract_from(point)

    # -------------------------------------------------------------------------
    # Dunder Methods
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return self._iso

    def __repr__(self) -> str:
        return f"Duration({self._iso!r})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._iso == other._iso and self._interval == other._interval

    __hash__ = None  # type: ignore[assignment]
