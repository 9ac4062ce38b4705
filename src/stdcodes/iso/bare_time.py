"""ISO 8601 time of day without a date.

``BareTime`` wraps a ``datetime.time`` and keeps its ISO 8601 text in sync.
Unlike ``Duration``, text is always reformatted on assignment:

    08:15       -> T08:15:00Z
    T081530.5   -> rejected (basic format is not supported)
    20:00-0500  -> T20:00:00-05:00

Times without a zone designator are naive and format with ``Z``.

Reference: ISO 8601-1:2019, 5.3 (time of day) and 5.3.4 (UTC offsets)
"""

from __future__ import annotations

import datetime as dt
import logging
from typing import Any

from ..exceptions import InvalidFormatError
from .validation import TIME_PATTERN

_LOGGER = logging.getLogger(__name__)

TIME = "T"
TIME_ZONE = "Z"
FORMAT = "%H:%M:%S"
PATTERN = TIME_PATTERN
MIDNIGHT = "T00:00:00"


def _parse(text: str) -> dt.time:
    match = PATTERN.fullmatch(text) if isinstance(text, str) else None
    if match is None:
        _LOGGER.debug("Rejected ISO 8601 time %r", text)
        raise InvalidFormatError(f"Invalid ISO 8601 time: {text!r}", text)

    fraction = match["fraction"]
    microsecond = int(fraction[:6].ljust(6, "0")) if fraction else 0

    zone: dt.tzinfo | None = None
    if match["zone"] == TIME_ZONE:
        zone = dt.UTC
    elif match["zone"]:
        offset = dt.timedelta(hours=int(match["zone_hours"]), minutes=int(match["zone_minutes"]))
        zone = dt.timezone(-offset if match["sign"] == "-" else offset)

    return dt.time(
        int(match["hours"]),
        int(match["minutes"] or 0),
        int(match["seconds"] or 0),
        microsecond,
        tzinfo=zone,
    )


def to_iso8601_time(value: dt.time | dt.datetime) -> str:
    """Format a time of day as ``THH:MM:SS`` plus a zone designator.

    A zero or unknown UTC offset formats as ``Z``; any other offset as
    ``+HH:MM`` or ``-HH:MM``. Fractional seconds are dropped.

    Examples:
        >>> to_iso8601_time(dt.time(14, 30, 15))
        'T14:30:15Z'
        >>> to_iso8601_time(dt.time(8, 15, 5, tzinfo=dt.timezone(dt.timedelta(hours=2))))
        'T08:15:05+02:00'
    """
    text = TIME + value.strftime(FORMAT)

    offset = value.utcoffset()
    if not offset:
        return text + TIME_ZONE

    sign = "-" if offset < dt.timedelta(0) else "+"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{text}{sign}{minutes // 60:02d}:{minutes % 60:02d}"


class BareTime:
    """ISO 8601 time of day with synchronised text and ``datetime.time``.

    Attributes:
        iso: Canonical ISO 8601 text, always starting with ``T``
        time: The time of day, naive or with a fixed-offset tzinfo
    """

    _iso: str
    _time: dt.time

    def __init__(self, source: str | dt.time | dt.datetime | None = None) -> None:
        if source is None:
            self._iso, self._time = MIDNIGHT, dt.time()
        elif isinstance(source, str):
            self.set_text(source)
        elif isinstance(source, dt.time | dt.datetime):
            self.set_time(source)
        else:
            raise TypeError(f"Cannot build a BareTime from {type(source).__name__}")

    def set_text(self, text: str) -> None:
        """Parse ``text`` and store it in canonical form.

        Raises:
            InvalidFormatError: If the text is not an ISO 8601 time; the
                current value is left unchanged
        """
        value = _parse(text)
        self._iso, self._time = to_iso8601_time(value), value

    def set_time(self, value: dt.time | dt.datetime) -> None:
        """Store a time of day and regenerate the text.

        A datetime contributes its time of day; an aware datetime keeps its
        current UTC offset as a fixed-offset zone.

        Raises:
            TypeError: If the value is not a time or datetime
            ValueError: If the value is a time whose zone has no fixed offset
                without a date, such as a ZoneInfo zone; the current value is
                left unchanged
        """
        if isinstance(value, dt.datetime):
            offset = value.utcoffset()
            value = value.timetz().replace(tzinfo=dt.timezone(offset) if offset is not None else None)
        elif not isinstance(value, dt.time):
            raise TypeError(f"Expected a time or datetime, got {type(value).__name__}")
        elif value.tzinfo is not None and value.utcoffset() is None:
            raise ValueError(f"Time zone {value.tzinfo} has no fixed UTC offset without a date")
        self._iso, self._time = to_iso8601_time(value), value

    @property
    def iso(self) -> str:
        return self._iso

    @iso.setter
    def iso(self, text: str) -> None:
        self.set_text(text)

    @property
    def time(self) -> dt.time:
        return self._time

    @time.setter
    def time(self, value: dt.time | dt.datetime) -> None:
        self.set_time(value)

    @property
    def hours(self) -> int:
        return self._time.hour

    @property
    def minutes(self) -> int:
        return self._time.minute

    @property
    def seconds(self) -> int:
        return self._time.second

    @property
    def timezone(self) -> dt.tzinfo | None:
        """The zone of the time, or None when naive."""
        return self._time.tzinfo

    def to_text(self) -> str:
        return self._iso

    def to_time(self) -> dt.time:
        return self._time

    def __str__(self) -> str:
        return self._iso

    def __repr__(self) -> str:
        return f"BareTime({self._iso!r})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, BareTime):
            return NotImplemented
        return self._time == other._time and self._time.utcoffset() == other._time.utcoffset()

    __hash__ = None  # type: ignore[assignment]
