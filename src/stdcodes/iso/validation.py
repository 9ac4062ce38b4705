"""Validation of ISO 8601 duration and time strings.

Two strategies are available for durations:

- validate_by_parsing: the string is valid if ``Interval.parse`` accepts it.
  This follows the parser, so the alternative ``PYYYY-MM-DDTHH:MM:SS`` form
  passes while fractional seconds do not.
- validate_strict: the string must match the designator grammar directly.
  Fractional values are allowed on seconds only.

Times are always checked against the ``BareTime`` grammar; strict mode only
adds the requirement for a leading ``T``.
"""

from __future__ import annotations

import logging
import re

from ..exceptions import InvalidFormatError
from .interval import Interval

_LOGGER = logging.getLogger(__name__)

# =============================================================================
# Grammars
# =============================================================================


# P[n]Y[n]M[n]W[n]D[T[n]H[n]M[n]S], decimal allowed on seconds only
STRICT_DURATION_PATTERN = re.compile(
    r"P(?:\d+Y)?(?:\d+M)?(?:\d+W)?(?:\d+D)?(?:T(?:\d+H)?(?:\d+M)?(?:\d+(?:[.,]\d+)?S)?)?",
    re.ASCII,
)

# [T]HH[:MM[:SS[.f]]][Z|±HH[:]MM]
TIME_PATTERN = re.compile(
    r"T?(?P<hours>[01]\d|2[0-3])"
    r"(?::(?P<minutes>[0-5]\d))?"
    r"(?::(?P<seconds>[0-5]\d)(?:\.(?P<fraction>\d+))?)?"
    r"(?P<zone>Z|(?P<sign>[+\-])(?P<zone_hours>[01]\d|2[0-3]):?(?P<zone_minutes>[0-5]\d))?",
    re.ASCII,
)


# =============================================================================
# Duration Validation
# =============================================================================


def validate_strict(text: str) -> bool:
    """Check a duration against the designator grammar without parsing it.

    Examples:
        >>> validate_strict("PT1.5S")
        True
        >>> validate_strict("P1.5Y")
        False
        >>> validate_strict("P1YT")
        False
    """
    if not isinstance(text, str) or STRICT_DURATION_PATTERN.fullmatch(text) is None:
        return False
    if text.endswith("T"):
        return False
    return len(text) > 1


def validate_by_parsing(text: str) -> bool:
    """Check a duration by handing it to ``Interval.parse``."""
    try:
        Interval.parse(text)
    except InvalidFormatError:
        _LOGGER.debug("Rejected ISO 8601 duration %r", text)
        return False
    return True


def is_iso8601_duration(text: str, strict: bool = False) -> bool:
    """Check if a string is a valid ISO 8601 duration.

    Args:
        text: Candidate duration string
        strict: Use the grammar instead of the parser

    Returns:
        True if the string is a valid duration
    """
    if strict:
        return validate_strict(text)
    return validate_by_parsing(text)


# =============================================================================
# Time Validation
# =============================================================================


def is_iso8601_time(text: str, strict: bool = False) -> bool:
    """Check if a string is a valid ISO 8601 time of day.

    Args:
        text: Candidate time string
        strict: Also require the leading ``T`` designator

    Returns:
        True if the string is a valid time

    Examples:
        >>> is_iso8601_time("T14:30:00Z")
        True
        >>> is_iso8601_time("14:30:00", strict=True)
        False
    """
    if not isinstance(text, str) or TIME_PATTERN.fullmatch(text) is None:
        return False
    return text.startswith("T") or not strict
