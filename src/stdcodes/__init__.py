"""
pyStdCodes: standard code registries and ISO 8601 value types.

This library provides closed sets of ISO, UN/CEFACT and UN M49 codes with
forward and reverse lookup, plus ISO 8601 duration and time-of-day values.
"""

from __future__ import annotations

import logging

from .exceptions import InvalidFormatError, StdCodesError, UnknownConstantError
from .registry import CodeRegistry

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Exceptions
    "StdCodesError",
    "InvalidFormatError",
    "UnknownConstantError",
    # Registry base
    "CodeRegistry",
]
