"""pyStdCodes exception classes."""

from __future__ import annotations

from typing import Any


class StdCodesError(Exception):
    """Base exception for all pyStdCodes errors."""


class InvalidFormatError(StdCodesError, ValueError):
    """Input string does not follow the expected ISO 8601 grammar."""

    value: Any

    def __init__(self, message: str, value: Any) -> None:
        super().__init__(message)
        self.value = value


class UnknownConstantError(StdCodesError, ValueError):
    """Value is not declared by the registry it was validated against."""

    value: Any
    registry: str

    def __init__(self, value: Any, registry: str) -> None:
        super().__init__(f"Unknown {registry} constant: {value!r}")
        self.value = value
        self.registry = registry
