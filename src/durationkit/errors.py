"""Exception hierarchy for duration parsing and formatting."""

from __future__ import annotations

from collections.abc import Iterable


class DurationError(Exception):
    """Base exception for everything durationkit raises on purpose."""


class ParseError(DurationError, ValueError):
    """Raised when a duration string cannot be converted to seconds."""

    def __init__(self, message: str, text: str = "") -> None:
        super().__init__(message)
        self.text = text


class InvalidUnitSelection(DurationError, ValueError):
    """Raised when a unit selection names units the table does not know."""

    def __init__(self, units: Iterable[str]) -> None:
        self.units = tuple(units)
        super().__init__(f"Unknown duration unit(s): {', '.join(self.units)}")


class DurationRangeError(DurationError, OverflowError):
    """Raised when a duration falls outside the supported calendar range."""
