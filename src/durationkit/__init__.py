"""durationkit - parse and format human-readable durations."""

__version__ = "0.1.0"

from durationkit.errors import (
    DurationError,
    DurationRangeError,
    InvalidUnitSelection,
    ParseError,
)
from durationkit.formatter import format_duration, to_hhmm
from durationkit.interval import CalendarInterval, to_interval, to_seconds
from durationkit.parser import parse
from durationkit.units import UNITS, UnitDefinition, UnitKey, unit_for_suffix

__all__ = [
    "parse",
    "format_duration",
    "to_hhmm",
    "to_interval",
    "to_seconds",
    "unit_for_suffix",
    "CalendarInterval",
    "UnitDefinition",
    "UnitKey",
    "UNITS",
    "DurationError",
    "DurationRangeError",
    "InvalidUnitSelection",
    "ParseError",
]
