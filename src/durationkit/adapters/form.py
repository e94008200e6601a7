"""Model/view transformer for duration form fields.

Entities store durations as whole seconds; users type them as ``"2h 30m"``,
``"90 minutes"``, ``"02:30"`` or plain seconds.
"""

from __future__ import annotations

from collections.abc import Iterable

from durationkit.formatter import format_duration
from durationkit.parser import parse
from durationkit.units import UnitKey, resolve_units


class DurationTransformer:
    def __init__(
        self,
        short: bool = True,
        units: Iterable[UnitKey | str] | None = None,
        strict: bool = False,
    ) -> None:
        self.short = short
        # Resolve eagerly so a bad unit list fails when the field is built.
        self.units = resolve_units(units)
        self.strict = strict

    def transform(self, seconds: int | None) -> str | None:
        """Stored seconds to display text. ``None`` stays ``None``."""
        if seconds is None:
            return None
        return format_duration(
            seconds, self.short, [unit.key for unit in self.units]
        )

    def reverse_transform(self, text: str | None) -> int:
        """Submitted text to seconds. Missing or blank input is ``0``.

        Raises:
            ParseError: If the text cannot be parsed.
        """
        if text is None or not text.strip():
            return 0
        return parse(text.strip(), strict=self.strict)
