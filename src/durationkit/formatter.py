"""Render whole seconds as human-readable or clock strings."""

from __future__ import annotations

from collections.abc import Iterable

from durationkit.units import UnitKey, resolve_units


def format_duration(
    value: int | None,
    short: bool = True,
    units: Iterable[UnitKey | str] | None = None,
) -> str:
    """Convert seconds to a human-readable string.

    Every selected unit but the smallest gets a whole count; the smallest
    unit takes whatever is left, fractions included. Units with a zero
    count are left out.

    Args:
        value: Duration in seconds. ``None`` and non-positive values give ``""``.
        short: ``"2h 30m"`` when true, ``"2 hours 30 minutes"`` otherwise.
        units: Units to include, as ``UnitKey`` values or suffixes such as
            ``"h"`` or ``"hours"``. Defaults to all units. Output always
            follows the table's largest-first order.

    Raises:
        InvalidUnitSelection: If ``units`` names an unknown unit.

    Examples:
        >>> format_duration(3661)
        '1h 1m 1s'
        >>> format_duration(3661, False)
        '1 hour 1 minute 1 second'
        >>> format_duration(90, True, ["m"])
        '1.5m'
    """
    selected = resolve_units(units)
    if value is None or value <= 0:
        return ""

    remaining = int(value)
    parts: list[str] = []
    last = len(selected) - 1
    for index, unit in enumerate(selected):
        if index == last:
            whole, rest = divmod(remaining, unit.seconds)
            # stay in ints when exact so large values keep every digit
            amount: float = whole if rest == 0 else remaining / unit.seconds
        else:
            amount = remaining // unit.seconds
            remaining %= unit.seconds

        if amount > 0:
            parts.append(f"{_format_number(amount)}{unit.label(amount, short)}")

    return " ".join(parts).strip()


def _format_number(amount: float) -> str:
    if isinstance(amount, int):
        return str(amount)
    if amount.is_integer():
        return str(int(amount))
    # 14 significant digits: 184 / 60 renders as 3.0666666666667
    return format(amount, ".14g")


def to_hhmm(value: int) -> str:
    """Format seconds as ``HH:MM``, dropping leftover seconds.

    Hours are not capped, so 100 hours and up print three or more digits.
    """
    seconds = int(value)
    hours = seconds // 3600
    minutes = seconds % 3600 // 60
    return f"{hours:02d}:{minutes:02d}"
