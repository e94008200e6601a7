"""Fixed table of duration units, largest first.

Magnitudes are calendar approximations (a month is 30 days, a year is 365
days). Use :mod:`durationkit.interval` when month and year lengths must be
exact.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from durationkit.errors import InvalidUnitSelection


class UnitKey(str, Enum):
    YEAR = "year"
    MONTH = "month"
    WEEK = "week"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"


@dataclass(frozen=True)
class UnitDefinition:
    key: UnitKey
    seconds: int
    short: str
    singular: str
    plural: str

    @property
    def suffixes(self) -> tuple[str, str, str]:
        return (self.short, self.singular, self.plural)

    def label(self, value: float, short: bool = True) -> str:
        """Suffix to print after ``value``, including the separating space in long form."""
        if short:
            return self.short
        return " " + (self.plural if value > 1 else self.singular)


# Order matters: formatting decomposes greedily in this order.
UNITS: tuple[UnitDefinition, ...] = (
    UnitDefinition(UnitKey.YEAR, 31_536_000, "y", "year", "years"),
    UnitDefinition(UnitKey.MONTH, 2_592_000, "mo", "month", "months"),
    UnitDefinition(UnitKey.WEEK, 604_800, "w", "week", "weeks"),
    UnitDefinition(UnitKey.DAY, 86_400, "d", "day", "days"),
    UnitDefinition(UnitKey.HOUR, 3_600, "h", "hour", "hours"),
    UnitDefinition(UnitKey.MINUTE, 60, "m", "minute", "minutes"),
    UnitDefinition(UnitKey.SECOND, 1, "s", "second", "seconds"),
)

_BY_SUFFIX: dict[str, UnitDefinition] = {
    suffix: unit for unit in UNITS for suffix in unit.suffixes
}

SHORT_SUFFIXES: list[str] = [unit.short for unit in UNITS]


def unit_for_suffix(token: str) -> UnitDefinition | None:
    """Return the unit whose short suffix, singular or plural name is exactly ``token``."""
    return _BY_SUFFIX.get(token)


def get_unit(key: UnitKey | str) -> UnitDefinition:
    """Look up a unit by key or by any of its suffixes."""
    if isinstance(key, UnitKey):
        return _BY_SUFFIX[key.value]
    unit = unit_for_suffix(key)
    if unit is None:
        raise InvalidUnitSelection([key])
    return unit


def resolve_units(
    units: Iterable[UnitKey | str] | None = None,
) -> tuple[UnitDefinition, ...]:
    """Resolve a caller's unit selection to table entries in canonical order.

    Members may be ``UnitKey`` values or any suffix accepted by
    :func:`unit_for_suffix`. Only membership matters: the caller's ordering
    and any duplicates are discarded.

    Raises:
        InvalidUnitSelection: If any member is not a known unit.
    """
    if units is None:
        return UNITS
    if isinstance(units, (str, UnitKey)):
        units = [units]

    selected: set[UnitKey] = set()
    unknown: list[str] = []
    for item in units:
        try:
            selected.add(get_unit(item).key)
        except InvalidUnitSelection:
            unknown.append(str(item))

    if unknown:
        raise InvalidUnitSelection(unknown)
    return tuple(unit for unit in UNITS if unit.key in selected)
