"""Parse duration strings into whole seconds."""

from __future__ import annotations

import math
import re

from durationkit.errors import ParseError
from durationkit.units import unit_for_suffix
from durationkit.utils.logging import get_logger

log = get_logger(__name__)

_HMS_RE = re.compile(r"^(\d+):(\d+):(\d+)$", re.ASCII)
_HM_RE = re.compile(r"^(\d+):(\d+)$", re.ASCII)
_SECONDS_RE = re.compile(r"^(\d+)$", re.ASCII)
# "." or "," as decimal separator
_UNIT_RE = re.compile(r"(\d+(?:\.\d+)?|\d+(?:,\d+)?|\d+)\s*([a-z]+)", re.ASCII)


def parse(text: str, *, strict: bool = False) -> int:
    """Convert a duration string to seconds.

    Supported formats:

    - ``HH:MM:SS`` with any digit count per field, e.g. ``"02:30:45"``, ``"2:5:3"``
    - ``HH:MM``, e.g. ``"02:30"``, ``"1:30"``
    - plain seconds, e.g. ``"150"``
    - numbers with unit suffixes, e.g. ``"2h 30m"``, ``"2.5 hours"``, ``"1,5 d"``

    Unit suffixes the table does not know are skipped, and input with nothing
    recognisable yields ``0``. Pass ``strict=True`` to get a
    :class:`ParseError` in both cases instead.

    Raises:
        ParseError: If a number is too large to convert. With ``strict``,
            also on unknown units or input without any duration in it.
    """
    try:
        match = _HMS_RE.match(text)
        if match:
            hours, minutes, seconds = (int(g) for g in match.groups())
            return hours * 3600 + minutes * 60 + seconds
        match = _HM_RE.match(text)
        if match:
            hours, minutes = (int(g) for g in match.groups())
            return hours * 3600 + minutes * 60
        if _SECONDS_RE.match(text):
            return int(text)
    except ValueError as e:
        # int() refuses digit strings past sys.get_int_max_str_digits()
        raise ParseError(f"Duration value too large: {text[:32]}...", text) from e

    total = 0
    recognised = 0
    for number, suffix in _UNIT_RE.findall(text):
        unit = unit_for_suffix(suffix)
        if unit is None:
            if strict:
                raise ParseError(f"Unknown duration unit '{suffix}' in {text!r}", text)
            log.debug("Skipping unknown unit %r in %r", suffix, text)
            continue

        amount = float(number.replace(",", ".")) * unit.seconds
        if not math.isfinite(amount):
            raise ParseError(f"Duration value too large: {number}{suffix}", text)
        total += int(amount)
        recognised += 1

    if strict and recognised == 0 and text.strip():
        raise ParseError(f"No duration found in {text!r}", text)
    return total
