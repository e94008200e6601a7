"""Exact calendar decomposition of durations.

Unlike the unit table, which treats every month as 30 days, these helpers
walk a real (proleptic Gregorian, UTC) calendar forward from the Unix epoch,
so month and year lengths vary and the conversion round-trips exactly.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from pydantic import BaseModel, ConfigDict, Field

from durationkit.errors import DurationRangeError

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_SECOND = timedelta(seconds=1)


class CalendarInterval(BaseModel):
    model_config = ConfigDict(frozen=True)

    years: int = Field(default=0, ge=0)
    months: int = Field(default=0, ge=0)
    days: int = Field(default=0, ge=0)
    hours: int = Field(default=0, ge=0)
    minutes: int = Field(default=0, ge=0)
    seconds: int = Field(default=0, ge=0)

    def isoformat(self) -> str:
        """Render as an ISO-8601 duration, e.g. ``P1Y2M3DT4H5M6S``."""
        date_part = "".join(
            f"{n}{tag}"
            for n, tag in ((self.years, "Y"), (self.months, "M"), (self.days, "D"))
            if n
        )
        time_part = "".join(
            f"{n}{tag}"
            for n, tag in ((self.hours, "H"), (self.minutes, "M"), (self.seconds, "S"))
            if n
        )
        if not date_part and not time_part:
            return "PT0S"
        return f"P{date_part}" + (f"T{time_part}" if time_part else "")


def to_interval(value: int) -> CalendarInterval:
    """Break seconds down into calendar years, months, days and clock time.

    Raises:
        ValueError: If ``value`` is negative.
        DurationRangeError: If the end point is past ``datetime.MAXYEAR``.
    """
    if value < 0:
        raise ValueError(f"Duration must be non-negative, got {value}")
    try:
        end = EPOCH + timedelta(seconds=int(value))
    except OverflowError as e:
        raise DurationRangeError(f"Duration of {value}s is out of calendar range") from e

    # The epoch sits at the very start of a year, so no field ever borrows.
    return CalendarInterval(
        years=end.year - EPOCH.year,
        months=end.month - 1,
        days=end.day - 1,
        hours=end.hour,
        minutes=end.minute,
        seconds=end.second,
    )


def to_seconds(interval: CalendarInterval | timedelta) -> int:
    """Convert a calendar interval (or a ``timedelta``) back to whole seconds.

    Raises:
        ValueError: If a ``timedelta`` is negative.
        DurationRangeError: If the interval reaches past ``datetime.MAXYEAR``.
    """
    if isinstance(interval, timedelta):
        if interval < timedelta(0):
            raise ValueError(f"Duration must be non-negative, got {interval}")
        return interval // _ONE_SECOND

    extra_years, month_index = divmod(interval.months, 12)
    try:
        start = EPOCH.replace(
            year=EPOCH.year + interval.years + extra_years,
            month=month_index + 1,
        )
        end = start + timedelta(
            days=interval.days,
            hours=interval.hours,
            minutes=interval.minutes,
            seconds=interval.seconds,
        )
    except (ValueError, OverflowError) as e:
        raise DurationRangeError(f"{interval!r} is out of calendar range") from e
    return (end - EPOCH) // _ONE_SECOND
