"""Calendar arithmetic on the device-local calendar.

Streaks and "N days ago" lookups follow the human day, not elapsed seconds,
so every helper here works on local calendar days. Offsets are applied to
``date`` objects, which keeps them stable across DST transitions and leap
years.
"""

from datetime import date, datetime, time, timedelta
from typing import Optional, Union

DayLike = Union[date, datetime]


def local_day(value: DayLike) -> date:
    """Get the local calendar day of a date or timestamp.

    Naive timestamps are taken to be local time already. Aware timestamps
    are converted to the local zone first.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()
    return value


def start_of_day(moment: datetime) -> datetime:
    """Normalize a timestamp to local midnight.

    Args:
        moment: Any timestamp, naive (local) or aware.

    Returns:
        Midnight of the moment's local day. Aware input gives aware output.
    """
    midnight = datetime.combine(local_day(moment), time.min)
    if moment.tzinfo is not None:
        # Let the local zone pick the offset valid at midnight
        return midnight.astimezone()
    return midnight


def add_days(value: DayLike, days: int) -> date:
    """Get the calendar day ``days`` away from ``value`` (may be negative)."""
    return local_day(value) + timedelta(days=days)


def is_same_day(a: Optional[DayLike], b: Optional[DayLike]) -> bool:
    """Compare two values by local calendar day. ``None`` never matches."""
    if a is None or b is None:
        return False
    return local_day(a) == local_day(b)


def days_between(start: DayLike, end: DayLike) -> list[date]:
    """List every calendar day from ``start`` to ``end`` inclusive, ascending."""
    first = local_day(start)
    last = local_day(end)
    span = (last - first).days
    return [first + timedelta(days=offset) for offset in range(span + 1)]


def subtract_years(value: DayLike, years: int) -> date:
    """Get the same calendar day ``years`` years earlier.

    Feb 29 falls back to Feb 28 when the target year is not a leap year.
    """
    day = local_day(value)
    try:
        return day.replace(year=day.year - years)
    except ValueError:
        return day.replace(year=day.year - years, day=28)
