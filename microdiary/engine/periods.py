"""Time-windowed lookups and statistics over diary entries.

Two kinds of windows are supported:

* point lookback - the single entry dated exactly N days before today
* range statistics - count, average satisfaction and a dense per-day
  series over the trailing N days, today included
"""

from datetime import date, datetime
from typing import Iterable, Optional

from microdiary.engine.dates import add_days, days_between, local_day, subtract_years
from microdiary.engine.streaks import index_by_day
from microdiary.models import DailyPoint, Entry, RangeStats

# "Yesterday" through "one year ago"
LOOKBACK_PERIODS = (1, 3, 7, 30, 90, 180, 365)

# Week, month, quarter, year
RANGE_PERIODS = (7, 30, 90, 365)


def _check_period(period: int) -> None:
    if period < 1:
        raise ValueError(f"Invalid period: {period}. Must be at least 1 day")


def lookback_day(now: datetime, period: int) -> date:
    """Get the calendar day ``period`` days before today.

    Raises:
        ValueError: If period is less than 1.
    """
    _check_period(period)
    return add_days(now, -period)


def _first_on_day(entries: Iterable[Entry], day: date) -> Optional[Entry]:
    for entry in entries:
        if entry.date == day:
            return entry
    return None


def lookback_entry(
    entries: Iterable[Entry], now: datetime, period: int
) -> Optional[Entry]:
    """Get the entry written exactly ``period`` days ago.

    Args:
        entries: Entries in arrival order.
        now: Current timestamp.
        period: Days back, usually one of LOOKBACK_PERIODS.

    Returns:
        The first entry on that day, or None.
    """
    return _first_on_day(entries, lookback_day(now, period))


def anniversary_entry(
    entries: Iterable[Entry], now: datetime, years: int = 1
) -> Optional[Entry]:
    """Get the entry from this calendar day ``years`` years ago."""
    return _first_on_day(entries, subtract_years(now, years))


def range_bounds(now: datetime, period: int) -> tuple[date, date]:
    """Get the inclusive (start, end) days of a trailing window.

    Raises:
        ValueError: If period is less than 1.
    """
    _check_period(period)
    end = local_day(now)
    return add_days(end, -(period - 1)), end


def range_statistics(
    entries: Iterable[Entry], now: datetime, period: int
) -> RangeStats:
    """Summarize the trailing ``period`` days ending today.

    Every entry dated inside the window counts toward ``count`` and the
    average. The series holds exactly one point per day; on days with
    several entries the first one in iteration order is charted.

    Args:
        entries: Entries in any order.
        now: Current timestamp.
        period: Window length, usually one of RANGE_PERIODS.

    Returns:
        RangeStats for the window.
    """
    start, end = range_bounds(now, period)
    in_range = [
        entry for entry in entries
        if entry.date is not None and start <= entry.date <= end
    ]

    count = len(in_range)
    average = 0.0
    if count:
        average = sum(entry.satisfaction_score for entry in in_range) / count

    by_day = index_by_day(in_range)
    series = []
    for day in days_between(start, end):
        entry = by_day.get(day)
        series.append(
            DailyPoint(
                date=day,
                satisfaction_score=entry.satisfaction_score if entry else 0,
                has_entry=entry is not None,
            )
        )

    return RangeStats(
        period=period,
        start_date=start,
        end_date=end,
        count=count,
        average_satisfaction=average,
        series=series,
    )
