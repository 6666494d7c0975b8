"""Consecutive-day streak calculation."""

from datetime import date
from typing import Iterable

from microdiary.engine.dates import add_days
from microdiary.models import Entry


def index_by_day(entries: Iterable[Entry]) -> dict[date, Entry]:
    """Build a calendar day -> entry lookup.

    Dateless entries are skipped. When several entries share a day the
    first one in iteration order is kept.

    Args:
        entries: Entries in arrival order.

    Returns:
        Dictionary keyed by calendar day.
    """
    by_day: dict[date, Entry] = {}
    for entry in entries:
        if entry.date is None:
            continue
        by_day.setdefault(entry.date, entry)
    return by_day


def calculate_streak(entries: Iterable[Entry], today: date) -> int:
    """Calculate the current consecutive-day streak.

    The streak ends today, or yesterday when today has not been written
    yet, so it stays alive until the day is over.

    Args:
        entries: Entries in any order.
        today: Current local calendar day.

    Returns:
        Number of consecutive days with an entry, 0 if none.
    """
    by_day = index_by_day(entries)
    if not by_day:
        return 0

    cursor = today
    if cursor not in by_day:
        cursor = add_days(cursor, -1)

    streak = 0
    while cursor in by_day:
        streak += 1
        cursor = add_days(cursor, -1)

    return streak
