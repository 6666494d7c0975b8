"""Shared builders for Micro Diary tests."""

from datetime import date, datetime, timedelta
from typing import Optional

from microdiary.models import Entry

# A leap-year Friday, so 365 days back does not land on the same date
TODAY = date(2024, 3, 1)
NOW = datetime(2024, 3, 1, 21, 30)


def make_entry(
    day: Optional[date],
    score: int = 50,
    text: str = "note",
) -> Entry:
    """Build an entry for a given day."""
    return Entry(date=day, text=text, satisfaction_score=score, created_at=NOW)


def days_ago(n: int, today: date = TODAY) -> date:
    """Get the calendar day n days before today."""
    return today - timedelta(days=n)
