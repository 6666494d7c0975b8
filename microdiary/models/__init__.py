"""Data models for Micro Diary."""

from microdiary.models.entry import ENTRY_TEXT_MAX_LENGTH, Entry
from microdiary.models.badge import Badge, BadgeType
from microdiary.models.stats import DailyPoint, RangeStats

__all__ = [
    "ENTRY_TEXT_MAX_LENGTH",
    "Badge",
    "BadgeType",
    "DailyPoint",
    "Entry",
    "RangeStats",
]
