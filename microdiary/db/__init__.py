"""Persistence for Micro Diary."""

from microdiary.db.base import BadgeStore, EntryStore
from microdiary.db.store import DataStore

__all__ = [
    "BadgeStore",
    "DataStore",
    "EntryStore",
]
