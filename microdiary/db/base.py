"""Storage interfaces for Micro Diary."""

from abc import ABC, abstractmethod
from datetime import date
from typing import Optional

from microdiary.models import Badge, Entry


class EntryStore(ABC):
    """Abstract durable storage of diary entries.

    Implementations return entries in arrival order. Entries are never
    deleted.
    """

    @abstractmethod
    def query_all(self) -> list[Entry]:
        """Get every entry.

        Returns:
            All entries in arrival order.
        """
        pass

    @abstractmethod
    def query_by_date_range(self, start: date, end: date) -> list[Entry]:
        """Get entries dated within a range.

        Args:
            start: First day, inclusive.
            end: Last day, inclusive.

        Returns:
            Matching entries in arrival order. Dateless entries never match.
        """
        pass

    @abstractmethod
    def get_entry(self, entry_id: str) -> Optional[Entry]:
        """Get an entry by ID.

        Returns:
            Entry if found, None otherwise.
        """
        pass

    @abstractmethod
    def create_entry(self, entry: Entry) -> None:
        """Persist a new entry.

        Raises:
            ValueError: If an entry with the same ID exists.
        """
        pass

    @abstractmethod
    def update_entry(self, entry: Entry) -> None:
        """Overwrite the mutable fields of an existing entry.

        Raises:
            LookupError: If no entry has this ID.
        """
        pass


class BadgeStore(ABC):
    """Abstract storage of earned badges, at most one per type."""

    @abstractmethod
    def query_badges(self) -> list[Badge]:
        """Get every earned badge, most recent first."""
        pass

    @abstractmethod
    def create_badge(self, badge: Badge) -> bool:
        """Persist a badge unless its type is already earned.

        The check and the insert must be atomic.

        Returns:
            True if the badge was stored, False if the type already existed.
        """
        pass
