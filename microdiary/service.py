"""Diary service wiring stores, clock and entitlement together.

This is the write/edit side of the application plus convenience readers
that hand store snapshots to the engine.
"""

import logging
from datetime import date
from typing import Optional

from microdiary.clock import Clock, SystemClock
from microdiary.db.base import BadgeStore, EntryStore
from microdiary.engine import (
    BADGE_CATALOG,
    BadgeDefinition,
    FeatureAccess,
    SortOption,
    anniversary_entry,
    award_badges,
    calculate_streak,
    local_day,
    lookback_day,
    lookback_entry,
    range_bounds,
    range_statistics,
    search_entries,
    sort_entries,
)
from microdiary.models import ENTRY_TEXT_MAX_LENGTH, Badge, Entry, RangeStats

logger = logging.getLogger(__name__)


def validate_entry_input(text: str, satisfaction_score: int) -> str:
    """Validate user input for an entry.

    Args:
        text: Note text.
        satisfaction_score: Score 0-100.

    Returns:
        The stripped text.

    Raises:
        ValueError: If the text is empty or too long, or the score is out
            of range.
    """
    text = text.strip()
    if not text:
        raise ValueError("Entry text must not be empty")
    if len(text) > ENTRY_TEXT_MAX_LENGTH:
        raise ValueError(
            f"Entry text is {len(text)} characters, limit is {ENTRY_TEXT_MAX_LENGTH}"
        )
    if not 0 <= satisfaction_score <= 100:
        raise ValueError(f"Satisfaction score must be 0-100, got {satisfaction_score}")
    return text


class DiaryService:
    """Application service for writing, editing and reviewing entries."""

    def __init__(
        self,
        entry_store: EntryStore,
        badge_store: BadgeStore,
        clock: Optional[Clock] = None,
        access: Optional[FeatureAccess] = None,
    ):
        """Initialize the service.

        Args:
            entry_store: Entry persistence.
            badge_store: Badge persistence.
            clock: Time source. Defaults to the system clock.
            access: Premium feature gates. Defaults to no entitlement.
        """
        self._entries = entry_store
        self._badges = badge_store
        self._clock = clock or SystemClock()
        self._access = access or FeatureAccess()

    @property
    def access(self) -> FeatureAccess:
        return self._access

    def today(self) -> date:
        """Get the current local calendar day."""
        return local_day(self._clock.now())

    def today_entry(self) -> Optional[Entry]:
        """Get today's entry, if written."""
        today = self.today()
        entries = self._entries.query_by_date_range(today, today)
        return entries[0] if entries else None

    # ==================== Write / Edit ====================

    def write_today(self, text: str, satisfaction_score: int) -> Entry:
        """Write today's entry.

        Args:
            text: Note text, at most ENTRY_TEXT_MAX_LENGTH characters.
            satisfaction_score: Score 0-100.

        Returns:
            The stored entry.

        Raises:
            ValueError: If input is invalid or today already has an entry.
        """
        text = validate_entry_input(text, satisfaction_score)
        if self.today_entry() is not None:
            raise ValueError(f"An entry for {self.today().isoformat()} already exists")

        now = self._clock.now()
        entry = Entry(
            date=local_day(now),
            text=text,
            satisfaction_score=satisfaction_score,
            created_at=now,
        )
        self._entries.create_entry(entry)
        logger.info("Wrote entry %s for %s", entry.id, entry.date)
        return entry

    def edit_entry(self, entry_id: str, text: str, satisfaction_score: int) -> Entry:
        """Edit an existing entry.

        Args:
            entry_id: ID of the entry to edit.
            text: New note text.
            satisfaction_score: New score.

        Returns:
            The updated entry.

        Raises:
            ValueError: If input is invalid.
            LookupError: If the entry does not exist.
            PermissionError: If the entry is not today's and the
                extended-edit entitlement is missing.
        """
        text = validate_entry_input(text, satisfaction_score)
        entry = self._entries.get_entry(entry_id)
        if entry is None:
            raise LookupError(f"Entry {entry_id} not found")
        if not self._access.can_edit_entry(entry.date, self.today()):
            raise PermissionError("Editing past entries requires premium")

        updated = entry.edited(text, satisfaction_score, self._clock.now())
        self._entries.update_entry(updated)
        logger.info("Edited entry %s", entry_id)
        return updated

    # ==================== Streaks / Badges ====================

    def current_streak(self) -> int:
        """Get the current consecutive-day streak."""
        return calculate_streak(self._entries.query_all(), self.today())

    def check_badges(self) -> list[Badge]:
        """Award every badge that newly qualifies.

        Returns:
            Badges awarded by this call.
        """
        entries = self._entries.query_all()
        streak = calculate_streak(entries, self.today())
        return award_badges(self._badges, streak, len(entries), self._clock.now())

    def badge_board(self) -> list[tuple[BadgeDefinition, Optional[Badge]]]:
        """Pair every catalog badge with its earned record, if any."""
        earned = {badge.type: badge for badge in self._badges.query_badges()}
        return [(definition, earned.get(definition.type)) for definition in BADGE_CATALOG]

    # ==================== Records ====================

    def statistics(self, period: int) -> RangeStats:
        """Get count, average and daily series for the trailing period."""
        now = self._clock.now()
        start, end = range_bounds(now, period)
        return range_statistics(
            self._entries.query_by_date_range(start, end), now, period
        )

    def lookback(self, period: int) -> Optional[Entry]:
        """Get the entry written exactly ``period`` days ago."""
        now = self._clock.now()
        day = lookback_day(now, period)
        return lookback_entry(self._entries.query_by_date_range(day, day), now, period)

    def anniversary(self, years: int = 1) -> Optional[Entry]:
        """Get the entry from this day ``years`` years ago."""
        return anniversary_entry(self._entries.query_all(), self._clock.now(), years)

    def history(
        self,
        query: Optional[str] = None,
        sort: SortOption = SortOption.DATE_DESC,
    ) -> list[Entry]:
        """List past entries, optionally searched and sorted.

        Raises:
            PermissionError: If search or satisfaction sorting is used
                without premium.
        """
        if query and not self._access.can_search_history():
            raise PermissionError("Searching the diary requires premium")
        if sort.by_satisfaction and not self._access.can_sort_by_satisfaction():
            raise PermissionError("Sorting by satisfaction requires premium")

        entries = search_entries(self._entries.query_all(), query)
        return sort_entries(entries, sort)

    def all_entries(self) -> list[Entry]:
        """Get every entry in arrival order."""
        return self._entries.query_all()
