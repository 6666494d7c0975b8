"""Achievement badges for streaks and total entry counts.

Each catalog entry is an independent threshold check. Awarding goes through
the badge store, whose uniqueness constraint on the badge type keeps a type
from ever being stored twice.
"""

import logging
from datetime import datetime
from typing import Iterable, Literal, NamedTuple

from microdiary.db.base import BadgeStore
from microdiary.models import Badge, BadgeType

logger = logging.getLogger(__name__)


class BadgeDefinition(NamedTuple):
    """A badge type and the threshold that unlocks it."""

    type: BadgeType
    metric: Literal["streak", "total"]
    threshold: int
    title: str
    description: str


BADGE_CATALOG: tuple[BadgeDefinition, ...] = (
    BadgeDefinition("7days", "streak", 7, "One Week", "7-day streak"),
    BadgeDefinition("30days", "streak", 30, "One Month", "30-day streak"),
    BadgeDefinition("100days", "streak", 100, "100 Days", "100-day streak"),
    BadgeDefinition("total50", "total", 50, "50 Entries", "50 entries written"),
    BadgeDefinition("total100", "total", 100, "100 Entries", "100 entries written"),
    BadgeDefinition("total365", "total", 365, "One Year", "365 entries written"),
)


def get_badge_definition(badge_type: str) -> BadgeDefinition:
    """Look up a catalog entry by type.

    Raises:
        ValueError: If the type is not in the catalog.
    """
    for definition in BADGE_CATALOG:
        if definition.type == badge_type:
            return definition
    valid = [d.type for d in BADGE_CATALOG]
    raise ValueError(f"Unknown badge type: {badge_type}. Must be one of {valid}")


def qualifying_badges(streak: int, total: int) -> list[BadgeType]:
    """Get every badge type whose condition currently holds."""
    values = {"streak": streak, "total": total}
    return [d.type for d in BADGE_CATALOG if values[d.metric] >= d.threshold]


def evaluate_badges(
    streak: int, total: int, earned: Iterable[str]
) -> list[BadgeType]:
    """Get the badge types that qualify and are not earned yet.

    Args:
        streak: Current streak in days.
        total: Total number of entries.
        earned: Badge types already awarded.

    Returns:
        Newly qualifying badge types, in catalog order.
    """
    earned_types = set(earned)
    return [t for t in qualifying_badges(streak, total) if t not in earned_types]


def award_badges(
    store: BadgeStore, streak: int, total: int, now: datetime
) -> list[Badge]:
    """Create a badge record for every newly qualifying type.

    Safe to call repeatedly: types already stored are skipped, and a
    concurrent award of the same type is dropped by the store.

    Args:
        store: Badge persistence.
        streak: Current streak in days.
        total: Total number of entries.
        now: Award timestamp.

    Returns:
        Badges actually created by this call.
    """
    earned = [badge.type for badge in store.query_badges()]
    awarded = []
    for badge_type in evaluate_badges(streak, total, earned):
        badge = Badge(type=badge_type, earned_at=now)
        if store.create_badge(badge):
            logger.info("Awarded badge %s", badge_type)
            awarded.append(badge)
    return awarded
