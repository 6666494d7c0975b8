"""Streak, badge and period statistics engine.

Everything here is a pure function over an entry snapshot, apart from
``award_badges`` which writes through a badge store.
"""

from microdiary.engine.access import FeatureAccess, can_edit
from microdiary.engine.badges import (
    BADGE_CATALOG,
    BadgeDefinition,
    award_badges,
    evaluate_badges,
    get_badge_definition,
    qualifying_badges,
)
from microdiary.engine.dates import (
    add_days,
    days_between,
    is_same_day,
    local_day,
    start_of_day,
    subtract_years,
)
from microdiary.engine.history import SortOption, group_by_month, search_entries, sort_entries
from microdiary.engine.periods import (
    LOOKBACK_PERIODS,
    RANGE_PERIODS,
    anniversary_entry,
    lookback_day,
    lookback_entry,
    range_bounds,
    range_statistics,
)
from microdiary.engine.streaks import calculate_streak, index_by_day

__all__ = [
    "BADGE_CATALOG",
    "LOOKBACK_PERIODS",
    "RANGE_PERIODS",
    "BadgeDefinition",
    "FeatureAccess",
    "SortOption",
    "add_days",
    "anniversary_entry",
    "award_badges",
    "calculate_streak",
    "can_edit",
    "days_between",
    "evaluate_badges",
    "get_badge_definition",
    "group_by_month",
    "index_by_day",
    "is_same_day",
    "local_day",
    "lookback_day",
    "lookback_entry",
    "qualifying_badges",
    "range_bounds",
    "range_statistics",
    "search_entries",
    "sort_entries",
    "start_of_day",
    "subtract_years",
]
