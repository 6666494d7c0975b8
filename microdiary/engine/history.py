"""Search, sort and grouping of past entries."""

from enum import Enum
from typing import Iterable, Optional

from microdiary.models import Entry


class SortOption(str, Enum):
    """Orderings offered by the history view."""

    DATE_ASC = "date_asc"
    DATE_DESC = "date_desc"
    SATISFACTION_ASC = "satisfaction_asc"
    SATISFACTION_DESC = "satisfaction_desc"

    @property
    def by_satisfaction(self) -> bool:
        return self in (SortOption.SATISFACTION_ASC, SortOption.SATISFACTION_DESC)


def search_entries(entries: Iterable[Entry], query: Optional[str]) -> list[Entry]:
    """Filter entries whose text contains ``query``, ignoring case.

    An empty or missing query keeps every entry.
    """
    if not query:
        return list(entries)
    needle = query.casefold()
    return [entry for entry in entries if needle in entry.text.casefold()]


def sort_entries(entries: Iterable[Entry], option: SortOption) -> list[Entry]:
    """Sort entries for display.

    Date orders put dateless entries last. Sorting is stable, so ties keep
    arrival order.
    """
    entries = list(entries)
    if option.by_satisfaction:
        return sorted(
            entries,
            key=lambda e: e.satisfaction_score,
            reverse=option is SortOption.SATISFACTION_DESC,
        )

    dated = [e for e in entries if e.date is not None]
    dateless = [e for e in entries if e.date is None]
    dated.sort(key=lambda e: e.date, reverse=option is SortOption.DATE_DESC)
    return dated + dateless


def group_by_month(entries: Iterable[Entry]) -> list[tuple[str, list[Entry]]]:
    """Group entries into ``YYYY-MM`` buckets for a timeline.

    Months are returned newest first and entries inside a month are newest
    first. Dateless entries are left out.
    """
    groups: dict[str, list[Entry]] = {}
    for entry in sort_entries(entries, SortOption.DATE_DESC):
        if entry.date is None:
            continue
        groups.setdefault(entry.date.strftime("%Y-%m"), []).append(entry)
    return sorted(groups.items(), key=lambda item: item[0], reverse=True)
