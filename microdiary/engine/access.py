"""Edit and premium feature gates."""

from datetime import date
from typing import Optional

from microdiary.engine.dates import is_same_day


def can_edit(entry_date: Optional[date], today: date, has_entitlement: bool) -> bool:
    """Check whether an entry may be edited.

    Today's entry is always editable. Any other day, dateless entries
    included, needs the extended-edit entitlement.
    """
    return is_same_day(entry_date, today) or has_entitlement


class FeatureAccess:
    """Premium feature checks for a given entitlement state."""

    def __init__(self, has_entitlement: bool = False):
        """Initialize feature access.

        Args:
            has_entitlement: Premium flag from the subscription service.
        """
        self._has_entitlement = has_entitlement

    @property
    def has_entitlement(self) -> bool:
        return self._has_entitlement

    def can_edit_entry(self, entry_date: Optional[date], today: date) -> bool:
        return can_edit(entry_date, today, self._has_entitlement)

    def can_search_history(self) -> bool:
        return self._has_entitlement

    def can_sort_by_satisfaction(self) -> bool:
        return self._has_entitlement
