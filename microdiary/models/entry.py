"""Entry data model."""

import uuid
from datetime import date as date_type
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

# Enforced by the write/edit flows, not by storage
ENTRY_TEXT_MAX_LENGTH = 100


class Entry(BaseModel):
    """Represents one diary line for a calendar day."""

    id: str = Field(
        default_factory=lambda: uuid.uuid4().hex, description="Unique entry ID"
    )
    date: Optional[date_type] = Field(
        default=None, description="Local calendar day the entry belongs to"
    )
    text: str = Field(default="", description="Short free-form note")
    satisfaction_score: int = Field(..., ge=0, le=100, description="Satisfaction 0-100")
    created_at: datetime = Field(
        default_factory=datetime.now, description="Creation timestamp"
    )
    updated_at: Optional[datetime] = Field(
        default=None, description="Last modification timestamp"
    )
    is_edited: bool = Field(default=False, description="Modified after creation")

    model_config = {"frozen": True}

    @field_validator("date", mode="before")
    @classmethod
    def _normalize_date(cls, value):
        """Reduce timestamps to their local calendar day."""
        if isinstance(value, datetime):
            if value.tzinfo is not None:
                value = value.astimezone()
            return value.date()
        return value

    def edited(self, text: str, satisfaction_score: int, now: datetime) -> "Entry":
        """Return a modified copy of this entry.

        The copy is re-validated, so an out-of-range score raises.

        Args:
            text: New note text.
            satisfaction_score: New satisfaction score.
            now: Modification timestamp.

        Returns:
            New entry with ``is_edited`` set and ``updated_at`` stamped.
        """
        data = self.model_dump()
        data.update(
            text=text,
            satisfaction_score=satisfaction_score,
            updated_at=now,
            is_edited=True,
        )
        return Entry(**data)
