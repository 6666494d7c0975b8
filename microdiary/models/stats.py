"""Derived statistics models. Never persisted."""

from datetime import date as date_type

from pydantic import BaseModel, Field


class DailyPoint(BaseModel):
    """One day of a satisfaction chart."""

    date: date_type = Field(..., description="Calendar day")
    satisfaction_score: int = Field(..., ge=0, le=100, description="Score, 0 for gaps")
    has_entry: bool = Field(..., description="Whether an entry exists for the day")

    model_config = {"frozen": True}


class RangeStats(BaseModel):
    """Summary of a trailing window of calendar days."""

    period: int = Field(..., gt=0, description="Window length in days")
    start_date: date_type = Field(..., description="First day of the window")
    end_date: date_type = Field(..., description="Last day of the window (today)")
    count: int = Field(..., ge=0, description="Number of entries in the window")
    average_satisfaction: float = Field(
        ..., ge=0, le=100, description="Mean satisfaction, 0 when empty"
    )
    series: list[DailyPoint] = Field(
        default_factory=list, description="One point per day, ascending"
    )

    model_config = {"frozen": True}
