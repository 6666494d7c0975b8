"""Badge data model."""

import uuid
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

BadgeType = Literal["7days", "30days", "100days", "total50", "total100", "total365"]


class Badge(BaseModel):
    """Represents an achievement earned once and kept forever."""

    id: str = Field(
        default_factory=lambda: uuid.uuid4().hex, description="Unique badge ID"
    )
    type: BadgeType = Field(..., description="Achievement code")
    earned_at: datetime = Field(
        default_factory=datetime.now, description="When the badge was earned"
    )

    model_config = {"frozen": True}
