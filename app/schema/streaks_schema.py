from pydantic import BaseModel, Field
from datetime import date


class StreakRecord(BaseModel):
    """Per-user streak state. The zero value means no activity was ever recorded."""
    current_streak: int = Field(0, ge=0)
    max_streak: int = Field(0, ge=0)
    last_activity_date: date | None = None


class StreakOut(StreakRecord):
    last_active_display: str | None = None
