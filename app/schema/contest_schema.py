from pydantic import BaseModel, Field, field_validator, model_validator
from typing import List
from datetime import date, datetime

from app.schema.common_schema import Platform

TIME_PATTERN = r"^([01]\d|2[0-3]):([0-5]\d)$"  # HH:MM, 24h


class ContestCreate(BaseModel):
    title: str = Field(..., min_length=3, max_length=200)
    platform: Platform
    date: date
    start_time: str = Field(..., pattern=TIME_PATTERN)
    end_time: str = Field(..., pattern=TIME_PATTERN)

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, v):
        return v.strip() if isinstance(v, str) else v

    @model_validator(mode="after")
    def end_after_start(self):
        # zero padded HH:MM compares correctly as text
        if self.end_time <= self.start_time:
            raise ValueError("End time must be after start time.")
        return self


class ContestOut(BaseModel):
    contest_id: int
    title: str
    platform: Platform
    date: date
    start_time: str
    end_time: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class ContestsOut(BaseModel):
    contests: List[ContestOut]


class UpcomingCountOut(BaseModel):
    count: int
