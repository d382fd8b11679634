from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from datetime import datetime

from app.schema.common_schema import Difficulty, Platform


class QuestionCreate(BaseModel):
    title: str = Field(..., min_length=3, max_length=200)
    link: str = ""
    description: str = Field("", max_length=500)
    difficulty: Difficulty
    platform: Platform
    topic_name: str = Field(..., min_length=1, max_length=100)
    comments: str = Field("", max_length=500)

    @field_validator("title", "topic_name", mode="before")
    @classmethod
    def strip_text(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("link")
    @classmethod
    def link_is_url_or_empty(cls, v: str) -> str:
        v = v.strip()
        if v and not v.startswith(("http://", "https://")):
            raise ValueError("Please enter a valid URL.")
        return v


class QuestionOut(BaseModel):
    question_id: int
    title: str
    link: str
    description: str
    difficulty: Difficulty
    platform: Platform
    topic_name: str
    comments: str
    completed: bool = False
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class QuestionsOut(BaseModel):
    questions: List[QuestionOut]


class CompletionToggle(BaseModel):
    completed: bool


class CompletionOut(BaseModel):
    question_id: int
    completed: bool
    completed_at: Optional[datetime] = None
