from pydantic import BaseModel, Field, field_validator
from typing import List
from datetime import datetime

from app.schema.question_schema import QuestionOut


class TopicCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        return v.strip() if isinstance(v, str) else v


class TopicOut(BaseModel):
    topic_id: int
    name: str
    created_at: datetime
    updated_at: datetime
    question_count: int = 0

    class Config:
        from_attributes = True


class TopicsOut(BaseModel):
    topics: List[TopicOut]


class TopicDetailOut(TopicOut):
    questions: List[QuestionOut] = []
