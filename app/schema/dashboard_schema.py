from pydantic import BaseModel
from typing import List
from datetime import date

from app.schema.streaks_schema import StreakOut


class ChartDataItem(BaseModel):
    name: str
    count: int
    fill: str


class HeatmapEntry(BaseModel):
    date: date
    count: int


class HeatmapOut(BaseModel):
    start_date: date
    end_date: date
    values: List[HeatmapEntry]


class DashboardOut(BaseModel):
    total_solved: int
    completed: int
    upcoming_contests: int
    streak: StreakOut
    difficulty_data: List[ChartDataItem]
    platform_data: List[ChartDataItem]
    topic_data: List[ChartDataItem]
