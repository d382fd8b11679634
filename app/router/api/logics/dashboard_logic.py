from collections import Counter
from datetime import date, timedelta
from typing import Any, Callable, Dict, Iterable, List, Optional

from sqlalchemy.orm import Session

from app.config import settings
from app.date_util import format_display_date, local_date
from app.model.question_completions import QuestionCompletion
from app.model.questions import Question
from app.router.api.logics.contest_logic import upcoming_contests_count_logic
from app.router.service.streak_service import StreakTracker
from app.schema.common_schema import DIFFICULTIES, PLATFORMS
from app.schema.dashboard_schema import ChartDataItem, DashboardOut, HeatmapEntry, HeatmapOut
from app.schema.streaks_schema import StreakOut, StreakRecord

CHART_COLORS = [
    "hsl(var(--chart-1))",
    "hsl(var(--chart-2))",
    "hsl(var(--chart-3))",
    "hsl(var(--chart-4))",
    "hsl(var(--chart-5))",
]


#########################
### Pure aggregations ###
#########################

def count_by(items: Iterable[Any], key: Callable[[Any], Optional[str]]) -> Counter:
    """Count items by ``key(item)``, skipping items whose key is empty."""
    counts = Counter()
    for item in items:
        k = key(item)
        if k:
            counts[k] += 1
    return counts


def build_chart_data(counts: Dict[str, int], names: Optional[List[str]] = None) -> List[ChartDataItem]:
    """
    Turn counts into chart rows.

    With ``names`` the rows follow that order and include zero counts.
    Without it only non-zero keys are returned, largest count first and
    ties broken by name.
    """
    if names is None:
        names = sorted((n for n, c in counts.items() if c > 0), key=lambda n: (-counts[n], n))
    return [
        ChartDataItem(name=name, count=counts.get(name, 0), fill=CHART_COLORS[i % len(CHART_COLORS)])
        for i, name in enumerate(names)
    ]


def build_heatmap(days: Iterable[date], start: date, end: date) -> List[HeatmapEntry]:
    """Per-day counts of ``days`` within ``[start, end]``, ascending, zero days omitted."""
    counts = Counter(d for d in days if start <= d <= end)
    return [HeatmapEntry(date=d, count=counts[d]) for d in sorted(counts)]


def to_streak_out(record: StreakRecord) -> StreakOut:
    return StreakOut(
        **record.model_dump(),
        last_active_display=format_display_date(record.last_activity_date),
    )


#######################
### Endpoint logics ###
#######################

def heatmap_logic(db: Session, user_id: str, today: date) -> HeatmapOut:
    start = today - timedelta(days=settings.HEATMAP_DAYS - 1)
    marks = db.query(QuestionCompletion.completed_at).filter(QuestionCompletion.user_id == user_id).all()
    days = [local_date(m.completed_at) for m in marks]
    return HeatmapOut(start_date=start, end_date=today, values=build_heatmap(days, start, today))


def dashboard_logic(db: Session, user_id: str, tracker: StreakTracker, today: date) -> DashboardOut:
    """Everything the dashboard page shows, computed from the user's rows."""
    questions = db.query(Question).filter(Question.user_id == user_id).all()
    completed = db.query(QuestionCompletion).filter(QuestionCompletion.user_id == user_id).count()

    return DashboardOut(
        total_solved=len(questions),
        completed=completed,
        upcoming_contests=upcoming_contests_count_logic(db, user_id, today),
        streak=to_streak_out(tracker.get_streak(user_id)),
        difficulty_data=build_chart_data(count_by(questions, lambda q: q.difficulty), DIFFICULTIES),
        platform_data=build_chart_data(count_by(questions, lambda q: q.platform), PLATFORMS),
        topic_data=build_chart_data(count_by(questions, lambda q: q.topic_name)),
    )
