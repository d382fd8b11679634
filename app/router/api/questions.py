from typing import Optional

from fastapi import APIRouter, BackgroundTasks, Depends, Query, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.router.api.logics.question_logic import (
    create_question_logic, list_questions_logic, set_completion_logic,
)
from app.router.background.streak_task import record_activity_safely
from app.router.dependencies import get_current_user_id, get_streak_tracker
from app.router.service.streak_service import StreakTracker
from app.schema.common_schema import Difficulty, Platform
from app.schema.question_schema import (
    QuestionCreate, QuestionOut, QuestionsOut, CompletionToggle, CompletionOut,
)

router = APIRouter()


@router.post("", response_model=QuestionOut, status_code=status.HTTP_201_CREATED)
async def add_question(
    payload: QuestionCreate,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
    tracker: StreakTracker = Depends(get_streak_tracker),
):
    """Record a solved question. Counts as activity for the daily streak."""
    question = create_question_logic(db, user_id, payload)
    background_tasks.add_task(record_activity_safely, tracker, user_id)
    return question


@router.get("", response_model=QuestionsOut, status_code=status.HTTP_200_OK)
async def get_questions(
    difficulty: Optional[Difficulty] = Query(None),
    platform: Optional[Platform] = Query(None),
    topic_name: Optional[str] = Query(None),
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    return list_questions_logic(
        db,
        user_id,
        difficulty=difficulty.value if difficulty else None,
        platform=platform.value if platform else None,
        topic_name=topic_name,
    )


@router.put("/{question_id}/completion", response_model=CompletionOut, status_code=status.HTTP_200_OK)
async def toggle_completion(
    question_id: int,
    payload: CompletionToggle,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
    tracker: StreakTracker = Depends(get_streak_tracker),
):
    """Mark or unmark a question as completed. A new mark counts as activity."""
    result, newly_completed = set_completion_logic(db, user_id, question_id, payload.completed)
    if newly_completed:
        background_tasks.add_task(record_activity_safely, tracker, user_id)
    return result
