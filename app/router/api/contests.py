from datetime import date

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.router.api.logics.contest_logic import (
    create_contest_logic, list_contests_logic, upcoming_contests_count_logic,
)
from app.router.dependencies import get_current_user_id, get_today
from app.schema.contest_schema import ContestCreate, ContestOut, ContestsOut, UpcomingCountOut

router = APIRouter()


@router.post("", response_model=ContestOut, status_code=status.HTTP_201_CREATED)
async def add_contest(payload: ContestCreate, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    return create_contest_logic(db, user_id, payload)


@router.get("", response_model=ContestsOut, status_code=status.HTTP_200_OK)
async def get_contests(db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    return list_contests_logic(db, user_id)


@router.get("/upcoming/count", response_model=UpcomingCountOut, status_code=status.HTTP_200_OK)
async def get_upcoming_count(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
    today: date = Depends(get_today),
):
    """Number of contests scheduled for today or later."""
    return UpcomingCountOut(count=upcoming_contests_count_logic(db, user_id, today))
