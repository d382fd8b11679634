from datetime import date

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.router.api.logics.dashboard_logic import dashboard_logic, heatmap_logic
from app.router.dependencies import get_current_user_id, get_streak_tracker, get_today
from app.router.service.streak_service import StreakTracker
from app.schema.dashboard_schema import DashboardOut, HeatmapOut

router = APIRouter()


@router.get("", response_model=DashboardOut, status_code=status.HTTP_200_OK)
async def get_dashboard(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
    tracker: StreakTracker = Depends(get_streak_tracker),
    today: date = Depends(get_today),
):
    return dashboard_logic(db, user_id, tracker, today)


@router.get("/heatmap", response_model=HeatmapOut, status_code=status.HTTP_200_OK)
async def get_heatmap(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
    today: date = Depends(get_today),
):
    """Completions per day over the heatmap window."""
    return heatmap_logic(db, user_id, today)
