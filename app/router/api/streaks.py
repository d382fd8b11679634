from fastapi import APIRouter, Depends, status

from app.router.api.logics.dashboard_logic import to_streak_out
from app.router.dependencies import get_current_user_id, get_streak_tracker
from app.router.service.streak_service import StreakTracker
from app.schema.streaks_schema import StreakOut

router = APIRouter()


@router.get("", response_model=StreakOut, status_code=status.HTTP_200_OK)
async def get_streak(
    user_id: str = Depends(get_current_user_id),
    tracker: StreakTracker = Depends(get_streak_tracker),
):
    """Streak of the current user. A user with no activity gets zeros, not a 404."""
    return to_streak_out(tracker.get_streak(user_id))
