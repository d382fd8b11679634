from datetime import date
from typing import Optional

from app.exceptions import InvalidArgument, StorageError
from app.log import get_logger
from app.router.service.streak_service import StreakTracker
from app.schema.streaks_schema import StreakRecord

log = get_logger(__name__)


##############
### streak ###
##############

def record_activity_safely(
    tracker: StreakTracker, user_id: str, today: Optional[date] = None
) -> Optional[StreakRecord]:
    """
    Background task run after a question is added or marked completed.

    The primary write has already been committed when this runs, so a
    failure here is logged and dropped instead of reaching the client.
    """
    try:
        return tracker.record_activity(user_id, today)
    except (InvalidArgument, StorageError) as e:
        log.warning("Streak update for user %s skipped: %s", user_id, e)
        return None
