"""
Daily activity streaks.

One ``streaks`` row per user holds the current run of consecutive active
days, the best run ever reached and the last day activity was seen.
``record_activity`` is idempotent within a calendar day and writes with a
compare-and-swap on ``last_activity_date`` so two first-of-the-day events
for the same user cannot both increment the streak.
"""
from datetime import date, timedelta
from typing import Callable, Optional

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from app.config import settings
from app.database.db import get_ctx_db
from app.date_util import local_now, normalize_calendar_date, today as current_day
from app.exceptions import InvalidArgument, StorageError
from app.log import get_logger
from app.model.streaks import Streak
from app.schema.streaks_schema import StreakRecord

log = get_logger(__name__)


def advance_streak(record: StreakRecord, today: date) -> StreakRecord:
    """
    Apply one qualifying activity on ``today`` to ``record``.

    Parameters:
        record (StreakRecord): The stored state. ``last_activity_date`` is
        None when nothing was recorded yet or the stored value was unreadable.
        today (date): The day the activity happened.

    Returns:
        StreakRecord: The new state. The same object is returned when the
        activity was already counted for ``today``.
    """
    last = record.last_activity_date
    if last == today and record.current_streak > 0:
        return record

    if last is not None and last == today - timedelta(days=1):
        current = record.current_streak + 1
    else:
        current = 1

    return StreakRecord(
        current_streak=current,
        max_streak=max(record.max_streak, current),
        last_activity_date=today,
    )


def _require_user_id(user_id: Optional[str]) -> str:
    if user_id is None or not str(user_id).strip():
        raise InvalidArgument("user_id is required")
    return str(user_id)


def _to_record(row: Streak) -> StreakRecord:
    """Read a row; a streak without a readable date is reported as 0."""
    last = normalize_calendar_date(row.last_activity_date)
    current = row.current_streak or 0
    if last is None and current:
        log.warning(
            "Streak row for user %s has no readable date (%r), treating as a break",
            row.user_id, row.last_activity_date,
        )
        current = 0
    return StreakRecord(
        current_streak=current,
        max_streak=row.max_streak or 0,
        last_activity_date=last,
    )


class StreakTracker:
    """Reads and updates per-user streak rows."""

    def __init__(
        self,
        session_factory: sessionmaker,
        clock: Optional[Callable[[], date]] = None,
        max_retries: Optional[int] = None,
    ):
        self._session_factory = session_factory
        self._clock = clock or current_day
        self.max_retries = max_retries if max_retries is not None else settings.STREAK_MAX_RETRIES

    def get_streak(self, user_id: Optional[str]) -> StreakRecord:
        """Return the user's streak, or the zero record if there is none."""
        if user_id is None or not str(user_id).strip():
            return StreakRecord()
        try:
            with get_ctx_db(self._session_factory) as db:
                row = db.query(Streak).filter(Streak.user_id == str(user_id)).first()
                if row is None:
                    return StreakRecord()
                return _to_record(row)
        except SQLAlchemyError as e:
            raise StorageError(f"Could not read streak for user {user_id}") from e

    def record_activity(self, user_id: Optional[str], today: Optional[date] = None) -> StreakRecord:
        """
        Count a qualifying activity for ``user_id`` on ``today``.

        Parameters:
            user_id (str): The signed-in user's id.
            today (date, optional): Defaults to the tracker's clock.

        Returns:
            StreakRecord: The state after the update.

        Raises:
            InvalidArgument: If ``user_id`` is missing. Nothing is read or written.
            StorageError: If the database fails or the row keeps changing
            underneath us for ``max_retries`` attempts.
        """
        user_id = _require_user_id(user_id)
        today = today or self._clock()

        for attempt in range(1, self.max_retries + 1):
            try:
                with get_ctx_db(self._session_factory) as db:
                    result = self._try_record(db, user_id, today)
            except SQLAlchemyError as e:
                raise StorageError(f"Could not update streak for user {user_id}") from e
            if result is not None:
                return result
            log.debug("Streak for user %s changed concurrently, retry %d", user_id, attempt)

        raise StorageError(
            f"Gave up updating streak for user {user_id} after {self.max_retries} attempts"
        )

    def _try_record(self, db: Session, user_id: str, today: date) -> Optional[StreakRecord]:
        """One read-compute-write round. Returns None when the write lost a race."""
        row = db.query(Streak).filter(Streak.user_id == user_id).first()

        if row is None:
            record = advance_streak(StreakRecord(), today)
            db.add(Streak(
                user_id=user_id,
                current_streak=record.current_streak,
                max_streak=record.max_streak,
                last_activity_date=record.last_activity_date.isoformat(),
                updated_at=local_now(),
            ))
            try:
                db.commit()
            except IntegrityError:
                db.rollback()
                return None
            log.debug("Started streak for user %s on %s", user_id, today)
            return record

        stored_date = row.last_activity_date
        previous = _to_record(row)
        record = advance_streak(previous, today)
        if record is previous:
            return previous

        stmt = update(Streak).where(Streak.user_id == user_id)
        if stored_date is None:
            stmt = stmt.where(Streak.last_activity_date.is_(None))
        else:
            stmt = stmt.where(Streak.last_activity_date == stored_date)
        stmt = stmt.values(
            current_streak=record.current_streak,
            max_streak=record.max_streak,
            last_activity_date=record.last_activity_date.isoformat(),
            updated_at=local_now(),
        )
        # the row was loaded into this session, don't let the ORM re-sync it
        outcome = db.execute(stmt.execution_options(synchronize_session=False))
        if outcome.rowcount == 0:
            db.rollback()
            return None
        db.commit()

        log.debug(
            "Streak for user %s: %d -> %d (max %d) on %s",
            user_id, previous.current_streak, record.current_streak, record.max_streak, today,
        )
        return record
