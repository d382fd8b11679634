from datetime import date

from sqlalchemy import desc
from sqlalchemy.orm import Session

from app.date_util import local_now, normalize_timestamp
from app.model.contests import Contest
from app.schema.contest_schema import ContestCreate, ContestOut, ContestsOut


def _to_contest_out(c: Contest) -> ContestOut:
    return ContestOut(
        contest_id=c.contest_id,
        title=c.title,
        platform=c.platform,
        date=c.date,
        start_time=c.start_time,
        end_time=c.end_time,
        created_at=normalize_timestamp(c.created_at),
        updated_at=normalize_timestamp(c.updated_at),
    )


def create_contest_logic(db: Session, user_id: str, payload: ContestCreate) -> ContestOut:
    now = local_now()
    contest = Contest(
        user_id=user_id,
        title=payload.title,
        platform=payload.platform.value,
        date=payload.date,
        start_time=payload.start_time,
        end_time=payload.end_time,
        created_at=now,
        updated_at=now,
    )
    db.add(contest)
    db.commit()
    db.refresh(contest)
    return _to_contest_out(contest)


def list_contests_logic(db: Session, user_id: str) -> ContestsOut:
    """Return the user's contests, latest date first."""
    contests = (
        db.query(Contest)
        .filter(Contest.user_id == user_id)
        .order_by(desc(Contest.date), desc(Contest.start_time))
        .all()
    )
    return ContestsOut(contests=[_to_contest_out(c) for c in contests])


def upcoming_contests_count_logic(db: Session, user_id: str, today: date) -> int:
    return db.query(Contest).filter(Contest.user_id == user_id, Contest.date >= today).count()
