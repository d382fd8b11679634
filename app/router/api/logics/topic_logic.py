from fastapi import HTTPException, status
from sqlalchemy import func, asc
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.date_util import local_now, normalize_timestamp
from app.model.questions import Question
from app.model.topics import Topic
from app.router.api.logics.question_logic import completed_question_ids, to_question_out
from app.schema.topic_schema import TopicCreate, TopicOut, TopicsOut, TopicDetailOut


def _to_topic_out(topic: Topic, question_count: int) -> TopicOut:
    return TopicOut(
        topic_id=topic.topic_id,
        name=topic.name,
        created_at=normalize_timestamp(topic.created_at),
        updated_at=normalize_timestamp(topic.updated_at),
        question_count=question_count,
    )


def create_topic_logic(db: Session, user_id: str, payload: TopicCreate) -> TopicOut:
    """Create a topic. Names are unique per user."""
    exists = db.query(Topic).filter(Topic.user_id == user_id, Topic.name == payload.name).first()
    if exists:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Topic already exists")

    now = local_now()
    topic = Topic(user_id=user_id, name=payload.name, created_at=now, updated_at=now)
    db.add(topic)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Topic already exists")
    db.refresh(topic)
    return _to_topic_out(topic, 0)


def list_topics_logic(db: Session, user_id: str) -> TopicsOut:
    """Return the user's topics ordered by name with their question counts."""
    topics = db.query(Topic).filter(Topic.user_id == user_id).order_by(asc(Topic.name)).all()
    counts = dict(
        db.query(Question.topic_name, func.count(Question.question_id))
        .filter(Question.user_id == user_id)
        .group_by(Question.topic_name)
        .all()
    )
    return TopicsOut(topics=[_to_topic_out(t, counts.get(t.name, 0)) for t in topics])


def get_topic_logic(db: Session, user_id: str, topic_id: int) -> TopicDetailOut:
    topic = db.query(Topic).filter(Topic.topic_id == topic_id, Topic.user_id == user_id).first()
    if not topic:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Topic not found")

    questions = (
        db.query(Question)
        .filter(Question.user_id == user_id, Question.topic_name == topic.name)
        .order_by(Question.created_at.desc(), Question.question_id.desc())
        .all()
    )
    done = completed_question_ids(db, user_id)
    base = _to_topic_out(topic, len(questions))
    return TopicDetailOut(
        **base.model_dump(),
        questions=[to_question_out(q, q.question_id in done) for q in questions],
    )
