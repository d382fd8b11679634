from typing import Optional, Set, Tuple

from fastapi import HTTPException, status
from sqlalchemy import desc
from sqlalchemy.orm import Session

from app.date_util import local_now, normalize_timestamp
from app.model.questions import Question
from app.model.question_completions import QuestionCompletion
from app.schema.question_schema import (
    QuestionCreate, QuestionOut, QuestionsOut, CompletionOut,
)


def completed_question_ids(db: Session, user_id: str) -> Set[int]:
    rows = db.query(QuestionCompletion.question_id).filter(QuestionCompletion.user_id == user_id).all()
    return {r.question_id for r in rows}


def to_question_out(q: Question, completed: bool) -> QuestionOut:
    return QuestionOut(
        question_id=q.question_id,
        title=q.title,
        link=q.link or "",
        description=q.description or "",
        difficulty=q.difficulty,
        platform=q.platform,
        topic_name=q.topic_name,
        comments=q.comments or "",
        completed=completed,
        created_at=normalize_timestamp(q.created_at),
        updated_at=normalize_timestamp(q.updated_at),
    )


def create_question_logic(db: Session, user_id: str, payload: QuestionCreate) -> QuestionOut:
    """Store a solved question for the user."""
    now = local_now()
    question = Question(
        user_id=user_id,
        title=payload.title,
        link=payload.link,
        description=payload.description,
        difficulty=payload.difficulty.value,
        platform=payload.platform.value,
        topic_name=payload.topic_name,
        comments=payload.comments,
        created_at=now,
        updated_at=now,
    )
    db.add(question)
    db.commit()
    db.refresh(question)
    return to_question_out(question, completed=False)


def list_questions_logic(
    db: Session,
    user_id: str,
    difficulty: Optional[str] = None,
    platform: Optional[str] = None,
    topic_name: Optional[str] = None,
) -> QuestionsOut:
    """Return the user's questions, newest first, with their completion flag."""
    query = db.query(Question).filter(Question.user_id == user_id)
    if difficulty:
        query = query.filter(Question.difficulty == difficulty)
    if platform:
        query = query.filter(Question.platform == platform)
    if topic_name:
        query = query.filter(Question.topic_name == topic_name)
    questions = query.order_by(desc(Question.created_at), desc(Question.question_id)).all()

    done = completed_question_ids(db, user_id)
    return QuestionsOut(questions=[to_question_out(q, q.question_id in done) for q in questions])


def set_completion_logic(
    db: Session, user_id: str, question_id: int, completed: bool
) -> Tuple[CompletionOut, bool]:
    """
    Mark or unmark a question as completed.

    Returns the new state and whether a mark was newly created, which is
    what counts as activity for the streak.
    """
    question = db.query(Question).filter(
        Question.question_id == question_id,
        Question.user_id == user_id,
    ).first()
    if not question:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Question not found")

    mark = db.query(QuestionCompletion).filter(
        QuestionCompletion.user_id == user_id,
        QuestionCompletion.question_id == question_id,
    ).first()

    if completed:
        if mark:
            return CompletionOut(
                question_id=question_id, completed=True,
                completed_at=normalize_timestamp(mark.completed_at),
            ), False
        mark = QuestionCompletion(user_id=user_id, question_id=question_id, completed_at=local_now())
        db.add(mark)
        db.commit()
        return CompletionOut(question_id=question_id, completed=True, completed_at=mark.completed_at), True

    if mark:
        db.delete(mark)
        db.commit()
    return CompletionOut(question_id=question_id, completed=False), False
