from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.router.api.logics.topic_logic import create_topic_logic, list_topics_logic, get_topic_logic
from app.router.dependencies import get_current_user_id
from app.schema.topic_schema import TopicCreate, TopicOut, TopicsOut, TopicDetailOut

router = APIRouter()


@router.post("", response_model=TopicOut, status_code=status.HTTP_201_CREATED)
async def add_topic(payload: TopicCreate, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    return create_topic_logic(db, user_id, payload)


@router.get("", response_model=TopicsOut, status_code=status.HTTP_200_OK)
async def get_topics(db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    """All topics of the current user with how many questions each holds."""
    return list_topics_logic(db, user_id)


@router.get("/{topic_id}", response_model=TopicDetailOut, status_code=status.HTTP_200_OK)
async def get_topic(topic_id: int, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    return get_topic_logic(db, user_id, topic_id)
