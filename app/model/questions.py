from sqlalchemy import Column, String, DateTime, Integer
from sqlalchemy.orm import relationship
from app.database.base_class import Base
from app.date_util import local_now


class Question(Base):
    __tablename__ = "questions"

    question_id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    user_id = Column(String(128), nullable=False, index=True)

    # attributes
    title = Column(String(200), nullable=False)
    link = Column(String(2048), nullable=False, default="")
    description = Column(String(500), nullable=False, default="")
    difficulty = Column(String(16), nullable=False)
    platform = Column(String(32), nullable=False)
    topic_name = Column(String(100), nullable=False, index=True)
    comments = Column(String(500), nullable=False, default="")
    created_at = Column(DateTime, default=local_now, nullable=False)
    updated_at = Column(DateTime, default=local_now, onupdate=local_now, nullable=False)

    # relationship
    completions = relationship("QuestionCompletion", back_populates="question", cascade="all, delete-orphan")
