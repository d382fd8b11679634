from sqlalchemy import Column, String, DateTime, Integer, ForeignKey, PrimaryKeyConstraint
from sqlalchemy.orm import relationship
from app.database.base_class import Base
from app.date_util import local_now


class QuestionCompletion(Base):
    __tablename__ = "question_completions"

    user_id = Column(String(128), nullable=False, index=True)
    question_id = Column(Integer, ForeignKey("questions.question_id", ondelete="CASCADE"), nullable=False)
    completed_at = Column(DateTime, default=local_now, nullable=False)

    __table_args__ = (
        PrimaryKeyConstraint("user_id", "question_id"),
    )
    question = relationship("Question", back_populates="completions")
