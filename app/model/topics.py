from sqlalchemy import Column, String, DateTime, Integer, UniqueConstraint
from app.database.base_class import Base
from app.date_util import local_now


class Topic(Base):
    __tablename__ = "topics"

    topic_id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    user_id = Column(String(128), nullable=False, index=True)

    # attributes
    name = Column(String(100), nullable=False)
    created_at = Column(DateTime, default=local_now, nullable=False)
    updated_at = Column(DateTime, default=local_now, onupdate=local_now, nullable=False)

    __table_args__ = (
        UniqueConstraint("user_id", "name", name="uq_topics_user_id_name"),
    )
