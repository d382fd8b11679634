from sqlalchemy import Column, String, Integer, DateTime
from app.database.base_class import Base
from app.date_util import local_now


class Streak(Base):
    __tablename__ = "streaks"

    user_id = Column(String(128), primary_key=True, index=True)
    current_streak = Column(Integer, default=0, nullable=False)
    max_streak = Column(Integer, default=0, nullable=False)
    # stored as YYYY-MM-DD text, read through app.date_util
    last_activity_date = Column(String(32), nullable=True)
    updated_at = Column(DateTime, default=local_now, nullable=False)
