from sqlalchemy import Column, String, Date, DateTime, Integer
from app.database.base_class import Base
from app.date_util import local_now


class Contest(Base):
    __tablename__ = "contests"

    contest_id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    user_id = Column(String(128), nullable=False, index=True)

    # attributes
    title = Column(String(200), nullable=False)
    platform = Column(String(32), nullable=False)
    date = Column(Date, nullable=False, index=True)
    start_time = Column(String(5), nullable=False)
    end_time = Column(String(5), nullable=False)
    created_at = Column(DateTime, default=local_now, nullable=False)
    updated_at = Column(DateTime, default=local_now, onupdate=local_now, nullable=False)
