import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret")

from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.auth_util import create_access_token
from app.database import get_db
from app.database.base_class import Base
from app.main import app
from app.router.dependencies import get_streak_tracker, get_today
from app.router.service.streak_service import StreakTracker


class FixedClock:
    """Injectable clock so tests control what "today" is."""

    def __init__(self, today: date):
        self.today = today

    def __call__(self) -> date:
        return self.today


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


@pytest.fixture
def clock():
    return FixedClock(date(2024, 1, 10))


@pytest.fixture
def tracker(session_factory, clock):
    return StreakTracker(session_factory, clock=clock)


@pytest.fixture
def client(session_factory, tracker, clock):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_streak_tracker] = lambda: tracker
    app.dependency_overrides[get_today] = lambda: clock()
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    def make(user_id: str = "u1"):
        return {"Authorization": f"Bearer {create_access_token(user_id)}"}
    return make
