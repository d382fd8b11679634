from datetime import date, timedelta
from unittest.mock import Mock

from app.exceptions import StorageError
from app.main import app
from app.model.streaks import Streak
from app.router.dependencies import get_streak_tracker


def test_streak_without_activity_is_zero(client, auth_headers):
    res = client.get("/streaks", headers=auth_headers())
    assert res.status_code == 200
    assert res.json() == {
        "current_streak": 0, "max_streak": 0, "last_activity_date": None, "last_active_display": None,
    }


def test_streak_after_activity(client, auth_headers, tracker):
    tracker.record_activity("u1", date(2024, 6, 2))
    tracker.record_activity("u1", date(2024, 6, 3))
    data = client.get("/streaks", headers=auth_headers()).json()
    assert data == {
        "current_streak": 2, "max_streak": 2,
        "last_activity_date": "2024-06-03", "last_active_display": "Jun 3",
    }


def test_streak_with_corrupted_date_is_readable(client, auth_headers, session_factory):
    with session_factory() as db:
        db.add(Streak(user_id="u1", current_streak=3, max_streak=5, last_activity_date="bogus"))
        db.commit()
    data = client.get("/streaks", headers=auth_headers()).json()
    assert data["last_activity_date"] is None
    assert data["max_streak"] == 5


def test_daily_questions_build_streak(client, auth_headers, clock):
    headers = auth_headers()
    body = {"title": "Daily", "difficulty": "Easy", "platform": "Other", "topic_name": "Misc"}
    for _ in range(3):
        client.post("/questions", json=body, headers=headers)
        client.post("/questions", json=body, headers=headers)
        clock.today = clock.today + timedelta(days=1)

    data = client.get("/streaks", headers=headers).json()
    assert data["current_streak"] == 3
    assert data["last_activity_date"] == "2024-01-12"


def test_storage_failure_maps_to_503(client, auth_headers):
    broken = Mock()
    broken.get_streak.side_effect = StorageError("down")
    app.dependency_overrides[get_streak_tracker] = lambda: broken
    res = client.get("/streaks", headers=auth_headers())
    assert res.status_code == 503
    assert res.json() == {"detail": "Storage unavailable"}
