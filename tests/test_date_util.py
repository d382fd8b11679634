from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from app.date_util import (
    format_display_date,
    local_date,
    local_now,
    normalize_calendar_date,
    normalize_timestamp,
    parse_calendar_date,
    today,
)
from app.config import settings
from app.exceptions import MalformedState


@pytest.mark.parametrize("value, expected", [
    ("2024-01-02", date(2024, 1, 2)),
    (" 2024-01-02 ", date(2024, 1, 2)),
    ("2024-01-02T23:59:00", date(2024, 1, 2)),
    ("2024-01-02 08:15:00", date(2024, 1, 2)),
    (date(2024, 6, 3), date(2024, 6, 3)),
    (datetime(2024, 6, 3, 8, 30), date(2024, 6, 3)),
])
def test_parse_calendar_date(value, expected):
    assert parse_calendar_date(value) == expected


@pytest.mark.parametrize("value", [None, "", "   ", "yesterday", "2024-02-30", 20240101, "2024-01-02garbage", "2024-01-0"])
def test_parse_calendar_date_rejects(value):
    with pytest.raises(MalformedState):
        parse_calendar_date(value)


def test_normalize_calendar_date_absent_values():
    assert normalize_calendar_date(None) is None
    assert normalize_calendar_date("") is None


def test_normalize_calendar_date_falls_back(caplog):
    fallback = date(2024, 1, 1)
    with caplog.at_level("WARNING", logger="app"):
        assert normalize_calendar_date("nope", fallback) == fallback
    assert "nope" in caplog.text


def test_normalize_timestamp_accepts_known_shapes():
    assert normalize_timestamp(datetime(2024, 1, 1, 12)) == datetime(2024, 1, 1, 12)
    assert normalize_timestamp(date(2024, 1, 1)) == datetime(2024, 1, 1)
    assert normalize_timestamp("2024-01-01T10:00:00") == datetime(2024, 1, 1, 10)
    assert normalize_timestamp(0) == datetime(1970, 1, 1)


def test_normalize_timestamp_fallback(caplog):
    fallback = datetime(2020, 5, 5)
    with caplog.at_level("WARNING", logger="app"):
        assert normalize_timestamp("bad", fallback) == fallback
        assert normalize_timestamp(None, fallback) == fallback
    assert len(caplog.records) == 2


def test_normalize_timestamp_defaults_to_now():
    before = local_now()
    value = normalize_timestamp(object())
    assert before <= value <= local_now()


def test_today_uses_timezone():
    assert today("UTC") == datetime.now(timezone.utc).date()


def test_format_display_date():
    assert format_display_date(date(2024, 6, 3)) == "Jun 3"
    assert format_display_date(None) is None


def test_local_now_follows_configured_zone(monkeypatch):
    monkeypatch.setattr(settings, "STREAK_TIMEZONE", "Asia/Tokyo")
    before = datetime.now(ZoneInfo("Asia/Tokyo")).replace(tzinfo=None)
    value = local_now()
    after = datetime.now(ZoneInfo("Asia/Tokyo")).replace(tzinfo=None)
    assert value.tzinfo is None
    assert before <= value <= after
    assert abs(local_now("UTC") + timedelta(hours=9) - value) < timedelta(minutes=1)


def test_local_date_converts_aware_timestamps(monkeypatch):
    monkeypatch.setattr(settings, "STREAK_TIMEZONE", "Asia/Tokyo")
    late_utc = datetime(2024, 1, 1, 23, 30, tzinfo=timezone.utc)
    assert local_date(late_utc) == date(2024, 1, 2)
    assert local_date("2024-01-01T23:30:00+00:00") == date(2024, 1, 2)
    # naive values were already written in the zone
    assert local_date(datetime(2024, 1, 1, 23, 30)) == date(2024, 1, 1)
