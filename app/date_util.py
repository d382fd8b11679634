"""
Helpers for reading dates and timestamps that come back from storage.

Stored values are not always well formed (older rows, hand edits, other
writers), so every read of a persisted date goes through this module.
``parse_calendar_date`` is strict and raises ``MalformedState``; the
``normalize_*`` functions log a warning and return a fallback instead.
"""
from datetime import date, datetime
from typing import Any, Optional
from zoneinfo import ZoneInfo

from app.config import settings
from app.exceptions import MalformedState
from app.log import get_logger

log = get_logger(__name__)


def _zone(tz_name: Optional[str] = None) -> ZoneInfo:
    return ZoneInfo(tz_name or settings.STREAK_TIMEZONE)


def today(tz_name: Optional[str] = None) -> date:
    """Current calendar date in ``tz_name`` (defaults to ``STREAK_TIMEZONE``)."""
    return datetime.now(_zone(tz_name)).date()


def local_now(tz_name: Optional[str] = None) -> datetime:
    """
    Current wall-clock time in ``tz_name`` as a naive ``datetime``.

    Every stored timestamp is written with this, so its date part is the
    same calendar day that ``today`` reports.
    """
    return datetime.now(_zone(tz_name)).replace(tzinfo=None)


def local_date(value: Any, tz_name: Optional[str] = None) -> date:
    """Calendar day of a stored timestamp. Aware values are converted to the zone first."""
    ts = normalize_timestamp(value)
    if ts.tzinfo is not None:
        ts = ts.astimezone(_zone(tz_name)).replace(tzinfo=None)
    return ts.date()


def parse_calendar_date(value: Any) -> date:
    """
    Parse a persisted calendar date.

    Parameters:
        value: A ``date``, a ``datetime`` (its date part is used) or an ISO
        string such as ``2024-01-02`` or ``2024-01-02T10:00:00``.

    Returns:
        date: The parsed date.

    Raises:
        MalformedState: If the value is empty or cannot be parsed.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        text = value.strip()
        try:
            if len(text) == 10:
                return date.fromisoformat(text)
            # only a time part may follow the date
            if len(text) > 10 and text[10] in "T ":
                return datetime.fromisoformat(text).date()
        except ValueError:
            pass
    raise MalformedState(f"Unparsable calendar date: {value!r}")


def normalize_calendar_date(value: Any, fallback: Optional[date] = None) -> Optional[date]:
    """
    Lenient variant of ``parse_calendar_date``.

    ``None`` and empty strings mean "absent" and return ``None``. Anything
    else that fails to parse is logged and replaced by ``fallback``.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    try:
        return parse_calendar_date(value)
    except MalformedState:
        log.warning("Stored date %r is malformed, using %s instead", value, fallback)
        return fallback


def normalize_timestamp(value: Any, fallback: Optional[datetime] = None) -> datetime:
    """
    Coerce a persisted timestamp into a ``datetime``.

    Accepts ``datetime``, ``date``, ISO strings and epoch seconds. When the
    value cannot be read the fallback is returned (current time if none is
    given) and a warning is logged.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value, tz=_zone()).replace(tzinfo=None)
    if isinstance(value, str) and value.strip():
        try:
            return datetime.fromisoformat(value.strip())
        except ValueError:
            pass
    if fallback is None:
        fallback = local_now()
    log.warning("Stored timestamp %r is malformed, using %s instead", value, fallback)
    return fallback


def format_display_date(value: Optional[date]) -> Optional[str]:
    """Short display form used by the dashboard, e.g. ``Jun 3``."""
    if value is None:
        return None
    return f"{value.strftime('%b')} {value.day}"
