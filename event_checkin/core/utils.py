"""General utility functions."""
from datetime import date, datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo


def utcnow() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def today(tz: Optional[ZoneInfo] = None) -> date:
    """Current calendar date in ``tz`` (UTC when not given)."""
    return datetime.now(tz or timezone.utc).date()


def to_utc(dt: datetime) -> datetime:
    """Convert datetime to UTC timezone."""
    if dt.tzinfo is None:
        # SQLite drops tzinfo; stored values are always UTC
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def isoformat_utc(dt: datetime) -> str:
    """Render a datetime as ISO-8601 in UTC with a ``Z`` suffix."""
    return to_utc(dt).isoformat(timespec="milliseconds").replace("+00:00", "Z")
