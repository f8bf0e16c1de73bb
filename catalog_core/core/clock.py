from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Default clock: timezone-aware current UTC time"""
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Convert to UTC; naive datetimes (e.g. read back from SQLite) are taken as UTC"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
