"""Time utilities for consistent timestamp handling."""

from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo


def utc_now() -> datetime:
    """Return current UTC timestamp (timezone-aware)."""
    return datetime.now(timezone.utc)


def today_in(tz_name: str) -> date:
    """Return the current calendar date in the given IANA timezone."""
    return utc_now().astimezone(ZoneInfo(tz_name)).date()
