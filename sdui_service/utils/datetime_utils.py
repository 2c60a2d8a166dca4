"""
Clock and timestamp helpers.

The mode clock is read here, at the edge, and handed to the pure
composition code as an explicit ``now``.
"""
from datetime import datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo

from sdui_service.config import settings


def utc_now() -> datetime:
    """Get current UTC time with timezone awareness."""
    return datetime.now(timezone.utc)


def local_now(tz_name: Optional[str] = None) -> datetime:
    """
    Get the current local time used for mode resolution.

    Args:
        tz_name: IANA zone name; falls back to ``settings.timezone`` and
            then to the server's local zone.

    Returns:
        Timezone-aware datetime
    """
    tz_name = tz_name or settings.timezone
    if tz_name:
        return datetime.now(ZoneInfo(tz_name))
    return datetime.now().astimezone()


def to_iso_string(dt: Optional[datetime] = None) -> str:
    """
    Convert datetime to an RFC 3339 string with second precision.

    Example:
        >>> to_iso_string(datetime(2025, 1, 15, 10, 30, 45, tzinfo=timezone.utc))
        '2025-01-15T10:30:45Z'
    """
    if dt is None:
        dt = utc_now()

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)

    iso_str = dt.isoformat(timespec='seconds')
    if iso_str.endswith('+00:00'):
        return iso_str[:-6] + 'Z'
    return iso_str


def to_clock_string(dt: datetime) -> str:
    """Format a 12-hour wall clock reading, e.g. ``3:04 PM``."""
    hour = dt.hour % 12 or 12
    return f"{hour}:{dt.minute:02d} {'AM' if dt.hour < 12 else 'PM'}"


def format_duration(seconds: int) -> str:
    """Format a duration as ``H:MM:SS``."""
    seconds = max(int(seconds), 0)
    hours, remainder = divmod(seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{hours}:{minutes:02d}:{secs:02d}"
