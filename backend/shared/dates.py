"""
Calendar helpers shared by the scheduling modules.

Dates and times-of-day entered by admins are wall-clock values in the
configured timezone; the store keeps UTC timestamps. These helpers do the
conversion in one place.
"""

from datetime import date, datetime, time, timedelta, timezone
from typing import Optional
from zoneinfo import ZoneInfo

from dateutil import parser as date_parser

from .config import get_settings

END_OF_DAY = time(23, 59, 59, 999000)


def get_zone(name: Optional[str] = None) -> ZoneInfo:
    """Return the configured timezone (or the named one)."""
    return ZoneInfo(name or get_settings().timezone)


def today(tz: Optional[ZoneInfo] = None) -> date:
    """Today's date in the configured timezone."""
    return datetime.now(tz or get_zone()).date()


def combine(day: date, at: time, tz: Optional[ZoneInfo] = None) -> datetime:
    """Wall-clock ``day`` at ``at`` in ``tz``, as an aware datetime."""
    return datetime.combine(day, at, tzinfo=tz or get_zone())


def start_of_day(day: date, tz: Optional[ZoneInfo] = None) -> datetime:
    return combine(day, time.min, tz)


def end_of_day(day: date, tz: Optional[ZoneInfo] = None) -> datetime:
    return combine(day, END_OF_DAY, tz)


def to_store(value: datetime) -> str:
    """Render an aware datetime as the UTC ISO string the store expects."""
    return value.astimezone(timezone.utc).isoformat()


def parse_timestamp(value: str | datetime) -> datetime:
    """Parse a store timestamp; naive values are taken as UTC."""
    parsed = value if isinstance(value, datetime) else date_parser.isoparse(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def local_day(value: str | datetime, tz: Optional[ZoneInfo] = None) -> date:
    """Calendar day of a store timestamp in the configured timezone."""
    return parse_timestamp(value).astimezone(tz or get_zone()).date()


def iter_days(start: date, end: date):
    """Yield every calendar day from ``start`` to ``end`` inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)
