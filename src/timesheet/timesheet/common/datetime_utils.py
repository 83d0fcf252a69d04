from __future__ import annotations

from datetime import date, datetime, timezone, tzinfo
from zoneinfo import ZoneInfo

from ..core.constants import DATE_FORMAT, DEFAULT_TIMEZONE


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, DATE_FORMAT).date()


def format_iso_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def now_utc() -> datetime:
    """Current instant, timezone-aware UTC.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc)


def get_timezone(name: str | None = None) -> tzinfo:
    return ZoneInfo(name or DEFAULT_TIMEZONE)


def to_utc(value: datetime) -> datetime:
    """Naive values are taken to be UTC already."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def business_date(now: datetime, tz: tzinfo) -> str:
    """The calendar day `now` falls on in the display timezone, as YYYY-MM-DD."""
    return format_iso_date(to_utc(now).astimezone(tz).date())
