"""
Date utilities for trade dates, record timestamps and date-range filters.
"""

from datetime import date, datetime, timedelta, timezone
from typing import Optional, Union


def utc_now() -> datetime:
    """Current wall-clock time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def utc_now_iso() -> str:
    """Current UTC time formatted for createdAt fields."""
    return utc_now().isoformat()


def today_local() -> date:
    """Today's date, used as the default trade date."""
    return date.today()


def parse_trade_date(value: Union[str, date, datetime]) -> date:
    """
    Parse a trade date.

    Accepts a date, a datetime, an ISO date string ("2024-03-15") or an ISO
    timestamp ("2024-03-15T10:30:00Z"), of which only the date part is used.

    Args:
        value: Date value from a form or stored record

    Returns:
        Calendar date

    Raises:
        ValueError: If the string is not an ISO date
        TypeError: If the value is not a string, date or datetime
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise TypeError(f"Trade date must be an ISO string, got {type(value).__name__}")
    return date.fromisoformat(value.strip()[:10])


def format_trade_date(value: date) -> str:
    """Format a trade date as YYYY-MM-DD."""
    return value.isoformat()


def week_start(day: date) -> date:
    """Sunday on or before the given day."""
    # date.weekday(): Monday=0 ... Sunday=6
    return day - timedelta(days=(day.weekday() + 1) % 7)


def date_range_window(date_range: str, today: Optional[date] = None) -> Optional[tuple[date, date]]:
    """
    Inclusive (start, end) window for a dashboard date-range option.

    Args:
        date_range: One of "all", "today", "week", "month", "year"
        today: Reference day, defaults to today's date

    Returns:
        Window bounds, or None for "all" and unrecognised options
    """
    if today is None:
        today = today_local()

    if date_range == "today":
        return today, today
    if date_range == "week":
        start = week_start(today)
        return start, start + timedelta(days=6)
    if date_range == "month":
        start = today.replace(day=1)
        next_month = (start + timedelta(days=32)).replace(day=1)
        return start, next_month - timedelta(days=1)
    if date_range == "year":
        return date(today.year, 1, 1), date(today.year, 12, 31)
    return None


def same_month(day: date, reference: date) -> bool:
    """True when both dates fall in the same calendar month."""
    return day.year == reference.year and day.month == reference.month
