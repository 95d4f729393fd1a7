"""
Clock and calendar utilities.

This module provides the countdown formatting used by the routine pages and
the date parsing used by every dated tracker, so entries are always keyed by
a single canonical ISO date string.
"""

from datetime import date, datetime, timedelta
from typing import Optional, Union

from ..errors import InvalidDateError

DateLike = Union[date, datetime, str]


def format_clock(seconds: int) -> str:
    """
    Format a countdown as minutes and zero-padded seconds.

    Args:
        seconds: Non-negative number of seconds

    Returns:
        String such as "4:05"
    """
    seconds = max(0, int(seconds))
    minutes, remaining = divmod(seconds, 60)
    return f"{minutes}:{remaining:02d}"


def today() -> date:
    """Current local calendar date."""
    return date.today()


def parse_day(value: DateLike, field: str = "date") -> date:
    """
    Normalize a date, datetime or ISO string to a calendar date.

    Args:
        value: Date input from a form or stored entry
        field: Field name used in the error message

    Returns:
        Calendar date

    Raises:
        InvalidDateError: If the value cannot be interpreted as a date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        text = value.strip()
        try:
            return date.fromisoformat(text[:10])
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(text.replace('Z', '+00:00')).date()
        except ValueError:
            pass
    raise InvalidDateError("Invalid date", field=field, value=value)


def format_day(value: DateLike) -> str:
    """Canonical storage key for a date (YYYY-MM-DD)."""
    return parse_day(value).isoformat()


def chart_label(value: DateLike) -> str:
    """Short chart axis label such as "Mar 7"."""
    day = parse_day(value)
    return f"{day:%b} {day.day}"


def long_label(value: DateLike) -> str:
    """Long label such as "March 7, 2024"."""
    day = parse_day(value)
    return f"{day:%B} {day.day}, {day.year}"


def trailing_days(days: int, end: Optional[date] = None) -> list[date]:
    """
    List of consecutive dates ending at ``end`` (inclusive), oldest first.

    Args:
        days: Number of days in the window
        end: Last day of the window, defaults to today
    """
    end = end or today()
    return [end - timedelta(days=offset) for offset in range(days - 1, -1, -1)]
