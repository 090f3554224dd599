"""
Date helpers for sitemap lastmod values.
"""

from datetime import date, datetime
from typing import Optional
from dateutil import parser as dateparser


def today_iso(today: Optional[date] = None) -> str:
    """Return today's date as YYYY-MM-DD."""
    return format_date(today or date.today())


def format_date(dt: date) -> str:
    """Format a date or datetime as YYYY-MM-DD."""
    return dt.strftime("%Y-%m-%d")


def normalize_lastmod(date_str: str) -> Optional[str]:
    """
    Normalize a front matter date to YYYY-MM-DD.

    Handles:
    - "2024-01-01"
    - "2024-01-01T09:30:00Z"
    - "January 5, 2024"
    - "1/5/2024"

    Returns None if the string cannot be parsed or leaves out the year,
    month or day ("March 3"), so no part of the date is made up.
    """
    if not date_str or not date_str.strip():
        return None

    try:
        # Parts missing from the string are filled from the default; parsing
        # with two different defaults exposes them.
        first = dateparser.parse(date_str.strip(), default=datetime(2000, 1, 1))
        second = dateparser.parse(date_str.strip(), default=datetime(2001, 2, 2))
    except (ValueError, OverflowError, TypeError):
        return None

    if first.date() != second.date():
        return None

    return format_date(first)
