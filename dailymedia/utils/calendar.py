"""Calendar arithmetic shared by the selectors."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Iterator


def as_date(value: date | datetime) -> date:
    """Drop any time-of-day component, keeping the local calendar date."""
    if isinstance(value, datetime):
        return value.date()
    return value


def is_leap_year(year: int) -> bool:
    """Gregorian leap year rule."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def day_of_year(value: date | datetime) -> int:
    """Whole days elapsed since December 31 of the previous year (Jan 1 is day 1)."""
    current = as_date(value)
    return (current - date(current.year, 1, 1)).days + 1


def date_range(start: date | datetime, days: int) -> Iterator[date]:
    """Yield ``days`` consecutive calendar dates beginning at ``start``."""
    if days < 0:
        raise ValueError(f"days must be non-negative, got {days}")
    first = as_date(start)
    for offset in range(days):
        yield first + timedelta(days=offset)


def parse_date(text: str) -> date:
    """Parse an ISO ``YYYY-MM-DD`` string."""
    try:
        return date.fromisoformat(text)
    except ValueError as exc:
        raise ValueError(f"Expected a date formatted as YYYY-MM-DD, got {text!r}") from exc
