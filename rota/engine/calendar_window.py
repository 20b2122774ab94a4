"""Scheduling window and week-index calculations.

The window always starts on the Monday after the reference date (a Monday
reference rolls forward a full week) and covers four calendar weeks, of which
only the 20 weekdays are scheduled.

Week indexes are relative to the calendar month of the day being scheduled,
not to the window, so days near a month boundary can fall into week 0 or 5.
Quota bucketing depends on this, so it is kept as is.
"""

from __future__ import annotations

import math
from datetime import date, datetime, timedelta
from typing import Iterable, List, Set

from rota.config import DAY_ABBREVIATIONS, MONTH_ABBREVIATIONS, WINDOW_LENGTH_DAYS
from rota.domain.models import ScheduleWindow


def next_monday(reference: date) -> date:
    """Return the first Monday strictly after ``reference``.

    Sunday advances one day, Saturday two, and so on up to Monday which
    advances seven.
    """
    return reference + timedelta(days=7 - reference.weekday())


def build_window(reference: date) -> ScheduleWindow:
    """Build the 20-weekday scheduling window following ``reference``.

    Example:
        >>> window = build_window(date(2026, 10, 14))
        >>> window.start, window.end, len(window.days)
        (datetime.date(2026, 10, 19), datetime.date(2026, 11, 15), 20)
    """
    start = next_monday(to_date_key(reference))
    end = start + timedelta(days=WINDOW_LENGTH_DAYS - 1)

    days: List[date] = []
    current = start
    while current <= end:
        if is_weekday(current):
            days.append(current)
        current += timedelta(days=1)

    return ScheduleWindow(start=start, end=end, days=days)


def week_index(day: date) -> int:
    """Return the month-relative week index used for quota bucketing."""
    first_monday = next_monday(day.replace(day=1))
    days_since_first_monday = (day - first_monday).days
    return math.ceil((days_since_first_monday + 1) / 7)


def is_weekday(day: date) -> bool:
    return day.weekday() < 5


def to_date_key(value) -> date:
    """Normalize dates, datetimes/Timestamps and ISO strings to a plain ``date``.

    Time-of-day and timezone are dropped so that dates from different sources
    compare equal whenever they name the same calendar day.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return datetime.strptime(value.strip()[:10], "%Y-%m-%d").date()
    raise TypeError(f"Cannot interpret {value!r} as a calendar date")


def normalize_holidays(holidays: Iterable) -> Set[date]:
    return {to_date_key(holiday) for holiday in holidays}


def is_holiday(day: date, holidays: Set[date]) -> bool:
    return to_date_key(day) in holidays


def day_abbreviation(day: date) -> str:
    """Three-letter uppercase weekday, e.g. ``"MON"``."""
    return DAY_ABBREVIATIONS[day.weekday()]


def format_date_short(day: date) -> str:
    """Short date without zero padding, e.g. ``"6-Jan"``."""
    return f"{day.day}-{MONTH_ABBREVIATIONS[day.month - 1]}"
