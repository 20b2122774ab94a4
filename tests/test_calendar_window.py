"""
Tests for the scheduling window and month-relative week indexes.
"""

from datetime import date, datetime, timedelta

import pandas as pd
import pytest

from rota.engine.calendar_window import (
    build_window,
    day_abbreviation,
    format_date_short,
    is_holiday,
    next_monday,
    normalize_holidays,
    to_date_key,
    week_index,
)

# Two full weeks of reference dates, Monday 12 Oct to Sunday 25 Oct 2026
REFERENCE_DATES = [date(2026, 10, 12) + timedelta(days=offset) for offset in range(14)]


@pytest.mark.parametrize("reference", REFERENCE_DATES[:7])
def test_next_monday_from_every_weekday(reference):
    """Test that every day of a week rolls forward to the following Monday."""
    assert next_monday(reference) == date(2026, 10, 19)


def test_next_monday_from_monday_skips_a_week():
    """Test that a Monday reference never returns itself."""
    assert next_monday(date(2026, 10, 19)) == date(2026, 10, 26)


def test_next_monday_from_sunday_is_next_day():
    """Test that a Sunday reference advances a single day."""
    assert next_monday(date(2026, 10, 25)) == date(2026, 10, 26)


@pytest.mark.parametrize("reference", REFERENCE_DATES)
def test_window_has_twenty_increasing_weekdays(reference):
    """Test the window shape for every kind of reference day."""
    window = build_window(reference)

    assert len(window.days) == 20
    assert all(day.weekday() < 5 for day in window.days)
    assert all(earlier < later for earlier, later in zip(window.days, window.days[1:]))
    assert (window.days[-1] - window.days[0]).days <= 27
    assert window.start.weekday() == 0
    assert window.start > reference
    assert window.start != reference
    assert window.end == window.start + timedelta(days=27)
    assert window.days[0] == window.start


def test_window_example():
    """Test the concrete window for a Wednesday reference."""
    window = build_window(date(2026, 10, 14))
    assert window.start == date(2026, 10, 19)
    assert window.end == date(2026, 11, 15)
    assert window.days[-1] == date(2026, 11, 13)


def test_window_accepts_datetime_reference():
    """Test that a datetime reference behaves like its calendar date."""
    assert build_window(datetime(2026, 10, 14, 23, 59)).days == build_window(date(2026, 10, 14)).days


def test_week_index_within_month():
    """Test week indexes counted from the first Monday after the 1st."""
    # 1 Oct 2026 is a Thursday, so the first Monday is 5 Oct
    assert week_index(date(2026, 10, 5)) == 1
    assert week_index(date(2026, 10, 9)) == 1
    assert week_index(date(2026, 10, 12)) == 2
    assert week_index(date(2026, 10, 19)) == 3
    assert week_index(date(2026, 10, 26)) == 4
    assert week_index(date(2026, 10, 30)) == 4


def test_week_index_resets_at_month_boundary():
    """Test that the index follows the day's own month, not the window."""
    # 1 Nov 2026 is a Sunday, so the first Monday is 2 Nov
    assert week_index(date(2026, 11, 2)) == 1
    assert week_index(date(2026, 11, 13)) == 2


def test_week_index_before_first_monday_is_zero():
    """Test that days before the month's first counted Monday land in week 0."""
    # 1 Jun 2026 is a Monday, but the rule skips to 8 Jun
    assert week_index(date(2026, 6, 1)) == 0
    assert week_index(date(2026, 6, 5)) == 0
    assert week_index(date(2026, 6, 8)) == 1


def test_week_index_can_reach_five():
    """Test that a fifth Monday in the month lands in week 5."""
    assert week_index(date(2026, 11, 30)) == 5


def test_to_date_key_normalizes_inputs():
    """Test that dates from every source collapse to the same key."""
    expected = date(2026, 12, 25)
    assert to_date_key(expected) == expected
    assert to_date_key(datetime(2026, 12, 25, 23, 30)) == expected
    assert to_date_key("2026-12-25") == expected
    assert to_date_key(pd.Timestamp("2026-12-25 00:00", tz="Europe/London")) == expected


def test_to_date_key_rejects_other_types():
    """Test that non-date values are rejected."""
    with pytest.raises(TypeError):
        to_date_key(20261225)


def test_is_holiday_ignores_time_of_day():
    """Test holiday matching against mixed date representations."""
    holidays = normalize_holidays(["2026-12-25", datetime(2026, 12, 28, 1, 0)])
    assert is_holiday(date(2026, 12, 25), holidays)
    assert is_holiday(datetime(2026, 12, 28, 17, 45), holidays)
    assert not is_holiday(date(2026, 12, 24), holidays)


def test_day_abbreviation():
    """Test three-letter uppercase weekday names."""
    assert day_abbreviation(date(2026, 10, 19)) == "MON"
    assert day_abbreviation(date(2026, 10, 23)) == "FRI"


def test_format_date_short():
    """Test short dates without zero padding."""
    assert format_date_short(date(2026, 1, 6)) == "6-Jan"
    assert format_date_short(date(2026, 12, 25)) == "25-Dec"
