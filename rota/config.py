"""Centralized knobs for the rota generator. Tweak values here instead of touching the engine."""

from __future__ import annotations

from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Calendar window configuration
# ---------------------------------------------------------------------------
WEEKS_IN_WINDOW = 4
WINDOW_LENGTH_DAYS = WEEKS_IN_WINDOW * 7  # Inclusive of the start Monday
WORKING_DAYS_IN_WINDOW = WEEKS_IN_WINDOW * 5
TRACKED_WEEKS = tuple(range(1, WEEKS_IN_WINDOW + 1))  # Month-relative week indexes with a quota bucket

FRIDAY = 4  # date.weekday() value
DAY_ABBREVIATIONS = ["MON", "TUE", "WED", "THU", "FRI", "SAT", "SUN"]  # Indexed by date.weekday()
MONTH_ABBREVIATIONS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]

# ---------------------------------------------------------------------------
# Shift + location vocabulary
# ---------------------------------------------------------------------------
SHIFT_EARLY = "Early"
SHIFT_MID = "Mid"
SHIFT_LATE = "Late"
SHIFT_TYPES = [SHIFT_EARLY, SHIFT_MID, SHIFT_LATE]
FRIDAY_SHIFT_TYPES = [SHIFT_EARLY, SHIFT_MID]  # No late shift on Fridays

LOCATION_OFFICE = "Office"
LOCATION_HOME = "Home"
LOCATION_HOLIDAY = "Holiday"
LOCATIONS = [LOCATION_OFFICE, LOCATION_HOME, LOCATION_HOLIDAY]

HOLIDAY_MARKER = "B/H"
OFFICE_DAYS_PER_WEEK = 2  # Office days each employee should get per week index

# ---------------------------------------------------------------------------
# Manager-priority rule
# ---------------------------------------------------------------------------
MANAGER_RULE_LITERAL = "literal"  # Every manager goes to the office on every working day
MANAGER_RULE_DAILY = "daily"  # Only the first manager of the day is forced into the office
MANAGER_RULES = (MANAGER_RULE_LITERAL, MANAGER_RULE_DAILY)
DEFAULT_MANAGER_RULE = MANAGER_RULE_LITERAL

# ---------------------------------------------------------------------------
# Preference form responses
# ---------------------------------------------------------------------------
PREFERENCE_SHEET_NAME = "Form Responses 1"
DEFAULT_PREFERENCES_FILENAME = "preferences.csv"  # Read from the working directory when no path is given
NAME_COLUMN_INDEX = 1  # Zero-based; column B of the form export
MANAGER_COLUMN_INDEX = 6  # Zero-based; column G of the form export
MANAGER_FLAG_VALUE = "true"

# ---------------------------------------------------------------------------
# Bank holiday feed
# ---------------------------------------------------------------------------
BANK_HOLIDAYS_URL = "https://www.gov.uk/bank-holidays.json"
HOLIDAY_REGION = "england-and-wales"
HOLIDAY_FEED_TIMEOUT = 30  # Seconds; None waits on the feed indefinitely

# ---------------------------------------------------------------------------
# Output grid
# ---------------------------------------------------------------------------
NAME_COLUMN_HEADER = "Employee Name"
ROTA_SHEET_NAME = "Rota"
SUMMARY_SHEET_NAME = "Office Summary"
DEFAULT_OUTPUT_FILENAME = "rota.xlsx"
CONFIRMATION_MESSAGE = "Rota for the next 4 weeks generated successfully, with bank holidays marked!"


@dataclass(frozen=True)
class RotaSettings:
    """Per-run knobs; every field defaults to the module constants above."""

    office_days_per_week: int = OFFICE_DAYS_PER_WEEK
    manager_rule: str = DEFAULT_MANAGER_RULE
    seed: int | None = None
    holiday_url: str = BANK_HOLIDAYS_URL
    holiday_region: str = HOLIDAY_REGION
    holiday_timeout: float | None = HOLIDAY_FEED_TIMEOUT
    preference_sheet: str = PREFERENCE_SHEET_NAME


DEFAULT_SETTINGS = RotaSettings()
