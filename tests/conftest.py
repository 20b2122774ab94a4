"""Shared fixtures for the rota tests."""

import json
from datetime import date

import pytest

from rota.domain.models import Employee

WEEK_TWO_MONDAY = date(2026, 10, 26)

PREFERENCES_CSV = """Timestamp,Employee Name,Email,Preferred Shift,Preferred Days,Notes,Manager
2026-10-01 09:00,Alice,alice@example.com,Early,Mon;Tue,,true
2026-10-01 09:05,Bob,bob@example.com,Late,Wed;Thu,,false
2026-10-02 10:00,Alice,alice@example.com,Mid,Thu,,false
2026-10-02 11:30,Cara,cara@example.com,Mid,Fri,,
"""


@pytest.fixture
def alice_and_bob():
    return [Employee("Alice", is_manager=True), Employee("Bob", is_manager=False)]


@pytest.fixture
def preferences_csv(tmp_path):
    path = tmp_path / "responses.csv"
    path.write_text(PREFERENCES_CSV, encoding="utf-8")
    return path


@pytest.fixture
def holiday_payload():
    return {
        "england-and-wales": {
            "division": "england-and-wales",
            "events": [
                {"title": "Christmas Day", "date": "2026-12-25", "notes": "", "bunting": True},
                {"title": "Made-up holiday", "date": WEEK_TWO_MONDAY.isoformat(), "notes": "", "bunting": False},
            ],
        },
        "scotland": {
            "division": "scotland",
            "events": [{"title": "St Andrew's Day", "date": "2026-11-30", "notes": "", "bunting": True}],
        },
    }


@pytest.fixture
def holidays_json(tmp_path, holiday_payload):
    path = tmp_path / "bank-holidays.json"
    path.write_text(json.dumps(holiday_payload), encoding="utf-8")
    return path
