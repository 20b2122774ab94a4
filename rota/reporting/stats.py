"""Shared helpers for summarizing generated rotas."""

from __future__ import annotations

from typing import Dict, List, Tuple

from rota.config import LOCATION_HOLIDAY, LOCATION_HOME, LOCATION_OFFICE, LOCATIONS
from rota.domain.models import RotaResult
from rota.engine.calendar_window import week_index


def window_week_indexes(result: RotaResult) -> List[int]:
    """Month-relative week indexes present in the window, in first-seen order."""
    return list(dict.fromkeys(week_index(day) for day in result.window.days))


def location_totals(result: RotaResult) -> Dict[str, Dict[str, int]]:
    """Count Office/Home/Holiday days per employee over the whole window."""
    totals: Dict[str, Dict[str, int]] = {e.name: {loc: 0 for loc in LOCATIONS} for e in result.employees}
    for (employee, _), assignment in result.assignments.items():
        totals[employee][assignment.location] += 1
    return totals


def office_days_by_week(result: RotaResult) -> Dict[Tuple[str, int], int]:
    counts: Dict[Tuple[str, int], int] = {}
    for (employee, day), assignment in result.assignments.items():
        if assignment.location == LOCATION_OFFICE:
            key = (employee, week_index(day))
            counts[key] = counts.get(key, 0) + 1
    return counts


def build_office_summary(result: RotaResult) -> Tuple[List[str], List[list]]:
    """
    Build the per-employee office summary table.

    Returns:
        columns: Header labels, one "Wk N Office" column per week index in the window.
        rows: One row per employee in directory order.
    """
    weeks = window_week_indexes(result)
    totals = location_totals(result)
    by_week = office_days_by_week(result)

    columns = ["Employee", "Manager", "Office Days", "Home Days", "Holiday Days"]
    columns += [f"Wk {week} Office" for week in weeks]

    rows: List[list] = []
    for employee in result.employees:
        employee_totals = totals[employee.name]
        row = [
            employee.name,
            "Yes" if employee.is_manager else "",
            employee_totals[LOCATION_OFFICE],
            employee_totals[LOCATION_HOME],
            employee_totals[LOCATION_HOLIDAY],
        ]
        row += [by_week.get((employee.name, week), 0) for week in weeks]
        rows.append(row)
    return columns, rows
