"""Assemble per-day decisions into the rota cell grid."""

from __future__ import annotations

from datetime import date
from typing import Dict, List, Set, Tuple

from rota.config import HOLIDAY_MARKER, NAME_COLUMN_HEADER
from rota.domain.models import Employee, RotaGrid, ShiftAssignment
from rota.engine.calendar_window import day_abbreviation, format_date_short, is_holiday


def build_rota_grid(
    employees: List[Employee],
    days: List[date],
    assignments: Dict[Tuple[str, date], ShiftAssignment],
    holidays: Set[date],
) -> RotaGrid:
    """Build header, date and employee rows, then stamp holiday columns.

    Column 0 holds the employee name; column ``i`` (1-based) holds ``days[i - 1]``.

    Raises:
        ValueError: If an (employee, day) pair has no assignment.
    """
    header = [NAME_COLUMN_HEADER] + [day_abbreviation(day) for day in days]
    date_row = [""] + [format_date_short(day) for day in days]
    holiday_columns = [column for column, day in enumerate(days, start=1) if is_holiday(day, holidays)]

    rows: List[List[str]] = []
    for employee in employees:
        row = [employee.name]
        for day in days:
            assignment = assignments.get((employee.name, day))
            if assignment is None:
                raise ValueError(f"No assignment computed for '{employee.name}' on {day.isoformat()}.")
            row.append(assignment.render())
        rows.append(row)

    apply_holiday_overlay(rows, holiday_columns)

    return RotaGrid(header=header, dates=date_row, rows=rows, days=list(days), holiday_columns=holiday_columns)


def apply_holiday_overlay(rows: List[List[str]], holiday_columns: List[int]) -> None:
    """Force every holiday column to the holiday marker for every employee row.

    Runs after all cells are rendered and overwrites whatever they contain.
    """
    for row in rows:
        for column in holiday_columns:
            row[column] = HOLIDAY_MARKER
