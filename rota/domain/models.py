"""Dataclasses and type definitions shared across the rota modules."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional, Set, Tuple

from rota.config import HOLIDAY_MARKER, LOCATION_HOLIDAY


@dataclass(frozen=True)
class Employee:
    name: str
    is_manager: bool = False


@dataclass(frozen=True)
class ScheduleWindow:
    start: date
    end: date  # Inclusive; always a Sunday four weeks after start
    days: List[date]


@dataclass(frozen=True)
class ShiftAssignment:
    """Location and shift decision for one employee on one day."""

    employee: str
    day: date
    shift_type: Optional[str]  # None on holidays
    location: str

    def render(self) -> str:
        """Render the assignment as a grid cell, e.g. ``"Early (Office)"`` or ``"B/H"``."""
        if self.location == LOCATION_HOLIDAY:
            return HOLIDAY_MARKER
        return f"{self.shift_type} ({self.location})"


@dataclass
class RotaGrid:
    header: List[str]
    dates: List[str]
    rows: List[List[str]]  # One per employee, name first
    days: List[date]
    holiday_columns: List[int]  # Column indexes into header/dates/rows

    def to_rows(self) -> List[List[str]]:
        """Return the full 2-D cell grid handed to the sink."""
        return [list(self.header), list(self.dates), *[list(row) for row in self.rows]]


@dataclass
class RotaResult:
    window: ScheduleWindow
    employees: List[Employee]
    holidays: Set[date]
    assignments: Dict[Tuple[str, date], ShiftAssignment]
    office_counts: Dict[str, Dict[int, int]]
    grid: RotaGrid
    manager_rule: str
    seed: Optional[int] = None
    warnings: List[str] = field(default_factory=list)
