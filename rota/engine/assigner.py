"""Per-day, per-employee location and shift-type assignment."""

from __future__ import annotations

import random
from datetime import date
from typing import Dict, Iterable, List, Optional, Set, Tuple

from rota.config import (
    DEFAULT_MANAGER_RULE,
    FRIDAY,
    FRIDAY_SHIFT_TYPES,
    LOCATION_HOLIDAY,
    LOCATION_HOME,
    LOCATION_OFFICE,
    MANAGER_RULE_DAILY,
    MANAGER_RULE_LITERAL,
    MANAGER_RULES,
    OFFICE_DAYS_PER_WEEK,
    SHIFT_TYPES,
)
from rota.domain.models import Employee, ShiftAssignment
from rota.engine.calendar_window import is_holiday, normalize_holidays, week_index
from rota.engine.quota import QuotaTracker


def shift_pool(day: date) -> List[str]:
    """Shift types that may be drawn on ``day``."""
    return FRIDAY_SHIFT_TYPES if day.weekday() == FRIDAY else SHIFT_TYPES


class ShiftAssigner:
    """Decide Office/Home/Holiday and Early/Mid/Late for every employee-day.

    Days must be fed in chronological order and employees are always visited
    in directory order, because both the quota counters and the manager rule
    depend on what has already been assigned.

    Manager rules:
        literal: whenever the directory contains a manager at all, every
            manager is sent to the office on every working day, even past
            their weekly quota.
        daily: the first manager to be placed in the office on a given day
            (by either path) satisfies the rule; later managers that day
            follow the ordinary quota.
    """

    def __init__(
        self,
        employees: Iterable[Employee],
        holidays: Iterable,
        quota: QuotaTracker,
        rng: Optional[random.Random] = None,
        manager_rule: str = DEFAULT_MANAGER_RULE,
        office_days_per_week: int = OFFICE_DAYS_PER_WEEK,
    ):
        if manager_rule not in MANAGER_RULES:
            raise ValueError(f"Unknown manager rule '{manager_rule}'. Expected one of: {', '.join(MANAGER_RULES)}.")
        if office_days_per_week < 0:
            raise ValueError(f"Office days per week must be non-negative (got {office_days_per_week}).")

        self.employees = list(employees)
        self.holidays = normalize_holidays(holidays)
        self.quota = quota
        self.rng = rng if rng is not None else random.Random()
        self.manager_rule = manager_rule
        self.office_days_per_week = office_days_per_week
        self._directory_has_manager = any(e.is_manager for e in self.employees)

    def assign_window(self, days: Iterable[date]) -> Dict[Tuple[str, date], ShiftAssignment]:
        assignments: Dict[Tuple[str, date], ShiftAssignment] = {}
        for day in days:
            for assignment in self.assign_day(day):
                assignments[(assignment.employee, assignment.day)] = assignment
        return assignments

    def assign_day(self, day: date) -> List[ShiftAssignment]:
        managers_in_office: Set[str] = set()
        return [self._assign(employee, day, managers_in_office) for employee in self.employees]

    def _assign(self, employee: Employee, day: date, managers_in_office: Set[str]) -> ShiftAssignment:
        if is_holiday(day, self.holidays):
            return ShiftAssignment(employee=employee.name, day=day, shift_type=None, location=LOCATION_HOLIDAY)

        shift_type = self.rng.choice(shift_pool(day))
        week = week_index(day)
        # Weeks 0 and 5 have no quota bucket, so nobody "needs" office there
        needs_office = (
            self.quota.is_tracked(week) and self.quota.count(employee.name, week) < self.office_days_per_week
        )

        if employee.is_manager and self._manager_rule_fires(managers_in_office):
            location = LOCATION_OFFICE
        elif needs_office:
            location = LOCATION_OFFICE
        else:
            location = LOCATION_HOME

        if location == LOCATION_OFFICE:
            self.quota.increment(employee.name, week)
            if employee.is_manager:
                managers_in_office.add(employee.name)

        return ShiftAssignment(employee=employee.name, day=day, shift_type=shift_type, location=location)

    def _manager_rule_fires(self, managers_in_office: Set[str]) -> bool:
        if self.manager_rule == MANAGER_RULE_LITERAL:
            return self._directory_has_manager
        if self.manager_rule == MANAGER_RULE_DAILY:
            return not managers_in_office
        return False
