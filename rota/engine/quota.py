"""Per-employee, per-week office-day counters for a single rota run."""

from __future__ import annotations

from typing import Dict, Iterable, Tuple

from rota.config import TRACKED_WEEKS


class QuotaTracker:
    """Counts office days per (employee, week index).

    Counters start at zero for every employee and every tracked week and only
    ever go up. The tracker enforces no cap; the assigner decides when an
    employee still needs office days.
    """

    def __init__(self, employees: Iterable[str], weeks: Iterable[int] = TRACKED_WEEKS):
        self.weeks = tuple(weeks)
        self._employees = list(dict.fromkeys(employees))
        self._counts: Dict[Tuple[str, int], int] = {(e, w): 0 for e in self._employees for w in self.weeks}

    def _key(self, employee: str, week: int) -> Tuple[str, int]:
        if employee not in self._employees:
            raise KeyError(f"Employee '{employee}' is not tracked for office quota")
        return employee, week

    def is_tracked(self, week: int) -> bool:
        return week in self.weeks

    def count(self, employee: str, week: int) -> int:
        return self._counts.get(self._key(employee, week), 0)

    def increment(self, employee: str, week: int) -> int:
        key = self._key(employee, week)
        self._counts[key] = self._counts.get(key, 0) + 1
        return self._counts[key]

    def snapshot(self) -> Dict[str, Dict[int, int]]:
        """Return a copy of the counters as ``{employee: {week: count}}``."""
        result: Dict[str, Dict[int, int]] = {e: {} for e in self._employees}
        for (employee, week), value in sorted(self._counts.items(), key=lambda item: item[0][1]):
            result[employee][week] = value
        return result
