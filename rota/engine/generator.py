from __future__ import annotations

import random
import sys
from datetime import date
from pathlib import Path
from typing import Iterable, List, Optional

from rota.config import DEFAULT_SETTINGS, MANAGER_RULES, TRACKED_WEEKS, RotaSettings
from rota.data_access.holiday_feed import fetch_bank_holidays, load_bank_holidays_file
from rota.data_access.preference_loader import load_employees
from rota.domain.errors import MissingDataError
from rota.domain.models import Employee, RotaResult
from rota.engine.assigner import ShiftAssigner
from rota.engine.calendar_window import build_window, normalize_holidays, week_index
from rota.engine.grid import build_rota_grid
from rota.engine.quota import QuotaTracker
from rota.reporting.console import print_rota
from rota.reporting.export import export_rota


def validate_settings(settings: RotaSettings) -> None:
    if settings.manager_rule not in MANAGER_RULES:
        raise ValueError(
            f"Unknown manager rule '{settings.manager_rule}'. Expected one of: {', '.join(MANAGER_RULES)}."
        )
    if settings.office_days_per_week < 0:
        raise ValueError(f"Office days per week must be non-negative (got {settings.office_days_per_week}).")


def generate_rota(
    employees: List[Employee],
    holidays: Iterable,
    reference_date: Optional[date] = None,
    settings: RotaSettings = DEFAULT_SETTINGS,
    rng: Optional[random.Random] = None,
) -> RotaResult:
    """Compute a complete four-week rota in memory.

    Nothing is written anywhere; the caller hands ``result.grid`` to a sink.

    Args:
        employees: Directory in display order.
        holidays: Holiday dates (dates, datetimes or ISO strings).
        reference_date: Defaults to today. The window starts the Monday after it.
        settings: Run knobs; ``settings.seed`` seeds the shift draw unless
            ``rng`` is passed explicitly.
    """
    validate_settings(settings)
    if not employees:
        raise MissingDataError("Cannot generate a rota with an empty employee directory.")

    reference = reference_date if reference_date is not None else date.today()
    holiday_dates = normalize_holidays(holidays)
    window = build_window(reference)

    quota = QuotaTracker([e.name for e in employees], weeks=TRACKED_WEEKS)
    assigner = ShiftAssigner(
        employees,
        holiday_dates,
        quota,
        rng=rng if rng is not None else random.Random(settings.seed),
        manager_rule=settings.manager_rule,
        office_days_per_week=settings.office_days_per_week,
    )
    assignments = assigner.assign_window(window.days)
    grid = build_rota_grid(employees, window.days, assignments, holiday_dates)

    warnings: List[str] = []
    if not any(e.is_manager for e in employees):
        warnings.append("No managers found in the preference responses; office days follow the quota only.")
    untracked = sorted({day for day in window.days if not quota.is_tracked(week_index(day))})
    if untracked:
        preview = ", ".join(day.isoformat() for day in untracked[:5])
        more = "" if len(untracked) <= 5 else f" (+{len(untracked) - 5} more)"
        warnings.append(f"Days outside month weeks 1-4 have no office quota and default to home: {preview}{more}")

    return RotaResult(
        window=window,
        employees=list(employees),
        holidays=holiday_dates,
        assignments=assignments,
        office_counts=quota.snapshot(),
        grid=grid,
        manager_rule=settings.manager_rule,
        seed=settings.seed,
        warnings=warnings,
    )


def run_rota(
    preferences_path: Path,
    output_path: Path,
    reference_date: Optional[date] = None,
    settings: RotaSettings = DEFAULT_SETTINGS,
    holidays_file: Optional[Path] = None,
    session=None,
) -> RotaResult:
    """Load inputs, build the rota and write it to ``output_path``.

    The output file is only touched once the whole grid exists in memory, so a
    failure at any earlier step leaves a previous rota in place.
    """
    validate_settings(settings)

    if holidays_file is not None:
        holidays = load_bank_holidays_file(holidays_file, region=settings.holiday_region)
    else:
        holidays = fetch_bank_holidays(
            url=settings.holiday_url,
            region=settings.holiday_region,
            timeout=settings.holiday_timeout,
            session=session,
        )
    employees = load_employees(preferences_path, sheet_name=settings.preference_sheet)

    print("Generating the rota...")
    print(f"   - {len(employees)} employees ({sum(e.is_manager for e in employees)} managers)")
    print(f"   - {len(holidays)} bank holidays loaded for {settings.holiday_region}")
    print(f"   - manager rule: {settings.manager_rule}")
    print()

    result = generate_rota(employees, holidays, reference_date=reference_date, settings=settings)
    for warning in result.warnings:
        print(f"WARNING: {warning}", file=sys.stderr)

    print_rota(result)
    export_rota(result, output_path)
    return result
