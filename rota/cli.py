"""Command-line interface for the office rota generator."""

from __future__ import annotations

import argparse
import sys
from datetime import date, datetime
from pathlib import Path

from rota.config import (
    BANK_HOLIDAYS_URL,
    CONFIRMATION_MESSAGE,
    DEFAULT_MANAGER_RULE,
    DEFAULT_OUTPUT_FILENAME,
    DEFAULT_PREFERENCES_FILENAME,
    MANAGER_RULES,
    OFFICE_DAYS_PER_WEEK,
    PREFERENCE_SHEET_NAME,
    RotaSettings,
)
from rota.engine.generator import run_rota


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a four-week office/home rota with shift types and bank holidays marked."
    )
    parser.add_argument(
        "preferences",
        type=Path,
        nargs="?",
        default=Path(DEFAULT_PREFERENCES_FILENAME),
        help=(
            "Preference form responses (CSV, or an Excel workbook with a responses sheet). "
            f"Defaults to {DEFAULT_PREFERENCES_FILENAME} in the current directory."
        ),
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path(DEFAULT_OUTPUT_FILENAME),
        help=f"Destination for the rota; .csv writes the bare grid, otherwise Excel (default: {DEFAULT_OUTPUT_FILENAME}).",
    )
    parser.add_argument(
        "--reference-date",
        default=None,
        metavar="YYYY-MM-DD",
        help="Pretend today is this date. The rota starts on the following Monday (default: today).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the shift-type draw so the same inputs reproduce the same rota.",
    )
    parser.add_argument(
        "--manager-rule",
        choices=MANAGER_RULES,
        default=DEFAULT_MANAGER_RULE,
        help=(
            "'literal' sends every manager to the office on every working day; "
            "'daily' only forces the first manager each day (default: %(default)s)."
        ),
    )
    parser.add_argument(
        "--office-days",
        type=int,
        default=OFFICE_DAYS_PER_WEEK,
        help="Office days each employee should get per week (default: %(default)s).",
    )
    parser.add_argument(
        "--sheet-name",
        default=PREFERENCE_SHEET_NAME,
        help="Sheet to read when the preferences file is an Excel workbook (default: %(default)s).",
    )
    parser.add_argument(
        "--holidays-file",
        type=Path,
        default=None,
        help="Read bank holidays from a saved copy of the JSON feed instead of downloading it.",
    )
    parser.add_argument(
        "--holiday-url",
        default=BANK_HOLIDAYS_URL,
        help="Bank holiday JSON feed URL (default: %(default)s).",
    )
    return parser


def _parse_reference_date(raw: str | None) -> date | None:
    if raw is None:
        return None
    try:
        return datetime.strptime(raw.strip(), "%Y-%m-%d").date()
    except ValueError:
        raise ValueError(f"Invalid --reference-date '{raw}'. Expected format: YYYY-MM-DD") from None


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        reference_date = _parse_reference_date(args.reference_date)
        if args.office_days < 0:
            raise ValueError(f"--office-days must be zero or more (got {args.office_days}).")
        settings = RotaSettings(
            office_days_per_week=args.office_days,
            manager_rule=args.manager_rule,
            seed=args.seed,
            holiday_url=args.holiday_url,
            preference_sheet=args.sheet_name,
        )
        output_path = args.output
        if output_path.suffix.lower() not in (".xlsx", ".csv"):
            output_path = output_path.with_name(output_path.name + ".xlsx")
        run_rota(
            preferences_path=args.preferences,
            output_path=output_path,
            reference_date=reference_date,
            settings=settings,
            holidays_file=args.holidays_file,
        )
    except Exception as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(1)

    print(f"\nRota written to {output_path}")
    print(CONFIRMATION_MESSAGE)


if __name__ == "__main__":
    main()
