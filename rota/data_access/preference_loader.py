"""Loading utilities for the employee preference form responses.

The form export is read positionally: the first row is the header, the
employee name lives in column B and the manager flag in column G. Only the
literal string ``"true"`` marks a manager.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence

import pandas as pd

from rota.config import MANAGER_COLUMN_INDEX, MANAGER_FLAG_VALUE, NAME_COLUMN_INDEX, PREFERENCE_SHEET_NAME
from rota.domain.errors import MalformedRecordError, MissingDataError
from rota.domain.models import Employee

EXCEL_SUFFIXES = {".xlsx", ".xlsm", ".xls"}


def load_preference_rows(path: Path, sheet_name: str = PREFERENCE_SHEET_NAME) -> List[List[str]]:
    """Read the raw preference rows (header included) as strings.

    CSV files are read directly; Excel workbooks are read from ``sheet_name``.

    Raises:
        MissingDataError: If the file or sheet doesn't exist, or it holds no
            response rows below the header.
        MalformedRecordError: If a CSV row stops before the name or manager column.
    """
    if not path.exists():
        raise MissingDataError(f"Preference responses file not found: {path}")

    is_excel = path.suffix.lower() in EXCEL_SUFFIXES
    try:
        if is_excel:
            df = pd.read_excel(path, sheet_name=sheet_name, header=None, dtype=str, keep_default_na=False)
        else:
            df = pd.read_csv(path, header=None, dtype=str, keep_default_na=False)
    except pd.errors.EmptyDataError:
        raise MissingDataError(f"Preference responses file is empty: {path}") from None
    except pd.errors.ParserError as exc:
        raise MalformedRecordError(f"Could not parse preference rows in {path}: {exc}") from exc
    except ValueError as exc:
        # read_excel raises ValueError for an unknown sheet name
        raise MissingDataError(f"Could not read sheet '{sheet_name}' from {path}: {exc}") from exc

    if not is_excel:
        _reject_short_rows(df, path)

    rows = df.fillna("").astype(str).values.tolist()
    if len(rows) < 2:
        raise MissingDataError(f"No preference responses found in {path}")
    return rows


def extract_employees(rows: Sequence[Sequence[str]]) -> List[Employee]:
    """Build the ordered, de-duplicated employee directory from raw rows.

    The header row is skipped. First-seen order is kept, and the first row seen
    for a name decides whether that employee is a manager.

    Raises:
        MalformedRecordError: If a row lacks the name or manager column, or
            has an empty name.
    """
    employees: List[Employee] = []
    seen: set[str] = set()

    for row_number, row in enumerate(rows[1:], start=2):
        if len(row) <= max(NAME_COLUMN_INDEX, MANAGER_COLUMN_INDEX):
            raise MalformedRecordError(
                f"Preference row {row_number} has {len(row)} columns; "
                f"expected the name in column {NAME_COLUMN_INDEX + 1} and the manager flag in column {MANAGER_COLUMN_INDEX + 1}."
            )
        name = str(row[NAME_COLUMN_INDEX]).strip()
        if not name:
            raise MalformedRecordError(f"Preference row {row_number} has an empty employee name.")
        if name in seen:
            continue
        seen.add(name)
        employees.append(Employee(name=name, is_manager=_is_manager_flag(row[MANAGER_COLUMN_INDEX])))

    return employees


def load_employees(path: Path, sheet_name: str = PREFERENCE_SHEET_NAME) -> List[Employee]:
    return extract_employees(load_preference_rows(path, sheet_name=sheet_name))


def _is_manager_flag(value) -> bool:
    return str(value).strip() == MANAGER_FLAG_VALUE


def _reject_short_rows(df: pd.DataFrame, path: Path) -> None:
    """Fail on CSV rows that stop before the name or manager column.

    With ``keep_default_na=False`` empty fields read as ``""``, so NaN only
    appears where pandas padded a row that had too few fields.
    """
    required = [column for column in (NAME_COLUMN_INDEX, MANAGER_COLUMN_INDEX) if column in df.columns]
    short_rows = df.index[df[required].isna().any(axis=1)]
    if len(short_rows):
        row_number = int(short_rows[0]) + 1
        raise MalformedRecordError(
            f"Preference row {row_number} in {path} ends before the name in column {NAME_COLUMN_INDEX + 1} "
            f"or the manager flag in column {MANAGER_COLUMN_INDEX + 1}."
        )
