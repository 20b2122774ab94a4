"""
Tests for preference data loading and validation.
"""

import pandas as pd
import pytest

from rota.data_access.preference_loader import extract_employees, load_employees, load_preference_rows
from rota.domain.errors import MalformedRecordError, MissingDataError
from rota.domain.models import Employee

HEADER = ["Timestamp", "Employee Name", "Email", "Shift", "Days", "Notes", "Manager"]


def _row(name, manager=""):
    return ["2026-10-01", name, f"{name.lower()}@example.com", "", "", "", manager]


def test_extract_preserves_first_seen_order():
    """Test that employees come out in the order they first appear."""
    rows = [HEADER, _row("Zoe"), _row("Adam"), _row("Mia")]
    assert [e.name for e in extract_employees(rows)] == ["Zoe", "Adam", "Mia"]


def test_extract_collapses_duplicates():
    """Test that repeated responses from one person yield one employee."""
    rows = [HEADER, _row("Zoe", "true"), _row("Adam"), _row("Zoe", "false")]
    employees = extract_employees(rows)
    assert employees == [Employee("Zoe", True), Employee("Adam", False)]


def test_manager_flag_is_literal_true():
    """Test that only the exact string 'true' marks a manager."""
    rows = [HEADER, _row("A", "true"), _row("B", "TRUE"), _row("C", "True"), _row("D", "yes"), _row("E", " true ")]
    flags = {e.name: e.is_manager for e in extract_employees(rows)}
    assert flags == {"A": True, "B": False, "C": False, "D": False, "E": True}


def test_extract_strips_names():
    """Test that whitespace around names is ignored for identity."""
    rows = [HEADER, _row("  Zoe "), _row("Zoe")]
    assert [e.name for e in extract_employees(rows)] == ["Zoe"]


def test_empty_name_raises_error():
    """Test that a response with a blank name is rejected."""
    with pytest.raises(MalformedRecordError) as excinfo:
        extract_employees([HEADER, _row("Zoe"), _row("   ")])
    assert "row 3" in str(excinfo.value)


def test_short_row_raises_error():
    """Test that a row without the manager column is rejected."""
    with pytest.raises(MalformedRecordError):
        extract_employees([HEADER, ["2026-10-01", "Zoe"]])


def test_malformed_record_is_value_error():
    """Test that malformed records can be handled as plain ValueErrors."""
    try:
        extract_employees([HEADER, ["2026-10-01", ""]])
        assert False, "Should have raised MalformedRecordError"
    except ValueError as e:
        assert "Preference row 2" in str(e)


def test_load_employees_from_csv(preferences_csv):
    """Test loading the directory from a form export CSV."""
    employees = load_employees(preferences_csv)
    assert employees == [Employee("Alice", True), Employee("Bob", False), Employee("Cara", False)]


def test_truncated_csv_row_raises_error(tmp_path):
    """Test that a CSV row cut off before the manager column is not read as a non-manager."""
    path = tmp_path / "responses.csv"
    path.write_text(",".join(HEADER) + "\n" + ",".join(_row("Adam")) + "\n2026-10-01,Zoe\n", encoding="utf-8")
    with pytest.raises(MalformedRecordError) as excinfo:
        load_employees(path)
    assert "row 3" in str(excinfo.value)


def test_load_rows_keeps_header_and_strings(preferences_csv):
    """Test that raw rows include the header and are never type-converted."""
    rows = load_preference_rows(preferences_csv)
    assert rows[0][1] == "Employee Name"
    assert rows[1][6] == "true"
    assert rows[4][6] == ""


def test_missing_file_raises_error(tmp_path):
    """Test that a missing responses file is reported as missing data."""
    with pytest.raises(MissingDataError):
        load_preference_rows(tmp_path / "nope.csv")


def test_empty_file_raises_error(tmp_path):
    """Test that an empty responses file is reported as missing data."""
    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")
    with pytest.raises(MissingDataError):
        load_preference_rows(path)


def test_header_only_raises_error(tmp_path):
    """Test that a file with no responses below the header is rejected."""
    path = tmp_path / "header.csv"
    path.write_text(",".join(HEADER) + "\n", encoding="utf-8")
    with pytest.raises(MissingDataError):
        load_preference_rows(path)


def test_load_employees_from_excel_sheet(tmp_path):
    """Test reading the responses sheet from an Excel workbook."""
    path = tmp_path / "responses.xlsx"
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        pd.DataFrame([["ignored"]]).to_excel(writer, sheet_name="Rota", index=False, header=False)
        pd.DataFrame([HEADER, _row("Zoe", "true"), _row("Adam")]).to_excel(
            writer, sheet_name="Form Responses 1", index=False, header=False
        )
    assert load_employees(path) == [Employee("Zoe", True), Employee("Adam", False)]


def test_missing_excel_sheet_raises_error(tmp_path):
    """Test that a workbook without the responses sheet is reported as missing data."""
    path = tmp_path / "responses.xlsx"
    pd.DataFrame([HEADER, _row("Zoe")]).to_excel(path, sheet_name="Other", index=False, header=False)
    with pytest.raises(MissingDataError):
        load_preference_rows(path)
