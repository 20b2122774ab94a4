"""Excel and CSV export helpers for generated rotas."""

from __future__ import annotations

from pathlib import Path
from typing import List

import pandas as pd
from openpyxl.utils import get_column_letter

from rota.config import ROTA_SHEET_NAME, SUMMARY_SHEET_NAME
from rota.domain.models import RotaResult
from rota.reporting.stats import build_office_summary


def export_rota(result: RotaResult, output_path: Path) -> Path:
    """Write the rota to ``output_path``; ``.csv`` gets the bare grid, anything else a workbook.

    The file is written beside the destination first and moved into place only
    once complete, so a failed write never leaves a partial rota behind.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    partial_path = output_path.with_name(f".{output_path.stem}.partial{output_path.suffix}")
    try:
        if output_path.suffix.lower() == ".csv":
            export_rota_to_csv(result, partial_path)
        else:
            export_rota_to_excel(result, partial_path)
        partial_path.replace(output_path)
    finally:
        partial_path.unlink(missing_ok=True)
    return output_path


def export_rota_to_csv(result: RotaResult, output_path: Path) -> None:
    pd.DataFrame(result.grid.to_rows()).to_csv(output_path, index=False, header=False)


def export_rota_to_excel(result: RotaResult, output_path: Path) -> None:
    """Export the rota grid plus an office summary sheet to an Excel workbook.

    The rota sheet mirrors the grid exactly: weekday headers on row 1, short
    dates on row 2, then one row per employee.
    """
    df_rota = pd.DataFrame(result.grid.to_rows())
    summary_columns, summary_rows = build_office_summary(result)
    df_summary = pd.DataFrame(summary_rows, columns=summary_columns)

    with pd.ExcelWriter(output_path, engine="openpyxl") as writer:
        df_rota.to_excel(writer, sheet_name=ROTA_SHEET_NAME, index=False, header=False)
        _autosize_columns(writer, ROTA_SHEET_NAME, [[str(cell) for cell in row] for row in result.grid.to_rows()])
        writer.sheets[ROTA_SHEET_NAME].freeze_panes = "B3"

        df_summary.to_excel(writer, sheet_name=SUMMARY_SHEET_NAME, index=False)
        _autosize_columns(
            writer,
            SUMMARY_SHEET_NAME,
            [list(map(str, summary_columns))] + [[str(cell) for cell in row] for row in summary_rows],
        )


def _autosize_columns(writer: pd.ExcelWriter, sheet_name: str, rows: List[List[str]]):
    worksheet = writer.sheets[sheet_name]
    column_count = max((len(row) for row in rows), default=0)
    for idx in range(column_count):
        max_len = max(len(row[idx]) for row in rows if idx < len(row))
        worksheet.column_dimensions[get_column_letter(idx + 1)].width = max_len + 2
