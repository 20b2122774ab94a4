"""Console output helpers for generated rotas."""

from __future__ import annotations

from rota.domain.models import RotaResult
from rota.reporting.stats import build_office_summary


def print_rota(result: RotaResult):
    """
    Display the rota grid one week per block, followed by the office summary.
    """
    grid = result.grid
    window = result.window
    name_width = max([len(grid.header[0])] + [len(row[0]) for row in grid.rows]) + 2
    column_width = 16

    print("\n" + "=" * 120)
    print(f"ROTA {window.start.isoformat()} to {window.end.isoformat()}")
    print("=" * 120)
    print(f"Manager rule: {result.manager_rule}" + (f" | seed: {result.seed}" if result.seed is not None else ""))
    if grid.holiday_columns:
        holiday_labels = ", ".join(grid.dates[column] for column in grid.holiday_columns)
        print(f"Bank holidays in window: {holiday_labels}")

    columns_per_block = 5
    for block_start in range(1, len(grid.header), columns_per_block):
        block = range(block_start, min(block_start + columns_per_block, len(grid.header)))
        print(f"\n{'─' * (name_width + column_width * len(block))}")
        print(f"{'':<{name_width}}" + "".join(f"{grid.header[c]:<{column_width}}" for c in block))
        print(f"{'':<{name_width}}" + "".join(f"{grid.dates[c]:<{column_width}}" for c in block))
        print("─" * (name_width + column_width * len(block)))
        for row in grid.rows:
            print(f"{row[0]:<{name_width}}" + "".join(f"{row[c]:<{column_width}}" for c in block))

    print(f"\n{'=' * 120}")
    print("OFFICE SUMMARY")
    print(f"{'=' * 120}\n")

    columns, rows = build_office_summary(result)
    widths = [max([len(str(columns[i]))] + [len(str(row[i])) for row in rows]) + 2 for i in range(len(columns))]
    print("".join(f"{label:<{widths[i]}}" for i, label in enumerate(columns)))
    print("─" * sum(widths))
    for row in rows:
        print("".join(f"{str(value):<{widths[i]}}" for i, value in enumerate(row)))
