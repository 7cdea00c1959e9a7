"""
Cell-level formatting: value conversion, number formats, header rows, widths.
"""
from __future__ import annotations

import datetime as dt

import pandas as pd
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from listings_eda.excel.styles import (
    HEADER_FONT, HEADER_FILL, HEADER_BORDER,
    DATA_FONT, CELL_BORDER, ZEBRA_FILL,
    KPI_VALUE_FONT, KPI_LABEL_FONT,
    CENTER, LEFT, RIGHT,
    HIGHLIGHT_FILLS,
)

NUMBER_FORMATS = {
    "currency": '"$"#,##0.00',
    "percent": '0.0"%"',
    "number": "#,##0",
    "decimal": "0.00",
    "corr": "+0.00;-0.00;0.00",
    "date": "yyyy-mm-dd",
}


def cell_value(value):
    """Convert a pandas/numpy value to something openpyxl can store (None for missing)."""
    if pd.api.types.is_scalar(value) and pd.isna(value):
        return None
    if isinstance(value, pd.Timestamp):
        return value.to_pydatetime()
    if isinstance(value, (str, bool, int, float, dt.date)):
        return value
    if hasattr(value, "item"):
        return value.item()
    return str(value)


def resolve_type(value, col_type: str) -> str:
    """Pick a concrete format for a mixed "value" column (dates, numbers and labels)."""
    if col_type != "value":
        return col_type
    if isinstance(value, dt.date):
        return "date"
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return "decimal"
    return "text"


def correlation_highlight(value, strong: float) -> str | None:
    """Diverging highlight name for a correlation coefficient."""
    if value is None or pd.isna(value):
        return None
    if abs(value) >= strong:
        return "positive" if value > 0 else "negative"
    if abs(value) >= strong / 2:
        return "positive_weak" if value > 0 else "negative_weak"
    return None


def format_header_row(ws: Worksheet, row_num: int, num_cols: int, start_col: int = 1) -> None:
    for col in range(start_col, start_col + num_cols):
        cell = ws.cell(row=row_num, column=col)
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL
        cell.alignment = CENTER
        cell.border = HEADER_BORDER


def format_data_cell(
    ws: Worksheet,
    row_num: int,
    col_num: int,
    value,
    col_type: str = "text",
    highlight: str | None = None,
) -> None:
    """Write and format a single data cell. Missing values are left blank."""
    cell = ws.cell(row=row_num, column=col_num)
    value = cell_value(value)
    col_type = resolve_type(value, col_type)
    if col_type == "text" and value is not None and not isinstance(value, str):
        value = str(value)

    cell.value = value
    cell.font = DATA_FONT
    cell.border = CELL_BORDER
    cell.alignment = LEFT if col_type == "text" else RIGHT
    if col_type in NUMBER_FORMATS:
        cell.number_format = NUMBER_FORMATS[col_type]

    if highlight in HIGHLIGHT_FILLS:
        cell.fill = HIGHLIGHT_FILLS[highlight]
    elif row_num % 2 == 0:
        cell.fill = ZEBRA_FILL


def auto_column_width(ws: Worksheet, min_width: int = 10, max_width: int = 55) -> None:
    """Fit each column to its longest value, within bounds."""
    widths: dict[int, int] = {}
    for row in ws.iter_rows():
        for cell in row:
            if cell.value is None:
                continue
            widths[cell.column] = max(widths.get(cell.column, 0), len(str(cell.value)))
    for col, length in widths.items():
        ws.column_dimensions[get_column_letter(col)].width = min(max(length + 2, min_width), max_width)


def add_kpi_card(
    ws: Worksheet,
    row: int,
    col: int,
    value,
    label: str,
    format_type: str = "number",
) -> None:
    """Large value with a small caption underneath."""
    value_cell = ws.cell(row=row, column=col)
    value_cell.value = cell_value(value)
    value_cell.font = KPI_VALUE_FONT
    value_cell.alignment = CENTER
    if format_type in NUMBER_FORMATS:
        value_cell.number_format = NUMBER_FORMATS[format_type]

    label_cell = ws.cell(row=row + 1, column=col)
    label_cell.value = label
    label_cell.font = KPI_LABEL_FONT
    label_cell.alignment = CENTER
