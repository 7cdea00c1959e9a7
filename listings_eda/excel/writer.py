"""
ExcelWriter — builds the styled analysis workbook sheet by sheet.

Every ``write_*`` method takes the row to start at and returns the next free
row, so sections can be stacked on one sheet.
"""
from __future__ import annotations

from pathlib import Path

import pandas as pd
from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from listings_eda.excel.styles import (
    TITLE_FONT, SUBTITLE_FONT, SECTION_FONT, LABEL_FONT,
    NOTE_TITLE_FONT, NOTE_BODY_FONT,
    CELL_BORDER, DIAGONAL_FILL, HIGHLIGHT_FILLS, WRAP,
)
from listings_eda.excel.formatters import (
    format_header_row,
    format_data_cell,
    auto_column_width,
    add_kpi_card,
    correlation_highlight,
)


ColSpec = tuple[str, str, str]  # (key, col_type, label)

SHEET_NAME_LIMIT = 31


class ExcelWriter:
    """Workbook builder with title, KPI, table, matrix and note blocks."""

    def __init__(self) -> None:
        self.wb = Workbook()
        self._sheets_added = 0

    def add_sheet(self, title: str) -> Worksheet:
        """New worksheet; the workbook's default sheet is reused for the first one."""
        title = title[:SHEET_NAME_LIMIT]
        if self._sheets_added == 0:
            ws = self.wb.active
            ws.title = title
        else:
            ws = self.wb.create_sheet(title=title)
        self._sheets_added += 1
        return ws

    # ------------------------------------------------------------------
    # Headings
    # ------------------------------------------------------------------

    def write_title(self, ws: Worksheet, title: str, subtitle: str, merge_cols: int = 8) -> int:
        for row, text, font in ((1, title, TITLE_FONT), (2, subtitle, SUBTITLE_FONT)):
            ws.cell(row=row, column=1).value = text
            ws.cell(row=row, column=1).font = font
            ws.merge_cells(start_row=row, start_column=1, end_row=row, end_column=merge_cols)
        for col in range(1, merge_cols + 1):
            ws.column_dimensions[get_column_letter(col)].width = 18
        return 4

    def write_section(self, ws: Worksheet, row: int, title: str) -> int:
        ws.cell(row=row, column=1).value = title
        ws.cell(row=row, column=1).font = SECTION_FONT
        return row + 2

    def write_kpi_row(
        self,
        ws: Worksheet,
        row: int,
        kpis: list[tuple],  # [(value, label, format_type), ...]
        col_spacing: int = 2,
    ) -> int:
        for i, (value, label, fmt) in enumerate(kpis):
            add_kpi_card(ws, row, 1 + i * col_spacing, value, label, fmt)
        return row + 3

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    def write_table(
        self,
        ws: Worksheet,
        start_row: int,
        columns: list[ColSpec],
        data: list[dict] | pd.DataFrame,
        highlight_fn=None,
        freeze: bool = True,
    ) -> int:
        """Header row plus one row per record.

        highlight_fn(row_idx, row_data, key) may return a HIGHLIGHT_FILLS name.
        """
        for col_num, (_, _, label) in enumerate(columns, 1):
            ws.cell(row=start_row, column=col_num).value = label
        format_header_row(ws, start_row, len(columns))

        rows = data.to_dict("records") if isinstance(data, pd.DataFrame) else data
        row = start_row + 1
        for idx, row_data in enumerate(rows):
            for col_num, (key, col_type, _) in enumerate(columns, 1):
                hl = highlight_fn(idx, row_data, key) if highlight_fn else None
                format_data_cell(ws, row, col_num, row_data.get(key), col_type, highlight=hl)
            row += 1

        auto_column_width(ws)
        if freeze:
            ws.freeze_panes = f"A{start_row + 1}"
        return row

    def write_matrix(self, ws: Worksheet, start_row: int, matrix: pd.DataFrame, strong: float = 0.5) -> int:
        """Square correlation matrix with labelled rows and diverging fills."""
        labels = list(matrix.columns)
        for j, label in enumerate(labels, 2):
            ws.cell(row=start_row, column=j).value = label
        format_header_row(ws, start_row, len(labels), start_col=2)

        row = start_row + 1
        for name in matrix.index:
            label_cell = ws.cell(row=row, column=1)
            label_cell.value = name
            label_cell.font = LABEL_FONT
            label_cell.border = CELL_BORDER
            for j, col in enumerate(labels, 2):
                value = matrix.loc[name, col]
                hl = None if name == col else correlation_highlight(value, strong)
                format_data_cell(ws, row, j, value, "corr", highlight=hl)
                if name == col:
                    ws.cell(row=row, column=j).fill = DIAGONAL_FILL
            row += 1

        auto_column_width(ws, min_width=8)
        ws.freeze_panes = ws.cell(row=start_row + 1, column=2)
        return row

    def write_legend(self, ws: Worksheet, start_row: int, items: list[tuple[str, str]]) -> int:
        """Swatch + description rows, one per highlight name."""
        row = start_row
        for name, desc in items:
            swatch = ws.cell(row=row, column=1)
            swatch.fill = HIGHLIGHT_FILLS[name]
            swatch.border = CELL_BORDER
            text = ws.cell(row=row, column=2)
            text.value = desc
            text.font = NOTE_BODY_FONT
            text.alignment = WRAP
            row += 1
        return row + 1

    def write_note(self, ws: Worksheet, row: int, title: str, body: str, merge_cols: int = 8) -> int:
        ws.cell(row=row, column=1).value = title
        ws.cell(row=row, column=1).font = NOTE_TITLE_FONT
        body_cell = ws.cell(row=row + 1, column=1)
        body_cell.value = body
        body_cell.font = NOTE_BODY_FONT
        body_cell.alignment = WRAP
        ws.merge_cells(start_row=row + 1, start_column=1, end_row=row + 1, end_column=merge_cols)
        ws.row_dimensions[row + 1].height = 45
        return row + 3

    def save(self, path: str | Path) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.wb.save(path)
        return path
