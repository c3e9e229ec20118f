"""Excel analytics export."""
from __future__ import annotations

from io import BytesIO
from pathlib import Path
from typing import BinaryIO

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font

from ...services.statistics import Dashboard
from .csv_writer import sections

HEADER_FONT = Font(bold=True)
CENTER = Alignment(horizontal="center", vertical="center")


def build_workbook(dashboard: Dashboard) -> Workbook:
    wb = Workbook()
    wb.remove(wb.active)
    for title, header, rows in sections(dashboard):
        ws = wb.create_sheet(title=title)
        for col_idx, label in enumerate(header, start=1):
            cell = ws.cell(row=1, column=col_idx, value=label)
            cell.font = HEADER_FONT
            cell.alignment = CENTER
        for row_idx, row in enumerate(rows, start=2):
            for col_idx, value in enumerate(row, start=1):
                ws.cell(row=row_idx, column=col_idx, value=value)
    return wb


def write_dashboard(target: str | Path | BinaryIO, dashboard: Dashboard) -> None:
    build_workbook(dashboard).save(target)


def dashboard_xlsx(dashboard: Dashboard) -> BytesIO:
    stream = BytesIO()
    write_dashboard(stream, dashboard)
    stream.seek(0)
    return stream
