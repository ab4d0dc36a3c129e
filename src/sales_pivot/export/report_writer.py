from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Any

from openpyxl import Workbook

from ..models.report import ReportKind, ReportResult
from .common import BOLD, CENTER, workbook_bytes, write_bytes, write_row

"""Pivot report serializer: ReportResult -> single-sheet xlsx.

Layout (row 1 = group headers, row 2 = column headers, then data, then footer):

PRODUCT_LIST
    row 1: title (merged over 2 columns) | <total placeholder> | rep group (merged)
    row 2: item id | description | total | rep...
    data : row_key | row_label | total | value per rep...
    foot : TOTALES | "" | grand_total | per-rep sums...

ORDER_COUNT / NET_AMOUNT
    row 1: title | rep group (merged)
    row 2: DISTRITO | rep... | Total general
    data : row_label | value per rep... | total
    foot : TOTALES | per-rep sums... | grand_total

Missing cells are written as 0 and footer sums are recomputed from the data
rows. Single-cell spans are not merged.
"""

__all__ = [
    "REP_GROUP_HEADER",
    "PRODUCT_HEADERS",
    "DISTRICT_HEADER",
    "ROW_TOTAL_HEADER",
    "FOOTER_LABEL",
    "build_report_workbook",
    "serialize_report",
    "export_report",
    "default_report_filename",
]

logger = logging.getLogger(__name__)

REP_GROUP_HEADER = "Nombre de empleado del departamento de ventas"
PRODUCT_HEADERS = ("item id", "description", "total")
DISTRICT_HEADER = "DISTRITO"
ROW_TOTAL_HEADER = "Total general"
FOOTER_LABEL = "TOTALES"
AMOUNT_FORMAT = "#,##0.00"


def _merge(ws: Any, row: int, first_col: int, last_col: int) -> None:
    if last_col > first_col:
        ws.merge_cells(start_row=row, start_column=first_col, end_row=row, end_column=last_col)


def _product_layout(ws: Any, report: ReportResult, title: str) -> None:
    reps = report.columns
    first_rep_col = len(PRODUCT_HEADERS) + 1
    ws.cell(row=1, column=1, value=title).font = BOLD
    _merge(ws, 1, 1, 2)
    if reps:
        header = ws.cell(row=1, column=first_rep_col, value=REP_GROUP_HEADER)
        header.font = BOLD
        header.alignment = CENTER
        _merge(ws, 1, first_rep_col, first_rep_col + len(reps) - 1)

    write_row(ws, 2, [*PRODUCT_HEADERS, *reps], bold=True)
    row_idx = 3
    for item in report.data:
        write_row(ws, row_idx, [item.row_key, item.row_label, item.total, *(item.value_for(r) for r in reps)])
        row_idx += 1
    totals = report.column_totals()
    write_row(ws, row_idx, [FOOTER_LABEL, "", report.grand_total, *(totals[r] for r in reps)], bold=True)


def _district_layout(ws: Any, report: ReportResult, title: str, number_format: str | None) -> None:
    reps = report.columns
    ws.cell(row=1, column=1, value=title).font = BOLD
    if reps:
        header = ws.cell(row=1, column=2, value=REP_GROUP_HEADER)
        header.font = BOLD
        header.alignment = CENTER
        _merge(ws, 1, 2, 1 + len(reps))

    write_row(ws, 2, [DISTRICT_HEADER, *reps, ROW_TOTAL_HEADER], bold=True)
    row_idx = 3
    for item in report.data:
        write_row(
            ws, row_idx, [item.row_label, *(item.value_for(r) for r in reps), item.total],
            number_format=number_format,
        )
        row_idx += 1
    totals = report.column_totals()
    write_row(
        ws, row_idx, [FOOTER_LABEL, *(totals[r] for r in reps), report.grand_total],
        bold=True, number_format=number_format,
    )


def build_report_workbook(report: ReportResult, kind: ReportKind) -> Workbook:
    wb = Workbook()
    ws = wb.active
    ws.title = kind.title
    if kind is ReportKind.PRODUCT_LIST:
        _product_layout(ws, report, kind.title)
    else:
        number_format = AMOUNT_FORMAT if kind is ReportKind.NET_AMOUNT else None
        _district_layout(ws, report, kind.title, number_format)
    return wb


def serialize_report(report: ReportResult, kind: ReportKind) -> bytes:
    """Render ``report`` as xlsx bytes using the layout for ``kind``."""
    return workbook_bytes(build_report_workbook(report, kind))


def export_report(report: ReportResult, kind: ReportKind, filename: str | Path) -> Path:
    path = write_bytes(serialize_report(report, kind), filename)
    logger.debug(f"exported {kind.value} rows={len(report.data)} -> {path}")
    return path


def default_report_filename(kind: ReportKind, day: date | None = None) -> str:
    """Download name used for a report, e.g. ``Montos Netos_2024-05-01.xlsx``."""
    day = day or date.today()
    return f"{kind.title}_{day.isoformat()}.xlsx"
