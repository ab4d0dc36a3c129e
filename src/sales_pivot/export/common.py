from __future__ import annotations

from collections.abc import Sequence
from io import BytesIO
from pathlib import Path
from typing import Any

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font

"""Shared openpyxl helpers for the report and lookup writers."""

__all__ = [
    "ExportError",
    "BOLD",
    "CENTER",
    "write_row",
    "workbook_bytes",
    "write_bytes",
]

BOLD = Font(bold=True)
CENTER = Alignment(horizontal="center", vertical="center")


class ExportError(Exception):
    """Raised when an export file cannot be written."""


def write_row(ws: Any, row: int, values: Sequence[Any], *, bold: bool = False, number_format: str | None = None) -> None:
    """Write ``values`` into ``row`` starting at column A."""
    for col, val in enumerate(values, start=1):
        cell = ws.cell(row=row, column=col, value=val)
        if bold:
            cell.font = BOLD
        if number_format and isinstance(val, (int, float)) and not isinstance(val, bool):
            cell.number_format = number_format


def workbook_bytes(wb: Workbook) -> bytes:
    buf = BytesIO()
    wb.save(buf)
    return buf.getvalue()


def write_bytes(payload: bytes, filename: str | Path) -> Path:
    """Write an exported workbook to ``filename`` creating parent directories."""
    path = Path(filename)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(payload)
    except OSError as e:
        raise ExportError(f"cannot write {path}: {e}") from e
    return path
