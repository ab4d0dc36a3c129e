from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from openpyxl import Workbook
from openpyxl.utils import get_column_letter

from ..models.processed_row import ProcessedRow
from .common import workbook_bytes, write_bytes, write_row

"""Client lookup serializer: flat projection of already searched rows."""

__all__ = [
    "LOOKUP_HEADERS",
    "LOOKUP_COLUMN_WIDTHS",
    "LOOKUP_SHEET_TITLE",
    "serialize_lookup",
    "export_lookup",
]

logger = logging.getLogger(__name__)

LOOKUP_SHEET_TITLE = "Búsqueda por Cliente"
LOOKUP_HEADERS = ("item id", "description", "quantity", "district", "destination", "client")
# Width hints in characters, same order as LOOKUP_HEADERS
LOOKUP_COLUMN_WIDTHS = (20, 50, 12, 20, 28, 28)


def _project(row: ProcessedRow) -> list[object]:
    return [row.item_id, row.item_desc, row.quantity, row.district, row.destination, row.client_name]


def serialize_lookup(rows: Sequence[ProcessedRow]) -> bytes:
    """Render rows (no filtering, input order kept) as xlsx bytes."""
    wb = Workbook()
    ws = wb.active
    ws.title = LOOKUP_SHEET_TITLE
    write_row(ws, 1, LOOKUP_HEADERS, bold=True)
    for idx, row in enumerate(rows, start=2):
        write_row(ws, idx, _project(row))
    for col, width in enumerate(LOOKUP_COLUMN_WIDTHS, start=1):
        ws.column_dimensions[get_column_letter(col)].width = width
    return workbook_bytes(wb)


def export_lookup(rows: Sequence[ProcessedRow], filename: str | Path) -> Path:
    path = write_bytes(serialize_lookup(rows), filename)
    logger.debug(f"exported lookup rows={len(rows)} -> {path}")
    return path
