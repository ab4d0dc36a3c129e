from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Any

import pandas as pd

from ..models.processed_row import ProcessedRow
from .normalizer import normalize_records

"""Workbook decoding: first worksheet -> header/value records -> ProcessedRow.

Only the first worksheet is read. Row 1 is the header row and every following
non-empty row becomes one record. Blank cells are left out of the record so
the normalizer applies field defaults for them.
"""

__all__ = [
    "ParseError",
    "EmptyDatasetError",
    "read_records",
    "parse_file",
]

logger = logging.getLogger(__name__)

Source = str | Path | bytes


class ParseError(Exception):
    """Raised when the input container cannot be decoded as a spreadsheet."""


class EmptyDatasetError(Exception):
    """Raised when the workbook is readable but holds no data rows."""


def _load_first_sheet(source: Source) -> pd.DataFrame:
    target: Any = io.BytesIO(source) if isinstance(source, (bytes, bytearray)) else source
    try:
        # dtype=object keeps integer cells as int even when the column has blanks;
        # only truly empty cells are NA, text such as "NA" or "None" stays text
        return pd.read_excel(
            target,
            sheet_name=0,
            header=0,
            dtype=object,
            keep_default_na=False,
            na_values=[""],
        )
    except Exception as e:
        raise ParseError(f"cannot read spreadsheet: {e}") from e


def _source_name(source: Source) -> str:
    if isinstance(source, (bytes, bytearray)):
        return "<upload>"
    return Path(source).name


def read_records(source: Source) -> list[dict[str, Any]]:
    """Read the first worksheet returning one dict per data row.

    Parameters
    ----------
    source: path to the workbook or its raw bytes

    Raises
    ------
    ParseError: the container is not a readable spreadsheet
    """
    df = _load_first_sheet(source)
    df = df.dropna(how="all")
    columns = [str(c) for c in df.columns]
    records: list[dict[str, Any]] = []
    for raw in df.itertuples(index=False, name=None):
        records.append({col: val for col, val in zip(columns, raw, strict=False) if not pd.isna(val)})
    logger.debug(f"read {len(records)} records columns={columns}")
    return records


def parse_file(source: Source) -> list[ProcessedRow]:
    """Decode a workbook into normalized rows.

    Raises ParseError for unreadable input and EmptyDatasetError when the first
    sheet carries no data rows. No partial result is ever returned.
    """
    records = read_records(source)
    if not records:
        raise EmptyDatasetError(f"no data rows in first sheet: {_source_name(source)}")
    return normalize_records(records)
