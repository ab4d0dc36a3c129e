from __future__ import annotations

import math
import re
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

import pandas as pd

from ..models.processed_row import (
    DEFAULT_CLIENT_NAME,
    DEFAULT_DISTRICT,
    DEFAULT_SALES_REP,
    ProcessedRow,
)

"""Row normalizer: maps loosely named spreadsheet columns onto ProcessedRow.

Header resolution is case-insensitive and whitespace-trimmed. For every field
an ordered alias tuple is declared; the record's headers are scanned in
column order and the first header matching any alias wins. Missing or blank
cells resolve to the field default, malformed numbers resolve to 0. No error
is raised at this stage.
"""

__all__ = [
    "FieldSpec",
    "FIELD_SPECS",
    "normalize_record",
    "normalize_records",
    "resolve_headers",
    "to_number",
    "to_text",
]


# plain decimal or exponent notation; rejects "1_000", "inf", "nan"
_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass(frozen=True)
class FieldSpec:
    """Alias table entry for one ProcessedRow field."""
    name: str
    aliases: tuple[str, ...]
    default: Any
    numeric: bool = False

    @property
    def match_keys(self) -> frozenset[str]:
        return frozenset(a.lower() for a in self.aliases)


FIELD_SPECS: tuple[FieldSpec, ...] = (
    FieldSpec("doc_id", ("Número de documento", "Numero de documento", "DocNum"), ""),
    FieldSpec("status", ("Estado", "Status"), ""),
    FieldSpec("group_name", ("Nombre de Grupo", "Grupo"), ""),
    FieldSpec("district", ("Condado", "Distrito", "District"), DEFAULT_DISTRICT),
    FieldSpec(
        "sales_rep",
        ("Nombre de empleado del departamento de ventas", "Empleado", "Vendedor", "Sales Rep"),
        DEFAULT_SALES_REP,
    ),
    FieldSpec("total_amount", ("Total del documento", "Total Documento", "Total"), 0, numeric=True),
    FieldSpec("item_id", ("Número de artículo", "Numero de articulo", "Item No", "Articulo"), ""),
    FieldSpec("item_desc", ("Descripción artículo/serv.", "Descripcion", "Description"), ""),
    FieldSpec("quantity", ("Cantidad", "Qty", "Unidades"), 1, numeric=True),
    FieldSpec(
        "client_name",
        ("Nombre de cliente/proveedor", "Cliente", "Client", "Customer"),
        DEFAULT_CLIENT_NAME,
    ),
    FieldSpec("destination", ("Destino", "Destination"), ""),
)


def _header_key(header: Any) -> str:
    return str(header).strip().lower()


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def to_text(value: Any) -> str:
    """Coerce a cell to text; integral floats lose the trailing ``.0``."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def to_number(value: Any) -> float:
    """Coerce a cell to a number; anything unparseable becomes 0."""
    if isinstance(value, bool):
        return 1 if value else 0
    if isinstance(value, (int, float)):
        return 0 if _is_blank(value) else value
    if isinstance(value, str):
        text = value.strip()
        if not _NUMBER_RE.fullmatch(text):
            return 0
        number = float(text)
        return number if math.isfinite(number) else 0
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0


def _find_header(headers: Sequence[Any], spec: FieldSpec) -> Any | None:
    keys = spec.match_keys
    for header in headers:
        if _header_key(header) in keys:
            return header
    return None


def resolve_headers(headers: Iterable[Any]) -> dict[str, str | None]:
    """Report which header each field would read from (None -> default)."""
    header_list = list(headers)
    resolved: dict[str, str | None] = {}
    for spec in FIELD_SPECS:
        found = _find_header(header_list, spec)
        resolved[spec.name] = None if found is None else str(found)
    return resolved


def normalize_record(record: Mapping[Any, Any]) -> ProcessedRow:
    """Build a ProcessedRow from one header -> cell mapping.

    Blank cells are treated as absent so that a later alias column can still
    supply the value, as with a decoder that omits empty cells.
    """
    present = [k for k, v in record.items() if not _is_blank(v)]
    values: dict[str, Any] = {}
    for spec in FIELD_SPECS:
        header = _find_header(present, spec)
        if header is None:
            values[spec.name] = spec.default
        elif spec.numeric:
            values[spec.name] = to_number(record[header])
        else:
            values[spec.name] = to_text(record[header])
    return ProcessedRow(**values)


def normalize_records(records: Iterable[Mapping[Any, Any]]) -> list[ProcessedRow]:
    return [normalize_record(r) for r in records]
