from __future__ import annotations

from dataclasses import dataclass

"""ProcessedRow model for the sales pivot report engine.

One ProcessedRow is created per spreadsheet record by the normalizer and is
never mutated afterwards. Field defaults mirror the values applied when the
source column is missing.
"""

__all__ = [
    "ProcessedRow",
    "DEFAULT_DISTRICT",
    "DEFAULT_SALES_REP",
    "DEFAULT_CLIENT_NAME",
]

DEFAULT_DISTRICT = "Sin Condado"
DEFAULT_SALES_REP = "Desconocido"
DEFAULT_CLIENT_NAME = "Cliente Desconocido"


@dataclass(frozen=True)
class ProcessedRow:
    """Normalized transaction line.

    ``doc_id`` is not unique: a document with several items spans several rows.
    ``total_amount`` is the gross document amount including tax.
    """
    doc_id: str = ""
    status: str = ""
    group_name: str = ""
    district: str = DEFAULT_DISTRICT
    sales_rep: str = DEFAULT_SALES_REP
    total_amount: float = 0
    item_id: str = ""
    item_desc: str = ""
    quantity: float = 1
    client_name: str = DEFAULT_CLIENT_NAME
    destination: str = ""
