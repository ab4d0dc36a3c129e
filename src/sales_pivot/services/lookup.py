from __future__ import annotations

from collections.abc import Iterable

from ..models.processed_row import ProcessedRow

__all__ = [
    "search_by_client",
]


def search_by_client(rows: Iterable[ProcessedRow], term: str) -> list[ProcessedRow]:
    """Rows whose client name contains ``term`` (case-insensitive), in input order.

    A blank term matches nothing.
    """
    needle = term.strip().lower()
    if not needle:
        return []
    return [r for r in rows if needle in r.client_name.lower()]
