from __future__ import annotations

from collections.abc import Iterable

from ..models.config_models import FilterRules
from ..models.processed_row import ProcessedRow

"""Row filter applied before every aggregation.

Pure function: returns a new list in input order and never mutates rows.
"""

__all__ = [
    "is_included",
    "filter_rows",
]


def is_included(row: ProcessedRow, rules: FilterRules) -> bool:
    """True when the row passes both the status and the group rule."""
    if rules.excluded_status in row.status:
        return False
    return row.group_name in rules.allowed_groups


def filter_rows(rows: Iterable[ProcessedRow], rules: FilterRules | None = None) -> list[ProcessedRow]:
    rules = rules or FilterRules()
    return [r for r in rows if is_included(r, rules)]
