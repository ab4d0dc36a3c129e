from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from ..models.config_models import DEFAULT_TAX_DIVISOR, FilterRules
from ..models.processed_row import ProcessedRow
from ..models.report import PivotData, ReportKind, ReportResult
from .row_filter import filter_rows

"""Pivot aggregator: filtered rows -> ReportResult for one report kind.

Cell semantics per kind:

- PRODUCT_LIST: sum of quantity per (item, rep); row total sums every rep.
- NET_AMOUNT: sum of total_amount / tax divisor per (district, rep). Each
  doc_id contributes once for the whole run: only the first line seen for a
  document is counted, later lines are skipped wherever they fall.
- ORDER_COUNT: distinct doc_id per (district, rep); the row total is the
  distinct count across the whole district, not the sum of the cells.

Rows are sorted by label (case-sensitive, stable on insertion order) and
columns are the sorted distinct sales reps of the filtered rows.
"""

__all__ = [
    "aggregate",
    "net_amount",
]

logger = logging.getLogger(__name__)


def net_amount(gross: float, tax_divisor: float = DEFAULT_TAX_DIVISOR) -> float:
    """Amount before the inclusive tax."""
    return gross / tax_divisor


@dataclass
class _Bucket:
    """Accumulator for one output row (mutable, private to one run)."""
    row_key: str
    row_label: str
    total: float = 0
    values: dict[str, float] = field(default_factory=dict)
    docs: set[str] = field(default_factory=set)
    docs_by_rep: dict[str, set[str]] = field(default_factory=dict)

    def add(self, rep: str, amount: float) -> None:
        self.values[rep] = self.values.get(rep, 0) + amount
        self.total += amount

    def add_doc(self, rep: str, doc_id: str) -> None:
        self.docs_by_rep.setdefault(rep, set()).add(doc_id)
        self.docs.add(doc_id)

    def finalize(self, kind: ReportKind) -> PivotData:
        if kind is ReportKind.ORDER_COUNT:
            values = {rep: len(docs) for rep, docs in self.docs_by_rep.items()}
            return PivotData(self.row_key, self.row_label, len(self.docs), values)
        return PivotData(self.row_key, self.row_label, self.total, dict(self.values))


def _row_identity(row: ProcessedRow, kind: ReportKind) -> tuple[str, str]:
    if kind.groups_by_item:
        return row.item_id, row.item_desc
    return row.district, row.district


def aggregate(
    rows: Sequence[ProcessedRow],
    kind: ReportKind,
    rules: FilterRules | None = None,
    *,
    tax_divisor: float = DEFAULT_TAX_DIVISOR,
) -> ReportResult:
    """Build the pivot report for ``kind`` from the unfiltered rows.

    Args:
        rows: every normalized row of the upload (filtering happens here)
        kind: report flavour
        rules: filter rules; defaults to the standard wholesale rules
        tax_divisor: divisor turning gross into net amounts (NET_AMOUNT only)

    Returns:
        A fresh ReportResult; no reference to ``rows`` is retained.
    """
    kept = filter_rows(rows, rules)
    if not kept:
        return ReportResult.empty()

    columns = sorted({r.sales_rep for r in kept})
    buckets: dict[str, _Bucket] = {}
    # Documents already counted for NET_AMOUNT (run-wide, not per row key)
    counted_docs: set[str] = set()

    for row in kept:
        row_key, row_label = _row_identity(row, kind)
        bucket = buckets.get(row_key)
        if bucket is None:
            bucket = buckets[row_key] = _Bucket(row_key, row_label)

        if kind is ReportKind.ORDER_COUNT:
            bucket.add_doc(row.sales_rep, row.doc_id)
        elif kind is ReportKind.NET_AMOUNT:
            if row.doc_id in counted_docs:
                continue
            counted_docs.add(row.doc_id)
            bucket.add(row.sales_rep, net_amount(row.total_amount, tax_divisor))
        else:
            bucket.add(row.sales_rep, row.quantity)

    # sorted() is stable, so equal labels keep first-seen order
    data = sorted((b.finalize(kind) for b in buckets.values()), key=lambda p: p.row_label)
    grand_total = sum(p.total for p in data)
    logger.debug(
        f"aggregate kind={kind.value} input={len(rows)} kept={len(kept)} "
        f"rows={len(data)} columns={len(columns)}"
    )
    return ReportResult(columns=columns, data=data, grand_total=grand_total)
