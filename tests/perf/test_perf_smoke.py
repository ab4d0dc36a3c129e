from __future__ import annotations

import time

import numpy as np
import pytest

from sales_pivot.models.processed_row import ProcessedRow
from sales_pivot.models.report import ReportKind
from sales_pivot.services.aggregator import aggregate

"""Performance smoke test: aggregation over 50k in-memory lines stays fast."""

ROWS = 50_000


def _synthetic_rows(n: int) -> list[ProcessedRow]:
    rng = np.random.default_rng(42)
    groups = ["MAYORISTAS A", "MAYORISTAS B", "MAYORISTAS C", "MAYORISTAS D", "MAYORISTAS E"]
    districts = ["Lima", "Callao", "Arequipa", "Trujillo", "Cusco", "Piura"]
    reps = ["Ana", "Juan", "Luis", "Maria", "Rosa"]
    docs = rng.integers(0, n // 3, n)
    return [
        ProcessedRow(
            doc_id=str(docs[i]),
            status="Cerrado" if i % 9 == 0 else "Abierto",
            group_name=groups[i % len(groups)],
            district=districts[docs[i] % len(districts)],
            sales_rep=reps[docs[i] % len(reps)],
            total_amount=float(docs[i] % 1000),
            item_id=f"ART-{i % 300:04d}",
            item_desc=f"Producto {i % 300}",
            quantity=int(i % 7) + 1,
        )
        for i in range(n)
    ]


@pytest.mark.perf
@pytest.mark.parametrize("kind", list(ReportKind))
def test_aggregate_throughput(kind):
    rows = _synthetic_rows(ROWS)
    start = time.perf_counter()
    report = aggregate(rows, kind)
    elapsed = time.perf_counter() - start
    assert report.data
    assert report.grand_total == pytest.approx(sum(p.total for p in report.data))
    # lenient budget so CI stays stable
    assert elapsed < 5.0, f"aggregate {kind.value} too slow: {elapsed:.3f}s"
