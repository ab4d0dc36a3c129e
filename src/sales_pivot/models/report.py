from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

"""Report domain models: ReportKind enum, PivotData row and ReportResult.

All instances are value objects built fresh by each aggregation call.
"""

__all__ = [
    "ReportKind",
    "PivotData",
    "ReportResult",
]


class ReportKind(Enum):
    """Pivot report flavours.

    - ORDER_COUNT: distinct documents per district and sales rep
    - NET_AMOUNT: net amount (gross / tax divisor) per district and sales rep
    - PRODUCT_LIST: quantity per item and sales rep
    """
    ORDER_COUNT = "ORDER_COUNT"
    NET_AMOUNT = "NET_AMOUNT"
    PRODUCT_LIST = "PRODUCT_LIST"

    @property
    def title(self) -> str:
        return _TITLES[self]

    @property
    def groups_by_item(self) -> bool:
        return self is ReportKind.PRODUCT_LIST

    @classmethod
    def parse(cls, text: str) -> ReportKind:
        """Resolve a kind from its value, case-insensitively (``net_amount`` ok)."""
        try:
            return cls(text.strip().upper())
        except ValueError:
            valid = ", ".join(k.value for k in cls)
            raise ValueError(f"unknown report kind '{text}' (expected one of: {valid})") from None


_TITLES = {
    ReportKind.ORDER_COUNT: "Cantidad de Pedidos",
    ReportKind.NET_AMOUNT: "Montos Netos",
    ReportKind.PRODUCT_LIST: "Lista de Productos",
}


@dataclass(frozen=True)
class PivotData:
    """One aggregated output row.

    ``values`` only holds reps that contributed to this row; ``total`` always
    reflects every contribution (for ORDER_COUNT it is a distinct count, so it
    can be smaller than the sum of ``values``).
    """
    row_key: str
    row_label: str
    total: float
    values: dict[str, float] = field(default_factory=dict)

    def value_for(self, rep: str) -> float:
        return self.values.get(rep, 0)


@dataclass(frozen=True)
class ReportResult:
    """Complete output of one aggregation run."""
    columns: list[str]
    data: list[PivotData]
    grand_total: float

    def column_totals(self) -> dict[str, float]:
        """Per-rep sums recomputed from ``data`` (missing cells count as 0)."""
        return {col: sum(row.value_for(col) for row in self.data) for col in self.columns}

    @classmethod
    def empty(cls) -> ReportResult:
        return cls(columns=[], data=[], grand_total=0)
