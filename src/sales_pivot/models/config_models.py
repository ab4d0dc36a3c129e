from __future__ import annotations

from dataclasses import dataclass, field

"""Configuration dataclasses for the sales pivot report engine.

FilterRules replaces the process-wide filter constants: it is passed
explicitly into the row filter and the aggregator so deployments with
different business rules can reuse the engine.
"""

__all__ = [
    "DEFAULT_ALLOWED_GROUPS",
    "DEFAULT_EXCLUDED_STATUS",
    "DEFAULT_TAX_DIVISOR",
    "FilterRules",
    "ReportConfig",
]

DEFAULT_EXCLUDED_STATUS = "Cerrado"
DEFAULT_ALLOWED_GROUPS = frozenset({
    "MAYORISTAS B",
    "MAYORISTAS C",
    "MAYORISTAS D",
    "MAYORISTAS E",
})
# Gross amounts include an 18% tax
DEFAULT_TAX_DIVISOR = 1.18


@dataclass(frozen=True)
class FilterRules:
    """Row inclusion rules.

    A row is kept when its status does not contain ``excluded_status`` (substring
    match) and its group name is exactly one of ``allowed_groups``.
    """
    excluded_status: str = DEFAULT_EXCLUDED_STATUS
    allowed_groups: frozenset[str] = DEFAULT_ALLOWED_GROUPS


@dataclass(frozen=True)
class ReportConfig:
    """Root configuration object for a report run."""
    filter_rules: FilterRules = field(default_factory=FilterRules)
    tax_divisor: float = DEFAULT_TAX_DIVISOR
    output_directory: str = "."
