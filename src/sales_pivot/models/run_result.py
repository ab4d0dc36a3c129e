from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .report import ReportKind

"""Run result models for the command line shell.

Phase: report run bookkeeping used by the SUMMARY line.
"""


@dataclass(frozen=True)
class ReportStat:
    """Per-report statistics (one per exported report kind)."""
    kind: ReportKind
    data_rows: int  # pivot rows
    columns: int  # sales reps
    grand_total: float
    output_path: Path | None = None


@dataclass(frozen=True)
class RunResult:
    """Aggregated result of one input file run."""
    file_name: str
    total_rows: int  # normalized rows read from the first sheet
    kept_rows: int  # rows surviving the filter rules
    elapsed_seconds: float
    reports: list[ReportStat] = field(default_factory=list)
