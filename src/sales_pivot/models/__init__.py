"""Domain models for the sales pivot report engine.

Every model is an immutable value object; aggregation builds fresh instances
on each call and keeps no state between calls.
"""

from .config_models import FilterRules, ReportConfig
from .error_record import ErrorRecord
from .processed_row import ProcessedRow
from .report import PivotData, ReportKind, ReportResult
from .run_result import ReportStat, RunResult

__all__ = [
    # Configuration models
    "FilterRules",
    "ReportConfig",
    # Processing models
    "ProcessedRow",
    "ReportKind",
    "PivotData",
    "ReportResult",
    # Run bookkeeping
    "ErrorRecord",
    "ReportStat",
    "RunResult",
]
