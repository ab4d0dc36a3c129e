from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from datetime import date
from pathlib import Path

from ..excel.reader import parse_file
from ..export.lookup_writer import export_lookup
from ..export.report_writer import default_report_filename, export_report
from ..models.config_models import ReportConfig
from ..models.processed_row import ProcessedRow
from ..models.report import ReportKind, ReportResult
from ..models.run_result import ReportStat, RunResult
from .aggregator import aggregate
from .lookup import search_by_client
from .progress import ProgressTracker
from .row_filter import filter_rows

"""Run orchestration: parse one upload, build and export the requested reports.

Errors from decoding (ParseError, EmptyDatasetError) and exporting
(ExportError) propagate to the caller unchanged.
"""

__all__ = [
    "build_report",
    "run_reports",
    "run_lookup",
]

logger = logging.getLogger(__name__)


def build_report(rows: Sequence[ProcessedRow], kind: ReportKind, config: ReportConfig | None = None) -> ReportResult:
    config = config or ReportConfig()
    return aggregate(rows, kind, config.filter_rules, tax_divisor=config.tax_divisor)


def run_reports(
    source: Path,
    kinds: Sequence[ReportKind],
    config: ReportConfig,
    output_dir: Path | None = None,
    *,
    day: date | None = None,
) -> RunResult:
    """Parse ``source`` once and export one workbook per report kind.

    Args:
        source: input workbook (first sheet is read)
        kinds: report kinds to build, in export order
        config: filter rules, tax divisor and default output directory
        output_dir: overrides ``config.output_directory``
        day: date used in the output file names (default: today)

    Returns:
        RunResult with one ReportStat per exported report
    """
    start = time.perf_counter()
    rows = parse_file(source)
    out_dir = output_dir or Path(config.output_directory)
    kept = len(filter_rows(rows, config.filter_rules))

    stats: list[ReportStat] = []
    with ProgressTracker(len(kinds)) as progress:
        for kind in kinds:
            progress.start_report(kind)
            report = build_report(rows, kind, config)
            path = export_report(report, kind, out_dir / default_report_filename(kind, day))
            stats.append(
                ReportStat(
                    kind=kind,
                    data_rows=len(report.data),
                    columns=len(report.columns),
                    grand_total=report.grand_total,
                    output_path=path,
                )
            )
            logger.info(f"report={kind.value} rows={len(report.data)} reps={len(report.columns)} -> {path}")
            progress.finish_report(rows=len(report.data))

    return RunResult(
        file_name=source.name,
        total_rows=len(rows),
        kept_rows=kept,
        elapsed_seconds=time.perf_counter() - start,
        reports=stats,
    )


def run_lookup(source: Path, term: str, output: Path) -> tuple[RunResult, list[ProcessedRow]]:
    """Search client names in ``source`` and export the matching rows."""
    start = time.perf_counter()
    rows = parse_file(source)
    matches = search_by_client(rows, term)
    path = export_lookup(matches, output)
    logger.info(f"lookup term='{term}' matches={len(matches)} -> {path}")
    result = RunResult(
        file_name=source.name,
        total_rows=len(rows),
        kept_rows=len(matches),
        elapsed_seconds=time.perf_counter() - start,
    )
    return result, matches
