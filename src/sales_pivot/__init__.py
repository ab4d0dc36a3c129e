"""Wholesale sales pivot reports from spreadsheet exports.

Public entry points mirror the boundary used by an interactive front end::

    rows = parse_file(path_or_bytes)          # ProcessedRow list, or ParseError / EmptyDatasetError
    report = aggregate(rows, ReportKind.NET_AMOUNT)
    export_report(report, ReportKind.NET_AMOUNT, "Montos Netos.xlsx")
    export_lookup(search_by_client(rows, "bodega"), "clientes.xlsx")
"""

from .excel.reader import EmptyDatasetError, ParseError, parse_file
from .export.common import ExportError
from .export.lookup_writer import export_lookup, serialize_lookup
from .export.report_writer import export_report, serialize_report
from .models import FilterRules, PivotData, ProcessedRow, ReportConfig, ReportKind, ReportResult
from .services.aggregator import aggregate
from .services.lookup import search_by_client
from .services.row_filter import filter_rows

__version__ = "0.1.0"

__all__ = [
    "EmptyDatasetError",
    "ExportError",
    "FilterRules",
    "ParseError",
    "PivotData",
    "ProcessedRow",
    "ReportConfig",
    "ReportKind",
    "ReportResult",
    "aggregate",
    "export_lookup",
    "export_report",
    "filter_rows",
    "parse_file",
    "search_by_client",
    "serialize_lookup",
    "serialize_report",
]
