from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import asdict
from pathlib import Path

from dotenv import load_dotenv

from ..config.loader import ConfigError, load_config, resolve_config_path
from ..excel.normalizer import normalize_records, resolve_headers
from ..excel.reader import EmptyDatasetError, ParseError, read_records
from ..export.common import ExportError
from ..logging.error_log import ErrorLogBuffer
from ..logging.init import log_summary, setup_logging
from ..models.report import ReportKind
from ..services.pipeline import run_lookup, run_reports
from ..services.summary import render_summary_fields

"""Command line shell around the report engine.

    sales-pivot [--debug] [--config PATH] report INPUT [--kind KIND|all] [--output-dir DIR]
    sales-pivot [--debug] [--config PATH] lookup INPUT --client TERM [--output FILE]
    sales-pivot [--debug] inspect INPUT

Exit codes: 0 success, 1 fatal (config / unreadable file / export), 2 empty dataset.
"""

__all__ = [
    "EXIT_SUCCESS",
    "EXIT_FATAL",
    "EXIT_EMPTY_DATASET",
    "main",
]

EXIT_SUCCESS = 0
EXIT_FATAL = 1
EXIT_EMPTY_DATASET = 2

INVALID_FILE_MESSAGE = "Error al procesar el archivo. Asegúrate de que es un Excel válido (.xlsx)."
EMPTY_FILE_MESSAGE = "El archivo no contiene datos válidos o está vacío."


def _load_env_file(path: Path, override: bool = True) -> None:
    """Load .env with python-dotenv (values override the process environment)."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=override)


def _parse_kinds(value: str) -> list[ReportKind]:
    if value.strip().lower() == "all":
        return list(ReportKind)
    try:
        return [ReportKind.parse(v) for v in value.split(",") if v.strip()]
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="sales-pivot", description="Wholesale sales pivot reports from a spreadsheet export")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--config", type=Path, default=None, help="YAML config (default: config/report.yml)")
    sub = p.add_subparsers(dest="command", required=True)

    rep = sub.add_parser("report", help="Build pivot reports and export them to .xlsx")
    rep.add_argument("input", type=Path)
    rep.add_argument("--kind", type=_parse_kinds, default=list(ReportKind),
                     help="ORDER_COUNT, NET_AMOUNT, PRODUCT_LIST, comma separated, or 'all'")
    rep.add_argument("--output-dir", type=Path, default=None)

    look = sub.add_parser("lookup", help="Search rows by client name and export them")
    look.add_argument("input", type=Path)
    look.add_argument("--client", required=True, help="Case-insensitive client name fragment")
    look.add_argument("--output", type=Path, default=Path("Busqueda por Cliente.xlsx"))

    ins = sub.add_parser("inspect", help="Print detected headers and the first normalized rows")
    ins.add_argument("input", type=Path)
    return p.parse_args(argv)


def _inspect(path: Path) -> int:
    records = read_records(path)
    headers: list[str] = []
    for rec in records:
        headers.extend(h for h in rec if h not in headers)
    print(f"FILE: {path.name} records={len(records)}")
    print(f"  headers={headers}")
    for field_name, header in resolve_headers(headers).items():
        print(f"  {field_name} <- {header if header is not None else '(default)'}")
    for row in normalize_records(records[:3]):
        print("    sample_row=", asdict(row))
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    # None only: an explicit [] must not pick up pytest's own arguments
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    logger = setup_logging(logging.DEBUG if args.debug else logging.INFO)
    logger.debug("debug mode enabled")
    _load_env_file(Path(".env"), override=True)

    config_path, required = resolve_config_path(args.config)
    try:
        cfg = load_config(config_path, required=required)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    error_log = ErrorLogBuffer()
    source: Path = args.input
    try:
        if args.command == "inspect":
            return _inspect(source)
        logger.info(f"Processing file: {source}")
        if args.command == "report":
            result = run_reports(source, args.kind, cfg, args.output_dir)
        else:
            result, _ = run_lookup(source, args.client, args.output)
    except ParseError as e:
        logger.error(f"{INVALID_FILE_MESSAGE} ({e})")
        error_log.record(source.name, "PARSE_ERROR", str(e))
        return EXIT_FATAL
    except EmptyDatasetError as e:
        logger.error(f"{EMPTY_FILE_MESSAGE} ({e})")
        error_log.record(source.name, "EMPTY_DATASET", str(e))
        return EXIT_EMPTY_DATASET
    except ExportError as e:
        logger.error(f"export: {e}")
        error_log.record(source.name, "EXPORT_ERROR", str(e))
        return EXIT_FATAL
    finally:
        log_path = error_log.flush()
        if log_path is not None:
            logger.info(f"error log written: {log_path}")

    log_summary(render_summary_fields(result))
    return EXIT_SUCCESS
