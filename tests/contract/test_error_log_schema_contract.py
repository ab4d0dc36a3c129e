from __future__ import annotations

import json
from pathlib import Path

import jsonschema
import pytest

from sales_pivot.cli import main as cli_main

"""Error log JSON Lines schema contract."""

ERROR_LOG_SCHEMA = {
    "type": "object",
    "additionalProperties": False,
    "required": ["timestamp", "file", "error_type", "message"],
    "properties": {
        "timestamp": {"type": "string", "pattern": r"^\d{4}-\d{2}-\d{2}T.*Z$"},
        "file": {"type": "string"},
        "error_type": {"enum": ["PARSE_ERROR", "EMPTY_DATASET", "EXPORT_ERROR"]},
        "message": {"type": "string"},
    },
}


def _log_lines(workdir: Path) -> list[dict]:
    (log,) = list((workdir / "logs").glob("errors-*.log"))
    return [json.loads(line) for line in log.read_text(encoding="utf-8").splitlines()]


def test_parse_error_line_matches_schema(temp_workdir: Path):
    bad = temp_workdir / "data" / "bad.xlsx"
    bad.write_bytes(b"garbage")
    cli_main(["report", str(bad)])
    (record,) = _log_lines(temp_workdir)
    jsonschema.validate(record, ERROR_LOG_SCHEMA)
    assert record["file"] == "bad.xlsx"
    assert record["error_type"] == "PARSE_ERROR"


def test_empty_dataset_line_matches_schema(temp_workdir: Path, workbook_writer):
    path = workbook_writer(temp_workdir / "data" / "vacio.xlsx", [])
    cli_main(["report", str(path)])
    (record,) = _log_lines(temp_workdir)
    jsonschema.validate(record, ERROR_LOG_SCHEMA)
    assert record["error_type"] == "EMPTY_DATASET"


def test_schema_rejects_extra_key():
    record = {
        "timestamp": "2025-09-26T10:12:33Z",
        "file": "ventas.xlsx",
        "error_type": "PARSE_ERROR",
        "message": "cannot read spreadsheet",
        "extra": "not allowed",
    }
    with pytest.raises(jsonschema.ValidationError):
        jsonschema.validate(record, ERROR_LOG_SCHEMA)


def test_successful_run_writes_no_error_log(sales_workbook: Path, temp_workdir: Path):
    cli_main(["report", str(sales_workbook), "--output-dir", "out"])
    assert not (temp_workdir / "logs").exists()
