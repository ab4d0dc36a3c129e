from __future__ import annotations

import json
from pathlib import Path

from sales_pivot.logging.error_log import ErrorLogBuffer, ErrorRecord


def test_error_record_creation_and_json_line():
    rec = ErrorRecord.create(file="ventas.xlsx", error_type="PARSE_ERROR", message="cannot read spreadsheet")
    data = json.loads(rec.to_json_line())
    assert data["file"] == "ventas.xlsx"
    assert data["error_type"] == "PARSE_ERROR"
    assert data["timestamp"].endswith("Z")
    assert set(data.keys()) == {"timestamp", "file", "error_type", "message"}


def test_json_line_keeps_non_ascii():
    rec = ErrorRecord.create("Búsqueda.xlsx", "EXPORT_ERROR", "ñandú")
    assert "Búsqueda.xlsx" in rec.to_json_line()


def test_error_log_buffer_flush(temp_workdir: Path):
    buf = ErrorLogBuffer()
    buf.record("a.xlsx", "PARSE_ERROR", "bad zip")
    buf.append(ErrorRecord.create("b.xlsx", "EMPTY_DATASET", "no rows"))
    path = buf.flush()
    assert path is not None and path.exists()
    assert path.parent.name == "logs"
    lines = path.read_text(encoding="utf-8").strip().splitlines()
    assert [json.loads(line)["error_type"] for line in lines] == ["PARSE_ERROR", "EMPTY_DATASET"]
    assert len(buf) == 0


def test_error_log_buffer_empty_flush_creates_nothing(temp_workdir: Path):
    buf = ErrorLogBuffer()
    assert buf.flush() is None
    assert not (temp_workdir / "logs").exists()


def test_error_log_buffer_appends_on_second_flush(tmp_path: Path):
    buf = ErrorLogBuffer(logs_dir=tmp_path / "custom")
    buf.record("a.xlsx", "PARSE_ERROR", "one")
    first = buf.flush()
    buf.record("a.xlsx", "PARSE_ERROR", "two")
    second = buf.flush()
    assert first == second
    assert len(second.read_text(encoding="utf-8").splitlines()) == 2
