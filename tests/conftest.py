# Shared pytest fixtures
from __future__ import annotations

import tempfile
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pandas as pd
import pytest

from sales_pivot.logging.init import reset_logging
from sales_pivot.models.processed_row import ProcessedRow

# Header row of the ERP sales export
EXPORT_HEADERS = [
    "Número de documento",
    "Estado",
    "Nombre de Grupo",
    "Condado",
    "Nombre de empleado del departamento de ventas",
    "Total del documento",
    "Número de artículo",
    "Descripción artículo/serv.",
    "Cantidad",
    "Nombre de cliente/proveedor",
    "Destino",
]


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        monkeypatch.chdir(p)
        # recorded so anything loaded from .env during the test is undone
        monkeypatch.setenv("SALES_PIVOT_CONFIG", "")
        monkeypatch.delenv("SALES_PIVOT_CONFIG")
        yield p


@pytest.fixture(autouse=True)
def clean_logging():
    reset_logging()
    yield
    reset_logging()


def make_row(**overrides: Any) -> ProcessedRow:
    """ProcessedRow that passes the default filter rules unless overridden."""
    base: dict[str, Any] = {
        "doc_id": "1",
        "status": "Abierto",
        "group_name": "MAYORISTAS B",
        "district": "Lima",
        "sales_rep": "Juan",
        "total_amount": 118.0,
        "item_id": "ART-1",
        "item_desc": "Producto 1",
        "quantity": 1,
        "client_name": "Bodega San Martin",
        "destination": "Lima - Almacen 1",
    }
    base.update(overrides)
    return ProcessedRow(**base)


def write_workbook(path: Path, records: list[dict[str, Any]], sheet_name: str = "Ventas") -> Path:
    """Write records (header -> value) to a single-sheet workbook."""
    path.parent.mkdir(parents=True, exist_ok=True)
    df = pd.DataFrame.from_records(records) if records else pd.DataFrame(columns=EXPORT_HEADERS)
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        df.to_excel(writer, sheet_name=sheet_name, index=False)
    return path


@pytest.fixture()
def row_factory() -> Callable[..., ProcessedRow]:
    return make_row


@pytest.fixture()
def scenario_records() -> list[dict[str, Any]]:
    """Three raw lines: doc 1 twice (Juan, MAYORISTAS B) and doc 2 in an excluded group."""
    def rec(doc, rep, group, total, item, qty):
        return {
            "Número de documento": doc,
            "Estado": "Abierto",
            "Nombre de Grupo": group,
            "Condado": "Lima",
            "Nombre de empleado del departamento de ventas": rep,
            "Total del documento": total,
            "Número de artículo": item,
            "Descripción artículo/serv.": f"Producto {item}",
            "Cantidad": qty,
            "Nombre de cliente/proveedor": "Bodega San Martin",
            "Destino": "Lima - Almacen 1",
        }
    return [
        rec("1", "Juan", "MAYORISTAS B", 118, "ART-1", 2),
        rec("1", "Juan", "MAYORISTAS B", 50, "ART-1", 1),
        rec("2", "Ana", "MAYORISTAS A", 200, "ART-2", 4),
    ]


@pytest.fixture()
def sales_workbook(temp_workdir: Path, scenario_records) -> Path:
    return write_workbook(temp_workdir / "data" / "ventas.xlsx", scenario_records)


@pytest.fixture()
def sample_config_yaml() -> str:
    return """filters:
  excluded_status: Cerrado
  allowed_groups:
    - MAYORISTAS B
    - MAYORISTAS C
net_amount:
  tax_divisor: 1.18
output_directory: ./out
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "report.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def workbook_writer() -> Callable[..., Path]:
    return write_workbook
