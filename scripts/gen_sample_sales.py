#!/usr/bin/env python3
"""Synthetic sales export generator for manual runs and perf checks.

Produces a single-sheet workbook with the column headers of the ERP sales
export (row 1 = headers, row 2+ = document lines). Documents span 1-4 item
lines, a share of them are closed and a share belong to non-wholesale groups
so that the report filter has something to drop.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

import numpy as np
import pandas as pd

GROUPS = ["MAYORISTAS A", "MAYORISTAS B", "MAYORISTAS C", "MAYORISTAS D", "MAYORISTAS E", "MINORISTAS"]
STATUSES = ["Abierto", "Abierto", "Abierto", "Cerrado", "Cerrado Parcial"]
DISTRICTS = ["Lima", "Callao", "Arequipa", "Trujillo", "Cusco", "Piura", "Chiclayo", "Ica"]
REPS = ["Ana Torres", "Juan Perez", "Luis Ramos", "Maria Quispe", "Rosa Flores"]
CLIENTS = ["Bodega San Martin", "Comercial Andina", "Distribuidora Norte", "Mercado Central", "Inversiones Sur"]


def generate_sales_lines(rows: int, seed: int = 42) -> pd.DataFrame:
    """Generate ``rows`` document lines with realistic repetition of doc numbers."""
    rng = np.random.default_rng(seed)
    records: list[dict[str, object]] = []
    doc_num = 10_000
    while len(records) < rows:
        doc_num += 1
        lines = int(rng.integers(1, 5))
        district = rng.choice(DISTRICTS)
        rep = rng.choice(REPS)
        group = rng.choice(GROUPS)
        status = rng.choice(STATUSES)
        client = rng.choice(CLIENTS)
        total = float(np.round(rng.uniform(50, 5000), 2))
        for _ in range(lines):
            item = int(rng.integers(1, 200))
            records.append({
                "Número de documento": doc_num,
                "Estado": status,
                "Nombre de Grupo": group,
                "Condado": district,
                "Nombre de empleado del departamento de ventas": rep,
                "Total del documento": total,
                "Número de artículo": f"ART-{item:04d}",
                "Descripción artículo/serv.": f"Producto {item}",
                "Cantidad": int(rng.integers(1, 50)),
                "Nombre de cliente/proveedor": client,
                "Destino": f"{district} - Almacen {int(rng.integers(1, 4))}",
            })
            if len(records) >= rows:
                break
    return pd.DataFrame.from_records(records)


def create_sales_file(output_path: Path, rows: int, seed: int = 42) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    df = generate_sales_lines(rows, seed)
    df.to_excel(output_path, sheet_name="Ventas", index=False, engine="openpyxl")
    print(f"Created sales export: {output_path}")
    print(f"  Lines: {len(df)}")
    print(f"  Documents: {df['Número de documento'].nunique()}")


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Generate a synthetic sales export workbook",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s ventas.xlsx
  %(prog)s big.xlsx --rows 100000 --seed 7
        """,
    )
    parser.add_argument("output", type=Path, help="Output Excel file path")
    parser.add_argument("--rows", type=int, default=5_000, help="Number of document lines (default: 5,000)")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    args = parser.parse_args()

    if args.rows <= 0:
        print("Error: --rows must be positive", file=sys.stderr)
        return 1
    create_sales_file(args.output, args.rows, args.seed)
    return 0


if __name__ == "__main__":
    sys.exit(main())
