from __future__ import annotations

from ..models.run_result import RunResult

"""SUMMARY line rendering for report runs.

Format:
SUMMARY file={name} rows={total} kept={kept} reports={n} elapsed_sec={elapsed}
"""

__all__ = [
    "format_seconds",
    "render_summary_fields",
    "render_summary_line",
]


def format_seconds(value: float) -> str:
    """Render seconds without scientific notation or a trailing ``.0``."""
    if value == 0:
        return "0"
    if value == int(value):
        return str(int(value))
    if value < 0.01:
        return f"{value:.6f}".rstrip("0").rstrip(".")
    return f"{value:.3f}".rstrip("0").rstrip(".")


def render_summary_fields(result: RunResult) -> str:
    return (
        f"file={result.file_name} "
        f"rows={result.total_rows} "
        f"kept={result.kept_rows} "
        f"reports={len(result.reports)} "
        f"elapsed_sec={format_seconds(result.elapsed_seconds)}"
    )


def render_summary_line(result: RunResult) -> str:
    """Render a SUMMARY line from a RunResult.

    Examples:
        >>> result = RunResult(file_name="ventas.xlsx", total_rows=10, kept_rows=7,
        ...                    elapsed_seconds=2.0)
        >>> render_summary_line(result)
        'SUMMARY file=ventas.xlsx rows=10 kept=7 reports=0 elapsed_sec=2'
    """
    return f"SUMMARY {render_summary_fields(result)}"
