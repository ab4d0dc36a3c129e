from __future__ import annotations

import sys
from typing import Any

from tqdm import tqdm
from tqdm.std import tqdm as TqdmType

from ..models.report import ReportKind

"""Progress display across report kinds (tqdm, TTY only).

In non-TTY environments (CI, pipes) the bar is disabled so no ANSI control
sequences reach the log output.
"""

__all__ = [
    "ProgressTracker",
    "is_tty_enabled",
]


def is_tty_enabled() -> bool:
    return sys.stdout.isatty()


class ProgressTracker:
    """Progress tracker over the reports produced in one run."""

    def __init__(self, total_reports: int, *, description: str = "Building reports") -> None:
        self.total_reports = total_reports
        self.description = description
        self.current_report = 0

        self.enabled = is_tty_enabled()
        self.pbar: TqdmType[Any] | None
        if self.enabled:
            self.pbar = tqdm(
                total=total_reports,
                desc=description,
                unit="report",
                disable=False,
                leave=True,
                position=0,
                ncols=80,
                ascii=True,
            )
        else:
            self.pbar = None

    def start_report(self, kind: ReportKind) -> None:
        self.current_report += 1
        if self.enabled and self.pbar is not None:
            self.pbar.set_description(f"{self.description} ({kind.title})")

    def finish_report(self, **postfix: Any) -> None:
        if self.enabled and self.pbar is not None:
            if postfix:
                self.pbar.set_postfix(**postfix)
            self.pbar.update(1)
            self.pbar.set_description(self.description)

    def close(self) -> None:
        if self.enabled and self.pbar is not None:
            self.pbar.close()
            self.pbar = None

    def __enter__(self) -> ProgressTracker:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
