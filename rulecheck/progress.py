"""Progress observers notified after each analyzed file."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Protocol, TextIO

from .result import Report

if TYPE_CHECKING:
    from .engine import AnalysisEngine


class ProgressPrinter(Protocol):
    """Observer called exactly once per file, after the file is processed."""

    def show_progress(self, path: str, report: Report, engine: "AnalysisEngine") -> None:
        """Render progress for ``path``."""


class DotProgressPrinter:
    """Print ``E``, ``W`` or ``.`` per file, wrapping every ``width`` files."""

    def __init__(self, stream: TextIO | None = None, width: int = 60) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.width = width
        self._count = 0
        self._engine: "AnalysisEngine | None" = None

    def show_progress(self, path: str, report: Report, engine: "AnalysisEngine") -> None:
        if report.errors(path):
            marker = "E"
        elif report.warnings(path):
            marker = "W"
        else:
            marker = "."
        if engine is not self._engine:
            self._engine = engine
            self._count = 0
        self._count += 1
        self.stream.write(marker)

        total = engine.number_of_files
        if self._count == total or self._count % self.width == 0:
            self.stream.write(f" {self._count} / {total}\n")
        if self._count == total:
            self._count = 0
        self.stream.flush()
