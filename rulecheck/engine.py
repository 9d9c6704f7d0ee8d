"""Per-file analysis loop: lint gate, tokenize, dispatch rules, record results."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional, Sequence

from .errors import NoFilesError, NoRulesError
from .linter import LintChecker
from .progress import ProgressPrinter
from .result import LintError, Report, RuleError
from .rules import Rule
from .tokens import File, tokenize_source
from .utils import read_source_file

logger = logging.getLogger(__name__)

Tokenizer = Callable[[str, str], File]
SourceReader = Callable[[Path], str]


class AnalysisEngine:
    """Run every rule against every file and collect a :class:`Report`.

    Files are processed one at a time in the given order and rules are
    dispatched one at a time in registry order. A rule that raises is
    recorded as a :class:`RuleError` for the current file and the loop moves
    on. Exceptions raised by the progress observer are not caught.
    """

    def __init__(
        self,
        linter: LintChecker,
        tokenizer: Tokenizer = tokenize_source,
        reader: SourceReader = read_source_file,
    ) -> None:
        self.linter = linter
        self.tokenizer = tokenizer
        self.reader = reader
        self.number_of_files = 0

    def run(
        self,
        rules: Sequence[Rule],
        files: Sequence[str],
        observer: Optional[ProgressPrinter] = None,
    ) -> Report:
        if not rules:
            raise NoRulesError("No rules to enforce")
        if not files:
            raise NoFilesError("No files to analyze")

        self.number_of_files = len(files)
        report = Report()

        for path in files:
            self._analyze_file(str(path), rules, report)
            if observer is not None:
                observer.show_progress(str(path), report, self)

        logger.debug(
            "Analyzed %d file(s): %d error(s), %d warning(s)",
            report.number_of_files,
            report.error_count,
            report.warning_count,
        )
        return report

    def _analyze_file(self, path: str, rules: Sequence[Rule], report: Report) -> None:
        report.add_file(path)

        lint = self.linter.check(path)
        if not lint.passed:
            report.add_message(LintError(path, lint.output or "Lint check failed"))
            return

        file = self.tokenizer(path, self.reader(Path(path)))
        for rule in rules:
            self._dispatch(rule, file, report)

    def _dispatch(self, rule: Rule, file: File, report: Report) -> None:
        name = getattr(rule, "name", None) or type(rule).__qualname__
        file.rewind()
        logger.debug("Checking %s with %s", file.path, name)
        try:
            rule.check(file, report)
        except Exception as exc:  # pylint: disable=broad-except
            logger.warning("Rule %s failed on %s: %s", name, file.path, exc)
            logger.debug("Rule failure traceback", exc_info=True)
            report.add_message(RuleError(file.path, f"Rule {name}: {exc}", rule=name))
