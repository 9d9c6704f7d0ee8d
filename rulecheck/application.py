"""Top-level entry point wiring linter, registry, discovery and engine."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from .config import AnalyzerConfig
from .discovery import DEFAULT_EXTENSIONS, list_files
from .engine import AnalysisEngine
from .errors import ConfigurationError
from .linter import Linter
from .progress import ProgressPrinter
from .registry import RuleRegistry
from .result import Report
from .rules import Rule

logger = logging.getLogger(__name__)


class Application:
    """Configure and run one analysis.

    Registry settings (built-in toggle, extra rule paths, disabled names) are
    validated as they are set, so a bad configuration fails before any file
    is touched.
    """

    def __init__(
        self,
        registry: Optional[RuleRegistry] = None,
        extensions: Iterable[str] = DEFAULT_EXTENSIONS,
        lint_timeout: Optional[float] = None,
    ) -> None:
        self.registry = registry if registry is not None else RuleRegistry()
        self.extensions = tuple(extensions)
        self.lint_timeout = lint_timeout
        self._progress_printer: Optional[ProgressPrinter] = None
        self._engine: Optional[AnalysisEngine] = None

    @classmethod
    def from_config(cls, config: AnalyzerConfig) -> "Application":
        config.validate()
        app = cls(extensions=config.extensions, lint_timeout=config.lint_timeout)
        app.set_enable_builtin_rules(config.builtin_rules)
        for path in config.rule_paths:
            app.add_rule_path(path)
        for name in config.disabled_rules:
            app.disable_rule(name)
        return app

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------
    def set_enable_builtin_rules(self, flag: bool) -> None:
        self.registry.enable_builtin = flag

    def add_rule_path(self, path: str) -> None:
        self.registry.add_path(path)

    def disable_rule(self, name: str) -> None:
        self.registry.disable(name)

    def register_progress_printer(self, printer: ProgressPrinter) -> None:
        self._progress_printer = printer

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------
    @property
    def rule_paths(self) -> List[str]:
        return self.registry.paths

    @property
    def rules(self) -> List[Rule]:
        return list(self.registry.rules.values())

    @property
    def number_of_files(self) -> int:
        """Number of files in the current run; 0 before :meth:`run` resolves them."""

        if self._engine is None:
            return 0
        return self._engine.number_of_files

    # ------------------------------------------------------------------
    # Run
    # ------------------------------------------------------------------
    def run(self, validator_path: str, input_path: str) -> Report:
        """Analyze ``input_path`` and return the report for every file found."""

        self._engine = None
        if not validator_path or not str(validator_path).strip():
            raise ConfigurationError("No path to the validator executable specified")
        if not input_path or not str(input_path).strip():
            raise ConfigurationError("No file or directory to analyze")

        linter = Linter(validator_path, timeout=self.lint_timeout)
        rules = self.registry.load()
        files = list_files(input_path, extensions=self.extensions)
        logger.info("Analyzing %d file(s) with %d rule(s)", len(files), len(rules))

        self._engine = AnalysisEngine(linter)
        return self._engine.run(rules, files, observer=self._progress_printer)
