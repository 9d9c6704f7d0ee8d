"""Syntax pre-check that gates rule dispatch."""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path
from typing import NamedTuple, Optional, Protocol

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

# Compile without writing bytecode next to the analyzed file.
COMPILE_SCRIPT = "import sys; compile(open(sys.argv[1], 'rb').read(), sys.argv[1], 'exec')"


class LintResult(NamedTuple):
    passed: bool
    output: Optional[str] = None


class LintChecker(Protocol):
    """Anything that can tell whether a file is syntactically valid."""

    def check(self, path: str) -> LintResult:
        """Validate ``path`` and return the outcome with any raw diagnostics."""


class Linter:
    """Run an external Python interpreter as the syntax validator."""

    def __init__(self, executable: str, timeout: Optional[float] = None) -> None:
        self.executable = self._resolve(executable)
        self.timeout = timeout

    @staticmethod
    def _resolve(executable: str) -> str:
        if not executable or not executable.strip():
            raise ConfigurationError("No path to the validator executable specified")
        if Path(executable).is_file():
            return executable
        found = shutil.which(executable)
        if found is None:
            raise ConfigurationError(f"Validator executable {executable} not found")
        return found

    def check(self, path: str) -> LintResult:
        command = [self.executable, "-c", COMPILE_SCRIPT, str(path)]
        try:
            completed = subprocess.run(
                command,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired:
            logger.warning("Lint check of %s timed out after %ss", path, self.timeout)
            return LintResult(False, f"Lint check timed out after {self.timeout}s")

        output = (completed.stderr or completed.stdout).strip() or None
        passed = completed.returncode == 0
        logger.debug("Lint check of %s %s", path, "passed" if passed else "failed")
        return LintResult(passed, output)
