"""Rule protocol and base class for token stream rules."""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from rulecheck.result import ErrorMessage, Report, WarningMessage
from rulecheck.tokens import File, Token

RULE_NAMESPACE = "rulecheck.rules"


@runtime_checkable
class Rule(Protocol):
    """Protocol implemented by all rules.

    ``check`` receives a rewound token stream and the shared report. It must
    not modify ``file`` and may only append messages to ``report``. Raising
    is allowed; the engine turns the exception into a rule error for the
    current file.
    """

    name: str

    def check(self, file: File, report: Report) -> None:
        """Inspect ``file`` and append messages to ``report``."""


class TokenRule:
    """Convenience base class binding the current file and report during ``check``.

    Subclasses implement :meth:`run` and report through :meth:`add_error`
    and :meth:`add_warning`. The bindings are cleared when ``check`` returns
    so no state leaks into the next file.
    """

    name = ""

    def __init__(self) -> None:
        self.file: Optional[File] = None
        self.report: Optional[Report] = None

    def check(self, file: File, report: Report) -> None:
        self.file = file
        self.report = report
        file.rewind()
        try:
            self.run()
        finally:
            self.file = None
            self.report = None

    def run(self) -> None:
        raise NotImplementedError

    def add_error(self, text: str, token: Optional[Token] = None) -> None:
        self._bound_report().add_message(ErrorMessage(self._bound_file().path, text, token))

    def add_warning(self, text: str, token: Optional[Token] = None) -> None:
        self._bound_report().add_message(WarningMessage(self._bound_file().path, text, token))

    def _bound_file(self) -> File:
        if self.file is None:
            raise RuntimeError(f"Rule {self.name} is not checking a file")
        return self.file

    def _bound_report(self) -> Report:
        if self.report is None:
            raise RuntimeError(f"Rule {self.name} is not checking a file")
        return self.report


def rule_name(stem: str) -> str:
    """Return the fully qualified rule name for a rule module stem."""

    return f"{RULE_NAMESPACE}.{stem}"
