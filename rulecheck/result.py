"""Core result data structures for the analyzer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Dict, List, Optional

from .severity import Severity
from .tokens import Token


@dataclass(frozen=True)
class Message:
    """A single diagnostic tied to a file and, optionally, a token."""

    path: str
    text: str
    token: Optional[Token] = None

    severity: ClassVar[Severity] = Severity.ERROR
    kind: ClassVar[str] = "error"

    @property
    def line(self) -> Optional[int]:
        return self.token.line if self.token is not None else None

    @property
    def column(self) -> Optional[int]:
        return self.token.column if self.token is not None else None

    def to_dict(self) -> Dict[str, object]:
        return {
            "kind": self.kind,
            "severity": self.severity.value,
            "path": self.path,
            "line": self.line,
            "column": self.column,
            "text": self.text,
        }


@dataclass(frozen=True)
class ErrorMessage(Message):
    """An error a rule reports about the analyzed code."""


@dataclass(frozen=True)
class WarningMessage(Message):
    """A warning a rule reports about the analyzed code."""

    severity: ClassVar[Severity] = Severity.WARNING
    kind: ClassVar[str] = "warning"


@dataclass(frozen=True)
class LintError(Message):
    """The file failed the syntax check; ``text`` holds the validator output."""

    kind: ClassVar[str] = "lint"


@dataclass(frozen=True)
class RuleError(Message):
    """A rule raised while checking the file."""

    rule: str = ""

    kind: ClassVar[str] = "rule"

    def to_dict(self) -> Dict[str, object]:
        data = super().to_dict()
        data["rule"] = self.rule
        return data


class Report:
    """Collect messages per analyzed file.

    A file is recorded with :meth:`add_file` before any of its messages, so
    a file with an empty message list was analyzed and found clean, while a
    missing file was never visited.
    """

    def __init__(self) -> None:
        self._messages: Dict[str, List[Message]] = {}

    def add_file(self, path: str) -> None:
        self._messages.setdefault(str(path), [])

    def add_message(self, message: Message) -> None:
        try:
            self._messages[str(message.path)].append(message)
        except KeyError:
            raise ValueError(f"File {message.path} has not been added to the report") from None

    @property
    def files(self) -> List[str]:
        return list(self._messages)

    @property
    def number_of_files(self) -> int:
        return len(self._messages)

    def was_analyzed(self, path: str) -> bool:
        return str(path) in self._messages

    def messages(self, path: str) -> List[Message]:
        return list(self._messages.get(str(path), []))

    def errors(self, path: str) -> List[Message]:
        return [m for m in self.messages(path) if m.severity is Severity.ERROR]

    def warnings(self, path: str) -> List[Message]:
        return [m for m in self.messages(path) if m.severity is Severity.WARNING]

    def all_messages(self) -> List[Message]:
        return [message for messages in self._messages.values() for message in messages]

    @property
    def error_count(self) -> int:
        return sum(1 for m in self.all_messages() if m.severity is Severity.ERROR)

    @property
    def warning_count(self) -> int:
        return sum(1 for m in self.all_messages() if m.severity is Severity.WARNING)

    def has_errors(self) -> bool:
        return self.error_count > 0

    def has_warnings(self) -> bool:
        return self.warning_count > 0

    @property
    def passed(self) -> bool:
        return not self.has_errors()

    def exit_code(self) -> int:
        if self.has_errors():
            return Severity.ERROR.exit_priority
        if self.has_warnings():
            return Severity.WARNING.exit_priority
        return 0

    def to_dict(self) -> Dict[str, object]:
        return {
            "summary": {
                "files": self.number_of_files,
                "errors": self.error_count,
                "warnings": self.warning_count,
            },
            "files": {
                path: [message.to_dict() for message in messages]
                for path, messages in self._messages.items()
            },
            "passed": self.passed,
        }


def format_summary_table(report: Report, max_messages: int = 20) -> str:
    """Create a human-readable summary table for console output."""

    lines: List[str] = []
    lines.append("Analysis Summary")
    lines.append("=" * 40)
    header = f"{'Severity':<10} | {'Count':>5}"
    lines.append(header)
    lines.append("-" * len(header))
    lines.append(f"{Severity.ERROR.value:<10} | {report.error_count:>5}")
    lines.append(f"{Severity.WARNING.value:<10} | {report.warning_count:>5}")
    lines.append("-" * len(header))
    status = "PASS" if report.passed else "FAIL"
    lines.append(f"Status    : {status}")
    lines.append(f"Files     : {report.number_of_files}")

    messages = report.all_messages()
    if messages:
        lines.append("")
        lines.append("Messages")
        lines.append("-" * 40)
        for message in messages[:max_messages]:
            location = message.path if message.line is None else f"{message.path}:{message.line}:{message.column}"
            lines.append(f"[{message.severity.value}] {location} ({message.kind})")
            lines.append(f"  {message.text}")
        remaining = len(messages) - max_messages
        if remaining > 0:
            lines.append(f"... {remaining} more")
    return "\n".join(lines)
