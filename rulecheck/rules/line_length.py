"""Warn about physical lines that exceed the maximum length."""

from __future__ import annotations

from . import Rule, TokenRule, rule_name

MAX_LINE_LENGTH = 120


class LineLengthRule(TokenRule):
    """Flag lines longer than ``max_length`` characters."""

    name = rule_name("line_length")

    def __init__(self, max_length: int = MAX_LINE_LENGTH) -> None:
        super().__init__()
        self.max_length = max_length

    def run(self) -> None:
        file = self._bound_file()
        for lineno, line in enumerate(file.lines, start=1):
            if len(line) > self.max_length:
                self.add_warning(
                    f"Line {lineno} is {len(line)} characters long (maximum is {self.max_length})",
                    file.first_token_on_line(lineno),
                )


def get_rule() -> Rule:
    return LineLengthRule()
