"""Warn about lines ending in whitespace."""

from __future__ import annotations

from . import Rule, TokenRule, rule_name


class TrailingWhitespaceRule(TokenRule):
    name = rule_name("trailing_whitespace")

    def run(self) -> None:
        file = self._bound_file()
        for lineno, line in enumerate(file.lines, start=1):
            if line != line.rstrip(" \t"):
                self.add_warning(f"Trailing whitespace on line {lineno}", file.first_token_on_line(lineno))


def get_rule() -> Rule:
    return TrailingWhitespaceRule()
