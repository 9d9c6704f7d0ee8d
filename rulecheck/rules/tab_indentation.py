"""Report indentation that uses tab characters."""

from __future__ import annotations

import tokenize

from . import Rule, TokenRule, rule_name


class TabIndentationRule(TokenRule):
    """Indent with spaces only."""

    name = rule_name("tab_indentation")

    def run(self) -> None:
        file = self._bound_file()
        token = file.current()
        while token is not None:
            if token.type == tokenize.INDENT and "\t" in token.text:
                self.add_error(f"Tab used for indentation on line {token.line}", token)
            token = file.next()


def get_rule() -> Rule:
    return TabIndentationRule()
