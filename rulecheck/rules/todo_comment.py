"""Warn about unresolved TODO/FIXME/XXX markers in comments."""

from __future__ import annotations

import re
import tokenize

from . import Rule, TokenRule, rule_name

MARKER_PATTERN = re.compile(r"\b(TODO|FIXME|XXX)\b")


class TodoCommentRule(TokenRule):
    name = rule_name("todo_comment")

    def run(self) -> None:
        for token in self._bound_file():
            if token.type != tokenize.COMMENT:
                continue
            match = MARKER_PATTERN.search(token.text)
            if match:
                self.add_warning(f"{match.group(1)} comment on line {token.line}", token)


def get_rule() -> Rule:
    return TodoCommentRule()
