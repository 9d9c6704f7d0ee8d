"""Warn about ``except:`` clauses that catch everything."""

from __future__ import annotations

import tokenize

from . import Rule, TokenRule, rule_name


class BareExceptRule(TokenRule):
    """Flag ``except`` immediately followed by ``:``."""

    name = rule_name("bare_except")

    def run(self) -> None:
        file = self._bound_file()
        token = file.current()
        while token is not None:
            if token.is_a(tokenize.NAME, "except"):
                following = file.peek()
                if following is not None and following.is_a(tokenize.OP, ":"):
                    self.add_warning(f"Bare except clause on line {token.line}", token)
            token = file.next()


def get_rule() -> Rule:
    return BareExceptRule()
