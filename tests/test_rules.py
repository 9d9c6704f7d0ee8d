import pytest

from rulecheck.result import Report
from rulecheck.rules import TokenRule
from rulecheck.rules.bare_except import BareExceptRule
from rulecheck.rules.line_length import LineLengthRule
from rulecheck.rules.tab_indentation import TabIndentationRule
from rulecheck.rules.todo_comment import TodoCommentRule
from rulecheck.rules.trailing_whitespace import TrailingWhitespaceRule
from rulecheck.tokens import tokenize_source


def _check(rule, source, path="test.py"):
    file = tokenize_source(path, source)
    report = Report()
    report.add_file(path)
    rule.check(file, report)
    return report


def test_add_warning_attaches_token():
    class FirstTokenRule(TokenRule):
        name = "rulecheck.rules.first_token"

        def run(self):
            self.add_warning("first", self.file.current())

    file = tokenize_source("test.py", "print(True)\n")
    report = Report()
    report.add_file("test.py")

    FirstTokenRule().check(file, report)

    assert report.has_warnings()
    assert report.warnings("test.py")[0].token == file[0]


def test_token_rule_releases_file_after_check():
    rule = TodoCommentRule()
    _check(rule, "x = 1\n")

    assert rule.file is None
    assert rule.report is None
    with pytest.raises(RuntimeError):
        rule.add_warning("outside a check")


def test_line_length_flags_long_lines():
    source = "x = 1\n" + "y = '" + "a" * 130 + "'\n"
    report = _check(LineLengthRule(), source)

    warnings = report.warnings("test.py")
    assert len(warnings) == 1
    assert warnings[0].line == 2


def test_line_length_honors_custom_limit():
    report = _check(LineLengthRule(max_length=4), "x = 1\n")

    assert len(report.warnings("test.py")) == 1


def test_trailing_whitespace():
    report = _check(TrailingWhitespaceRule(), "x = 1   \ny = 2\n")

    warnings = report.warnings("test.py")
    assert [w.text for w in warnings] == ["Trailing whitespace on line 1"]


def test_tab_indentation_is_an_error():
    report = _check(TabIndentationRule(), "if True:\n\tx = 1\n")

    errors = report.errors("test.py")
    assert len(errors) == 1
    assert errors[0].line == 2


def test_space_indentation_is_clean():
    report = _check(TabIndentationRule(), "if True:\n    x = 1\n")

    assert report.messages("test.py") == []


def test_todo_comment():
    report = _check(TodoCommentRule(), "x = 1  # TODO: remove\n# plain comment\n")

    assert [w.text for w in report.warnings("test.py")] == ["TODO comment on line 1"]


def test_bare_except():
    source = "try:\n    pass\nexcept:\n    pass\ntry:\n    pass\nexcept ValueError:\n    pass\n"
    report = _check(BareExceptRule(), source)

    warnings = report.warnings("test.py")
    assert len(warnings) == 1
    assert warnings[0].line == 3


def test_form_feed_in_comment_does_not_shift_line_numbers():
    report = _check(TrailingWhitespaceRule(), "# a\x0cb\nx = 1 \n")

    warnings = report.warnings("test.py")
    assert [w.text for w in warnings] == ["Trailing whitespace on line 2"]
    assert warnings[0].token.text == "x"


def test_line_length_counts_only_newlines():
    source = "# " + "\u2028" * 10 + "\n" + "y = '" + "a" * 130 + "'\n"
    report = _check(LineLengthRule(), source)

    assert [w.line for w in report.warnings("test.py")] == [2]
