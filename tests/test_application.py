import sys

import pytest

from conftest import FAILING_RULE
from rulecheck.application import Application
from rulecheck.config import AnalyzerConfig
from rulecheck.errors import ConfigurationError, NoFilesError, NoRulesError, NotFoundError
from rulecheck.result import LintError, RuleError


def _custom_only(rule_dir):
    app = Application()
    app.set_enable_builtin_rules(False)
    app.add_rule_path(str(rule_dir))
    return app


def test_valid_and_invalid_files(tmp_path, write_rule, write_source):
    write_rule(tmp_path / "rules", "one_warning")
    project = tmp_path / "project"
    a = write_source(project / "a.py", "x = 1\n")
    b = write_source(project / "b.py", "def broken(:\n")

    app = _custom_only(tmp_path / "rules")
    report = app.run(sys.executable, str(project))

    assert app.number_of_files == 2
    assert report.files == [str(a), str(b)]
    assert len(report.warnings(str(a))) == 1
    assert report.errors(str(a)) == []
    b_messages = report.messages(str(b))
    assert len(b_messages) == 1
    assert isinstance(b_messages[0], LintError)
    assert report.was_analyzed(str(a)) and report.was_analyzed(str(b))


def test_failing_custom_rule_on_every_file(tmp_path, write_rule, write_source):
    write_rule(tmp_path / "rules", "boom_rule", template=FAILING_RULE, text="boom")
    project = tmp_path / "project"
    for name in ("one.py", "two.py", "pkg/three.py"):
        write_source(project / name, "y = 2\n")

    report = _custom_only(tmp_path / "rules").run(sys.executable, str(project))

    assert report.number_of_files == 3
    for path in report.files:
        messages = report.messages(path)
        assert len(messages) == 1
        assert isinstance(messages[0], RuleError)
        assert "rulecheck.rules.boom_rule" in messages[0].text
        assert "boom" in messages[0].text


def test_builtin_rules_run_on_real_source(tmp_path, write_source):
    source = write_source(
        tmp_path / "module.py",
        """
        try:
            pass
        except:  # TODO narrow this
            pass
        """,
    )

    report = Application().run(sys.executable, str(source))

    texts = [message.text for message in report.warnings(str(source))]
    assert "Bare except clause on line 3" in texts
    assert "TODO comment on line 3" in texts
    assert not report.has_errors()


@pytest.mark.parametrize("validator, path", [("", "x"), ("  ", "x"), ("python", ""), ("python", "   ")])
def test_blank_parameters_are_rejected(validator, path):
    with pytest.raises(ConfigurationError):
        Application().run(validator, path)


def test_missing_input_path(tmp_path):
    with pytest.raises(NotFoundError):
        Application().run(sys.executable, str(tmp_path / "missing"))


def test_no_files_found(tmp_path):
    with pytest.raises(NoFilesError):
        Application().run(sys.executable, str(tmp_path))


def test_no_rules_loaded(tmp_path, write_source):
    write_source(tmp_path / "a.py", "x = 1\n")
    app = Application()
    app.set_enable_builtin_rules(False)

    with pytest.raises(NoRulesError):
        app.run(sys.executable, str(tmp_path))


def test_non_boolean_flag_is_rejected():
    with pytest.raises(ConfigurationError):
        Application().set_enable_builtin_rules(1)


def test_rule_paths_and_disabled_rules(tmp_path, write_source):
    rules_dir = tmp_path / "rules"
    rules_dir.mkdir()
    source = write_source(tmp_path / "src" / "a.py", "x = 1  # TODO\n")
    app = Application()
    app.add_rule_path(str(rules_dir))
    app.add_rule_path(str(rules_dir))
    app.disable_rule("rulecheck.rules.todo_comment")

    assert app.rule_paths == [str(rules_dir)]
    assert app.number_of_files == 0

    report = app.run(sys.executable, str(source))

    assert report.messages(str(source)) == []
    assert app.number_of_files == 1
    assert "rulecheck.rules.todo_comment" not in [rule.name for rule in app.rules]


def test_from_config(tmp_path, write_rule):
    write_rule(tmp_path, "cfg_rule")
    config = AnalyzerConfig(
        builtin_rules=False,
        rule_paths=[str(tmp_path)],
        disabled_rules=["rulecheck.rules.line_length"],
        extensions=[".py", ".pyi"],
    )

    app = Application.from_config(config)

    assert app.rule_paths == [str(tmp_path)]
    assert app.registry.enable_builtin is False
    assert app.extensions == (".py", ".pyi")


def test_number_of_files_resets_between_runs(tmp_path, write_source):
    project = tmp_path / "project"
    write_source(project / "a.py", "x = 1\n")
    write_source(project / "b.py", "y = 2\n")
    seen = []

    class Observer:
        def show_progress(self, path, report, engine):
            seen.append(app.number_of_files)

    app = Application()
    app.register_progress_printer(Observer())
    app.run(sys.executable, str(project))
    assert app.number_of_files == 2

    with pytest.raises(NotFoundError):
        app.run(sys.executable, str(tmp_path / "missing"))
    assert app.number_of_files == 0

    app.run(sys.executable, str(project / "a.py"))
    assert app.number_of_files == 1
    assert seen == [2, 2, 1]
