import textwrap
from pathlib import Path

import pytest

WARNING_RULE = '''
from rulecheck.rules import TokenRule, rule_name


class {cls}(TokenRule):
    name = rule_name("{stem}")

    def run(self):
        self.add_warning("{text}", self.file.current())


def get_rule():
    return {cls}()
'''

FAILING_RULE = '''
from rulecheck.rules import rule_name


class {cls}:
    name = rule_name("{stem}")

    def check(self, file, report):
        raise RuntimeError("{text}")


def get_rule():
    return {cls}()
'''


def _class_name(stem: str) -> str:
    return "".join(part.title() for part in stem.split("_")) + "Rule"


@pytest.fixture
def write_rule():
    """Write a custom rule module and return its path."""

    def _write(directory: Path, stem: str, template: str = WARNING_RULE, text: str = "custom warning") -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / f"{stem}.py"
        path.write_text(template.format(cls=_class_name(stem), stem=stem, text=text), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_source():
    """Write a Python source file with dedented contents and return its path."""

    def _write(path: Path, contents: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(contents).lstrip("\n"), encoding="utf-8")
        return path

    return _write
