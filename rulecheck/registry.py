"""Load built-in and custom rules."""

from __future__ import annotations

import importlib.util
import logging
import re
import sys
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Mapping, Optional

from .discovery import list_files
from .errors import ConfigurationError, DuplicateRuleError, NotFoundError, UnknownRuleError
from .rules import RULE_NAMESPACE, Rule, rule_name
from .rules import bare_except, line_length, tab_indentation, todo_comment, trailing_whitespace

logger = logging.getLogger(__name__)

RuleFactory = Callable[[], Rule]

BUILTIN_RULE_PATH = Path(__file__).parent / "rules"

BUILTIN_RULES: Mapping[str, RuleFactory] = {
    "bare_except": bare_except.get_rule,
    "line_length": line_length.get_rule,
    "tab_indentation": tab_indentation.get_rule,
    "todo_comment": todo_comment.get_rule,
    "trailing_whitespace": trailing_whitespace.get_rule,
}

RULE_NAME_PATTERN = re.compile(rf"^{re.escape(RULE_NAMESPACE)}\.[A-Za-z_][A-Za-z0-9_]*$")
CUSTOM_MODULE_PREFIX = "rulecheck_custom_rules"


def validate_rule_name(name: str) -> str:
    if not isinstance(name, str) or not RULE_NAME_PATTERN.match(name):
        raise ConfigurationError(f"Invalid rule name {name!r}; expected {RULE_NAMESPACE}.<name>")
    return name


def _rule_files(path: Path) -> List[Path]:
    return [Path(found) for found in list_files(path) if not Path(found).stem.startswith("_")]


def _load_custom_factory(rule_file: Path, index: int) -> RuleFactory:
    module_name = f"{CUSTOM_MODULE_PREFIX}.p{index}.{rule_file.stem}"
    spec = importlib.util.spec_from_file_location(module_name, rule_file)
    if spec is None or spec.loader is None:
        raise ConfigurationError(f"Cannot load rule module {rule_file}")
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as exc:
        del sys.modules[module_name]
        raise ConfigurationError(f"Failed to load rule module {rule_file}: {exc}") from exc

    factory = getattr(module, "get_rule", None)
    if not callable(factory):
        raise UnknownRuleError(f"Rule module {rule_file} does not define get_rule()")
    return factory


def _instantiate(name: str, factory: RuleFactory, origin: Path) -> Rule:
    try:
        rule = factory()
    except Exception as exc:
        raise ConfigurationError(f"Rule factory in {origin} failed: {exc}") from exc
    if not isinstance(rule, Rule):
        raise ConfigurationError(f"{origin} did not produce a rule with name and check()")
    if rule.name != name:
        raise ConfigurationError(f"{origin} produced rule {rule.name!r}, expected {name!r}")
    return rule


def load_rules(
    builtin_enabled: bool,
    extra_paths: Iterable[str],
    disabled_names: Iterable[str],
    builtin_path: Path = BUILTIN_RULE_PATH,
    builtin_table: Mapping[str, RuleFactory] = BUILTIN_RULES,
) -> List[Rule]:
    """Return the enabled rules: built-ins first, then each extra path in order."""

    disabled = {validate_rule_name(name) for name in disabled_names}
    loaded: Dict[str, Rule] = {}

    def _add(name: str, rule: Rule) -> None:
        if name in loaded:
            raise DuplicateRuleError(f"Rule {name} is defined more than once")
        loaded[name] = rule
        logger.debug("Loaded rule %s", name)

    if builtin_enabled:
        for rule_file in _rule_files(builtin_path):
            name = rule_name(rule_file.stem)
            if name in disabled:
                logger.debug("Skipping disabled rule %s", name)
                continue
            factory = builtin_table.get(rule_file.stem)
            if factory is None:
                raise UnknownRuleError(f"No built-in rule registered for {rule_file}")
            _add(name, _instantiate(name, factory, rule_file))

    for index, path in enumerate(extra_paths):
        for rule_file in _rule_files(Path(path)):
            name = rule_name(rule_file.stem)
            if name in disabled:
                logger.debug("Skipping disabled rule %s", name)
                continue
            if name in loaded:
                raise DuplicateRuleError(f"Rule {name} from {rule_file} is already loaded")
            factory = _load_custom_factory(rule_file, index)
            _add(name, _instantiate(name, factory, rule_file))

    return list(loaded.values())


class RuleRegistry:
    """Hold rule loading configuration and the rules of the last load."""

    def __init__(
        self,
        enable_builtin: bool = True,
        builtin_path: Path = BUILTIN_RULE_PATH,
        builtin_table: Mapping[str, RuleFactory] = BUILTIN_RULES,
    ) -> None:
        self._enable_builtin = True
        self.enable_builtin = enable_builtin
        self.builtin_path = builtin_path
        self.builtin_table = builtin_table
        self._paths: List[str] = []
        self._disabled: List[str] = []
        self.rules: Dict[str, Rule] = {}

    @property
    def enable_builtin(self) -> bool:
        return self._enable_builtin

    @enable_builtin.setter
    def enable_builtin(self, flag: bool) -> None:
        if not isinstance(flag, bool):
            raise ConfigurationError("Boolean value expected")
        self._enable_builtin = flag

    @property
    def paths(self) -> List[str]:
        return list(self._paths)

    @property
    def disabled_names(self) -> List[str]:
        return list(self._disabled)

    def add_path(self, path: str) -> None:
        if not Path(path).exists():
            raise NotFoundError(f"The path {path} does not exist")
        if path not in self._paths:
            self._paths.append(path)

    def disable(self, name: str) -> None:
        validate_rule_name(name)
        if name not in self._disabled:
            self._disabled.append(name)

    def get(self, name: str) -> Optional[Rule]:
        return self.rules.get(name)

    def load(self) -> List[Rule]:
        rules = load_rules(
            self._enable_builtin,
            self._paths,
            self._disabled,
            builtin_path=self.builtin_path,
            builtin_table=self.builtin_table,
        )
        self.rules = {rule.name: rule for rule in rules}
        return rules
