"""Analyzer settings loaded from a YAML file."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .errors import ConfigurationError, NotFoundError
from .utils import read_yaml_file


@dataclass
class AnalyzerConfig:
    """Settings for one analyzer run.

    Example ``rulecheck.yaml``::

        validator: /usr/bin/python3
        builtin_rules: true
        rule_paths: [tools/rules]
        disabled_rules: [rulecheck.rules.line_length]
        extensions: [".py"]
        lint_timeout: 30
    """

    validator: str = field(default_factory=lambda: sys.executable)
    builtin_rules: bool = True
    rule_paths: List[str] = field(default_factory=list)
    disabled_rules: List[str] = field(default_factory=list)
    extensions: List[str] = field(default_factory=lambda: [".py"])
    lint_timeout: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AnalyzerConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")

        config = cls(**data)
        config.validate()
        return config

    def validate(self) -> None:
        if not isinstance(self.validator, str) or not self.validator.strip():
            raise ConfigurationError("validator must be a non-empty string")
        if not isinstance(self.builtin_rules, bool):
            raise ConfigurationError("builtin_rules must be a boolean")
        for key in ("rule_paths", "disabled_rules", "extensions"):
            value = getattr(self, key)
            if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
                raise ConfigurationError(f"{key} must be a list of strings")
        if self.lint_timeout is not None and (
            isinstance(self.lint_timeout, bool) or not isinstance(self.lint_timeout, (int, float))
        ):
            raise ConfigurationError("lint_timeout must be a number")

    def merge(
        self,
        validator: Optional[str] = None,
        builtin_rules: Optional[bool] = None,
        rule_paths: Optional[List[str]] = None,
        disabled_rules: Optional[List[str]] = None,
        extensions: Optional[List[str]] = None,
    ) -> "AnalyzerConfig":
        """Return a copy with command-line overrides applied; list options extend."""

        return AnalyzerConfig(
            validator=validator or self.validator,
            builtin_rules=self.builtin_rules if builtin_rules is None else builtin_rules,
            rule_paths=self.rule_paths + list(rule_paths or []),
            disabled_rules=self.disabled_rules + list(disabled_rules or []),
            extensions=list(extensions) if extensions else list(self.extensions),
            lint_timeout=self.lint_timeout,
        )


def load_config(path: str | Path) -> AnalyzerConfig:
    """Load :class:`AnalyzerConfig` from a YAML mapping."""

    config_path = Path(path)
    try:
        data = read_yaml_file(config_path)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in {path}: {exc}") from exc
    if data is None:
        if not config_path.exists():
            raise NotFoundError(f"Configuration file {path} not found")
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration at {path} is not a mapping")
    return AnalyzerConfig.from_dict(data)
