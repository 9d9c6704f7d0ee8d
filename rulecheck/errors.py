"""Exception hierarchy for the analyzer.

Configuration and run-precondition errors fail fast and reach the caller
before any report exists. Lint failures and rule failures never surface as
exceptions; the engine records them as messages instead.
"""

from __future__ import annotations


class AnalyzerError(Exception):
    """Base class for every error raised by rulecheck."""


class ConfigurationError(AnalyzerError):
    """Invalid run-time configuration (blank parameters, bad flags, bad names)."""


class NotFoundError(ConfigurationError):
    """A file, directory or rule path does not exist."""


class UnknownRuleError(ConfigurationError):
    """A rule definition file could not be resolved to a rule factory."""


class DuplicateRuleError(ConfigurationError):
    """Two rule definitions resolved to the same fully qualified name."""


class RunPreconditionError(AnalyzerError):
    """The engine was asked to run without the inputs it needs."""


class NoRulesError(RunPreconditionError):
    """No rules were loaded."""


class NoFilesError(RunPreconditionError):
    """The input path resolved to no analyzable files."""
