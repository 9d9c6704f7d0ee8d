"""Rule-based static analyzer for Python source.

Typical use::

    from rulecheck import Application

    report = Application().run(sys.executable, "src/")
    if report.has_errors():
        ...
"""

from importlib.metadata import version, PackageNotFoundError

from .application import Application
from .errors import AnalyzerError, ConfigurationError
from .result import Report

try:
    __version__ = version("rulecheck")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.1.0-dev"

__all__ = ["Application", "AnalyzerError", "ConfigurationError", "Report", "__version__"]
