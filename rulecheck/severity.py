"""Severity definitions for diagnostic messages."""

from __future__ import annotations

from enum import Enum


class Severity(str, Enum):
    """Enumerate the supported severity levels for messages."""

    ERROR = "ERROR"
    WARNING = "WARNING"

    @property
    def exit_priority(self) -> int:
        """Return an integer ranking to drive exit code decisions."""

        ordering = {
            Severity.ERROR: 2,
            Severity.WARNING: 1,
        }
        return ordering[self]
