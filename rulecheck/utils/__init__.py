"""Utility helpers for the analyzer."""

from .fileio import read_yaml_file, read_source_file

__all__ = [
    "read_yaml_file",
    "read_source_file",
]
