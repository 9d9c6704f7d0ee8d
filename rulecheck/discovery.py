"""Resolve an input path into the list of files to analyze."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Union

from .errors import NotFoundError

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = (".py",)


def _walk(root: Path, extensions: Iterable[str]) -> List[str]:
    suffixes = set(extensions)
    return [str(found) for found in sorted(root.rglob("*")) if found.suffix in suffixes and found.is_file()]


def list_files(path: Union[str, Path], extensions: Iterable[str] = DEFAULT_EXTENSIONS) -> List[str]:
    """Return the analyzable files at ``path``.

    A path naming a single file is returned as-is, without extension
    filtering. A directory is walked recursively and every file whose suffix
    is in ``extensions`` is returned, sorted so repeated calls agree.
    """

    target = Path(path)
    if not target.exists():
        raise NotFoundError(f"{path} not found")

    if target.is_file():
        return [str(path)]

    files = _walk(target, extensions)
    logger.debug("Discovered %d file(s) under %s", len(files), target)
    return files
