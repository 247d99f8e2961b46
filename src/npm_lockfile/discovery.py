"""Lock file discovery utilities."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from .settings import DEFAULT_EXCLUDE_DIRS

LOCKFILE_NAMES = {"package-lock.json", "npm-shrinkwrap.json"}


def discover_lockfiles(root: Path, excludes: Iterable[str] = DEFAULT_EXCLUDE_DIRS) -> list[Path]:
    """Return npm lock files under ``root``, sorted by path.

    Directories named in ``excludes`` are not descended into.
    """
    root = root.resolve()
    excluded = set(excludes)
    found: list[Path] = []

    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = [name for name in dirnames if name not in excluded]
        found.extend(Path(dirpath, name) for name in filenames if name in LOCKFILE_NAMES)

    return sorted(found)
