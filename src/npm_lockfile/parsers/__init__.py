"""Parsers for the lockfileVersion 1 tree and the lockfileVersion 2/3 packages map."""

from .detect import detect_version, read_root_metadata
from .v1_tree import walk_dependencies
from .v2_packages import parse_packages

__all__ = [
    "detect_version",
    "parse_packages",
    "read_root_metadata",
    "walk_dependencies",
]
