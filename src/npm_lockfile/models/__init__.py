"""Data models for parsed npm lock files."""

from __future__ import annotations

from .dependency import V1Dependency, V2Dependency, package_name_from_path
from .lock_document import LockDocument, LockVersion
from .simple_dependency import SimpleDependency

__all__ = [
    "LockDocument",
    "LockVersion",
    "SimpleDependency",
    "V1Dependency",
    "V2Dependency",
    "package_name_from_path",
]
