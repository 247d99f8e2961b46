"""Detect the lock file schema from the top-level ``lockfileVersion`` field."""

from __future__ import annotations

from typing import Any

from ..errors import UnsupportedVersion
from ..models import LockVersion
from .fields import expect_object, get_bool, get_str


def detect_version(root: Any) -> LockVersion:
    """Return the schema version declared by a decoded lock file."""
    data = expect_object(root, ())
    value = data.get("lockfileVersion")
    # bool is an int subclass; ``true`` is not a version number.
    if not isinstance(value, int) or isinstance(value, bool):
        raise UnsupportedVersion(value)
    try:
        return LockVersion(value)
    except ValueError as exc:
        raise UnsupportedVersion(value) from exc


def read_root_metadata(root: dict[str, Any]) -> tuple[str, str, bool]:
    """Return the top-level ``(name, version, requires)`` with empty defaults."""
    name = get_str(root, "name", ()) or ""
    version = get_str(root, "version", ()) or ""
    requires = get_bool(root, "requires", ())
    return name, version, requires
