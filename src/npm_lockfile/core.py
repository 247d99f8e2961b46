"""Core parsing entrypoints.

This module MUST NOT perform any I/O so it can be used by both the CLI and
library callers that read lock files from elsewhere.
"""

from __future__ import annotations

import json
from typing import Any

from .errors import JsonSyntaxError, MissingPackagesField
from .flatten import flatten
from .models import LockDocument, SimpleDependency, V1Dependency, V2Dependency
from .parsers import detect_version, parse_packages, read_root_metadata, walk_dependencies
from .parsers.fields import get_str


def _decode(text: str | bytes) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise JsonSyntaxError(exc.msg, exc.lineno, exc.colno) from exc
    except UnicodeDecodeError as exc:
        raise JsonSyntaxError(f"{exc.reason} at byte {exc.start}") from exc


def parse(text: str | bytes) -> LockDocument:
    """Parse package-lock.json content into a LockDocument.

    Supports lockfileVersion 1 ("dependencies" tree), 2 (both) and 3
    ("packages" map).

    Raises:
        JsonSyntaxError: If ``text`` is not valid JSON.
        UnsupportedVersion: If ``lockfileVersion`` is missing or unknown.
        MissingPackagesField: If a v2/v3 file has no ``packages`` object.
        MalformedEntry: If an entry or field has the wrong JSON type.
    """
    root = _decode(text)
    lock_version = detect_version(root)
    name, version, requires = read_root_metadata(root)

    v1_dependencies: dict[str, V1Dependency] = {}
    if lock_version.has_dependencies_tree:
        v1_dependencies = walk_dependencies(root.get("dependencies"))

    v2_dependencies: dict[str, V2Dependency] = {}
    if lock_version.has_packages_map:
        if root.get("packages") is None:
            raise MissingPackagesField(int(lock_version))
        root_entry, v2_dependencies = parse_packages(root["packages"])
        if root_entry is not None:
            where = ("packages", "")
            name = name or get_str(root_entry, "name", where) or ""
            version = version or get_str(root_entry, "version", where) or ""

    return LockDocument(
        lockfile_version=lock_version,
        name=name,
        version=version,
        requires=requires,
        v1_dependencies=v1_dependencies,
        v2_dependencies=v2_dependencies,
    )


def parse_dependencies(text: str | bytes) -> list[SimpleDependency]:
    """Return the flattened dependency list of package-lock.json content.

    Only name, version, integrity and the dev/optional flags are kept; use
    :func:`parse` for everything else.
    """
    return flatten(parse(text))
