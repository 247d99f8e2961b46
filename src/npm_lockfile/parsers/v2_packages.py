"""Parse the flat ``packages`` map of lockfileVersion 2 and 3 files."""

from __future__ import annotations

import logging
from typing import Any

from ..models import V2Dependency, package_name_from_path
from ..models.dependency import NODE_MODULES
from .fields import (
    expect_object,
    get_bool,
    get_engines,
    get_str,
    get_str_list,
    get_str_map,
)

logger = logging.getLogger(__name__)

ROOT_KEY = ""


def parse_packages(value: Any) -> tuple[dict[str, Any] | None, dict[str, V2Dependency]]:
    """Return ``(root_entry, path -> V2Dependency)`` for a ``packages`` object.

    The root entry (key ``""``) describes the project itself; it is returned
    separately and left out of the mapping.
    """
    where = ("packages",)
    packages = expect_object(value, where)

    root_entry: dict[str, Any] | None = None
    dependencies: dict[str, V2Dependency] = {}
    for path, raw in packages.items():
        entry_where = where + (path,)
        entry = expect_object(raw, entry_where)
        if path == ROOT_KEY:
            logger.debug("Skipping root project entry in packages")
            root_entry = entry
            continue
        dependencies[path] = _build_dependency(path, entry, entry_where)
    return root_entry, dependencies


def _derive_name(path: str, entry: dict[str, Any], where: tuple[str, ...]) -> str:
    if NODE_MODULES in path:
        return package_name_from_path(path)
    # Workspace folders such as "packages/app" carry their own name.
    return get_str(entry, "name", where) or path


def _build_dependency(path: str, entry: dict[str, Any], where: tuple[str, ...]) -> V2Dependency:
    return V2Dependency(
        path=path,
        name=_derive_name(path, entry, where),
        version=get_str(entry, "version", where) or "",
        resolved=get_str(entry, "resolved", where),
        integrity=get_str(entry, "integrity", where),
        dev=get_bool(entry, "dev", where),
        optional=get_bool(entry, "optional", where),
        dev_optional=get_bool(entry, "devOptional", where),
        peer=get_bool(entry, "peer", where),
        bundled=get_bool(entry, "inBundle", where) or get_bool(entry, "bundled", where),
        link=get_bool(entry, "link", where),
        has_install_script=get_bool(entry, "hasInstallScript", where),
        has_shrinkwrap=get_bool(entry, "hasShrinkwrap", where),
        license=get_str(entry, "license", where),
        dependencies=get_str_map(entry, "dependencies", where) or {},
        optional_dependencies=get_str_map(entry, "optionalDependencies", where) or {},
        peer_dependencies=get_str_map(entry, "peerDependencies", where) or {},
        engines=get_engines(entry, where),
        os=get_str_list(entry, "os", where),
        cpu=get_str_list(entry, "cpu", where),
        bin=get_str_map(entry, "bin", where),
    )
