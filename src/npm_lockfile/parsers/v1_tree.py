"""Walk the nested ``dependencies`` tree of lockfileVersion 1 and 2 files."""

from __future__ import annotations

from typing import Any

from ..models import V1Dependency
from .fields import Location, expect_object, get_bool, get_str, get_str_map


def walk_dependencies(
    value: Any, where: Location = ("dependencies",)
) -> dict[str, V1Dependency]:
    """Return name -> V1Dependency for a ``dependencies`` object, recursively.

    An absent (``None``) tree yields an empty mapping. Recursion follows the
    nesting of the input without a depth limit; callers parsing untrusted
    files should bound the input size.
    """
    if value is None:
        return {}
    tree = expect_object(value, where)

    dependencies: dict[str, V1Dependency] = {}
    for name, raw in tree.items():
        entry_where = where + (name,)
        entry = expect_object(raw, entry_where)
        dependencies[name] = V1Dependency(
            name=name,
            version=get_str(entry, "version", entry_where) or "",
            resolved=get_str(entry, "resolved", entry_where),
            integrity=get_str(entry, "integrity", entry_where),
            dev=get_bool(entry, "dev", entry_where),
            optional=get_bool(entry, "optional", entry_where),
            bundled=get_bool(entry, "bundled", entry_where),
            requires=get_str_map(entry, "requires", entry_where) or {},
            dependencies=walk_dependencies(
                entry.get("dependencies"), entry_where + ("dependencies",)
            ),
        )
    return dependencies
