"""Flatten a parsed lock file into simple name/version records."""

from __future__ import annotations

from .models import LockDocument, SimpleDependency


def flatten(document: LockDocument) -> list[SimpleDependency]:
    """Return one SimpleDependency per installed package, in discovery order.

    The ``packages`` map is used whenever the document has one, giving one
    record per install location. lockfileVersion 1 documents are walked
    depth-first, so a name nested at several depths appears once per depth.
    """
    if document.lockfile_version.has_packages_map:
        return [
            SimpleDependency(
                name=dependency.name,
                version=dependency.version,
                integrity=dependency.integrity,
                dev=dependency.dev,
                optional=dependency.optional,
            )
            for dependency in document.v2_dependencies.values()
        ]

    records: list[SimpleDependency] = []
    for top_level in document.v1_dependencies.values():
        for _depth, dependency in top_level.iter_tree():
            records.append(
                SimpleDependency(
                    name=dependency.name,
                    version=dependency.version,
                    integrity=dependency.integrity,
                    dev=dependency.dev,
                    optional=dependency.optional,
                )
            )
    return records
