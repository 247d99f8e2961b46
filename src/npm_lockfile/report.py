"""Report aggregation and schema-friendly output."""

from __future__ import annotations

from typing import Any

from .flatten import flatten
from .models import LockDocument


def summarise_lockfile(path: str, document: LockDocument) -> dict[str, Any]:
    """Describe one parsed lock file and its flattened dependencies."""
    dependencies = flatten(document)
    links = sum(1 for dependency in document.v2_dependencies.values() if dependency.link)
    return {
        "path": path,
        "lockfileVersion": int(document.lockfile_version),
        "name": document.name,
        "version": document.version,
        "dependencies": [dependency.to_dict() for dependency in dependencies],
        "totals": {
            "dependencies": len(dependencies),
            "dev": sum(1 for dependency in dependencies if dependency.dev),
            "optional": sum(1 for dependency in dependencies if dependency.optional),
            "links": links,
        },
    }


def build_report(
    lockfiles: list[dict[str, Any]], errors: list[dict[str, str]] | None = None
) -> dict[str, Any]:
    """Aggregate per-lock-file summaries into a single report.

    ``lockfiles`` holds :func:`summarise_lockfile` results; ``errors`` holds
    ``{"path", "error"}`` objects for lock files that failed to parse.
    """
    errors = errors or []
    report: dict[str, Any] = {
        "version": "1",
        "hasErrors": bool(errors),
        "lockfiles": lockfiles,
        "errors": errors,
        "totals": {
            "lockfiles": len(lockfiles),
            "dependencies": sum(entry["totals"]["dependencies"] for entry in lockfiles),
            "errors": len(errors),
        },
    }
    return report
