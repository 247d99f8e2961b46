"""Human-readable Markdown rendering of a scan report."""

from __future__ import annotations

from typing import Any


def render_summary(report: dict[str, Any]) -> str:
    """Return a Markdown string with totals and a table of scanned lock files."""
    totals = report.get("totals", {})
    lockfiles = report.get("lockfiles", [])
    errors = report.get("errors", [])

    lines = []
    lines.append("# npm-lockfile Summary")
    lines.append("")
    lines.append(
        f"Lock files: {totals.get('lockfiles', 0)} | "
        f"Dependencies: {totals.get('dependencies', 0)} | "
        f"Errors: {totals.get('errors', 0)}"
    )
    lines.append("")
    lines.append("| Lock file | Project | lockfileVersion | Dependencies | Dev | Optional | Links |")
    lines.append("| --- | --- | --- | --- | --- | --- | --- |")

    if not lockfiles:
        lines.append("| (no lock files parsed) | n/a | n/a | 0 | 0 | 0 | 0 |")

    for entry in lockfiles:
        counts = entry.get("totals", {})
        project = entry.get("name") or "(unnamed)"
        if entry.get("version"):
            project = f"{project}@{entry['version']}"
        lines.append(
            f"| {entry.get('path', '')} | {project} | {entry.get('lockfileVersion', '')} | "
            f"{counts.get('dependencies', 0)} | {counts.get('dev', 0)} | "
            f"{counts.get('optional', 0)} | {counts.get('links', 0)} |"
        )

    if errors:
        lines.append("")
        lines.append("## Errors")
        lines.append("")
        for error in errors:
            lines.append(f"- {error.get('path', '')}: {error.get('error', '')}")

    return "\n".join(lines) + "\n"
