"""Command-line entrypoint for parsing and scanning npm lock files.

Usage:
  npm-lockfile parse SOURCE [--full]
  npm-lockfile scan [--root DIR] [--format json|markdown]
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from .core import parse
from .discovery import discover_lockfiles
from .errors import ConfigError, ParseError, SourceError
from .flatten import flatten
from .report import build_report, summarise_lockfile
from .settings import Settings, load_settings
from .sources import read_lockfile
from .summary import render_summary

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_SOURCE_ERROR = 1
EXIT_PARSE_ERROR = 2


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="npm-lockfile", description=__doc__.splitlines()[0])
    parser.add_argument("--config", type=Path, default=None, help="Path to a JSON settings file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    parse_cmd = commands.add_parser("parse", help="Parse one lock file and print it as JSON")
    parse_cmd.add_argument("source", help="Path or http(s) URL of a package-lock.json")
    parse_cmd.add_argument(
        "--full",
        action="store_true",
        help="Print the whole parsed document instead of the flattened dependencies",
    )

    scan_cmd = commands.add_parser("scan", help="Parse every lock file under a directory")
    scan_cmd.add_argument("--root", type=Path, default=Path("."))
    scan_cmd.add_argument("--format", choices=("json", "markdown"), default="json")
    return parser.parse_args(argv)


def _configure_logging(settings: Settings, verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _run_parse(args: argparse.Namespace, settings: Settings) -> int:
    try:
        text = read_lockfile(
            args.source, max_bytes=settings.max_bytes, timeout=settings.http_timeout
        )
    except SourceError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_SOURCE_ERROR

    try:
        document = parse(text)
    except ParseError as exc:
        print(f"ERROR: {args.source}: {exc}", file=sys.stderr)
        return EXIT_PARSE_ERROR

    output: Any
    if args.full:
        output = document.to_dict()
    else:
        output = [dependency.to_dict() for dependency in flatten(document)]
    print(json.dumps(output, indent=2))
    return EXIT_OK


def _run_scan(args: argparse.Namespace, settings: Settings) -> int:
    root = args.root.resolve()
    lockfiles: list[dict[str, Any]] = []
    errors: list[dict[str, str]] = []

    for path in discover_lockfiles(root, settings.exclude_dirs):
        relative = str(path.relative_to(root))
        logger.debug("Parsing %s", relative)
        try:
            document = parse(read_lockfile(path, max_bytes=settings.max_bytes))
        except (SourceError, ParseError) as exc:
            errors.append({"path": relative, "error": str(exc)})
            continue
        lockfiles.append(summarise_lockfile(relative, document))

    report = build_report(lockfiles, errors)
    if args.format == "markdown":
        print(render_summary(report), end="")
    else:
        print(json.dumps(report, indent=2))

    return EXIT_PARSE_ERROR if report["hasErrors"] else EXIT_OK


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        settings = load_settings(args.config)
    except ConfigError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_SOURCE_ERROR

    _configure_logging(settings, args.verbose)

    if args.command == "parse":
        return _run_parse(args, settings)
    return _run_scan(args, settings)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
