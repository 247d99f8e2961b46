"""Exceptions raised while reading and parsing npm lock files."""

from __future__ import annotations

from typing import Any


class ParseError(ValueError):
    """Base error for lock file content that cannot be parsed."""


class JsonSyntaxError(ParseError):
    """Raised when the lock file text is not well-formed JSON."""

    def __init__(self, message: str, lineno: int = 0, colno: int = 0) -> None:
        super().__init__(f"Invalid JSON: {message} (line {lineno}, column {colno})")
        self.lineno = lineno
        self.colno = colno


class UnsupportedVersion(ParseError):
    """Raised when ``lockfileVersion`` is missing, not an integer or unknown."""

    def __init__(self, value: Any) -> None:
        if value is None:
            message = "Lock file is missing 'lockfileVersion'"
        else:
            message = f"Unsupported lockfileVersion: {value!r} (expected 1, 2 or 3)"
        super().__init__(message)
        self.value = value


class MissingPackagesField(ParseError):
    """Raised when a v2/v3 lock file has no ``packages`` object."""

    def __init__(self, lockfile_version: int) -> None:
        super().__init__(
            f"Lock file version {lockfile_version} requires a 'packages' field"
        )
        self.lockfile_version = lockfile_version


class MalformedEntry(ParseError):
    """Raised when an entry or one of its fields has the wrong JSON type."""

    def __init__(self, path: tuple[str, ...], reason: str) -> None:
        location = " > ".join(repr(part) for part in path) or "<root>"
        super().__init__(f"Malformed entry at {location}: {reason}")
        self.path = path
        self.reason = reason


class SourceError(RuntimeError):
    """Raised when lock file text cannot be read from a path or URL."""


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be loaded or is invalid."""
