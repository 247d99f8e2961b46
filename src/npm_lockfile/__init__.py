"""npm-lockfile core package.

Parses npm package-lock.json files (lockfileVersion 1, 2 and 3) into a
normalised model and a flattened dependency list. Reading files, discovery
and reporting live in separate modules so the parser stays free of I/O.
"""

from .core import parse, parse_dependencies
from .errors import (
    ConfigError,
    JsonSyntaxError,
    MalformedEntry,
    MissingPackagesField,
    ParseError,
    SourceError,
    UnsupportedVersion,
)
from .flatten import flatten
from .models import (
    LockDocument,
    LockVersion,
    SimpleDependency,
    V1Dependency,
    V2Dependency,
    package_name_from_path,
)

__all__ = [
    "parse",
    "parse_dependencies",
    "flatten",
    "package_name_from_path",
    # Models
    "LockDocument",
    "LockVersion",
    "SimpleDependency",
    "V1Dependency",
    "V2Dependency",
    # Errors
    "ParseError",
    "JsonSyntaxError",
    "UnsupportedVersion",
    "MissingPackagesField",
    "MalformedEntry",
    "SourceError",
    "ConfigError",
]
