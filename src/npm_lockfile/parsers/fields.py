"""Typed field accessors shared by the lock file parsers.

Absent and ``null`` fields resolve to their default. A present field of the
wrong JSON type raises :class:`MalformedEntry` with the location of the field.
"""

from __future__ import annotations

import logging
from typing import Any

from ..errors import MalformedEntry

logger = logging.getLogger(__name__)

Location = tuple[str, ...]


def expect_object(value: Any, where: Location) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise MalformedEntry(where, f"expected an object, got {_json_type(value)}")
    return value


def get_str(entry: dict[str, Any], key: str, where: Location) -> str | None:
    value = entry.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise MalformedEntry(where + (key,), f"expected a string, got {_json_type(value)}")
    return value


def get_bool(entry: dict[str, Any], key: str, where: Location) -> bool:
    value = entry.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise MalformedEntry(where + (key,), f"expected a boolean, got {_json_type(value)}")
    return value


def get_str_map(entry: dict[str, Any], key: str, where: Location) -> dict[str, str] | None:
    value = entry.get(key)
    if value is None:
        return None
    mapping = expect_object(value, where + (key,))
    for name, item in mapping.items():
        if not isinstance(item, str):
            raise MalformedEntry(
                where + (key, name), f"expected a string, got {_json_type(item)}"
            )
    return mapping


def get_str_list(entry: dict[str, Any], key: str, where: Location) -> tuple[str, ...] | None:
    value = entry.get(key)
    if value is None:
        return None
    if not isinstance(value, list):
        raise MalformedEntry(where + (key,), f"expected an array, got {_json_type(value)}")
    for index, item in enumerate(value):
        if not isinstance(item, str):
            raise MalformedEntry(
                where + (key, str(index)), f"expected a string, got {_json_type(item)}"
            )
    return tuple(value)


def get_engines(entry: dict[str, Any], where: Location) -> dict[str, str] | None:
    """Return the ``engines`` constraints as a mapping.

    Some published packages declare engines as ``["node >=0.6.0"]``; those
    arrays are converted to ``{"node": ">=0.6.0"}``.
    """
    value = entry.get("engines")
    if isinstance(value, list):
        logger.warning("Found engines as an array instead of an object at %s", "/".join(where))
        items = get_str_list(entry, "engines", where) or ()
        if not items:
            return None
        engines: dict[str, str] = {}
        for item in items:
            engine, _, constraint = item.strip().partition(" ")
            engines[engine] = constraint.strip() or "*"
        return engines
    return get_str_map(entry, "engines", where)


def _json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__
