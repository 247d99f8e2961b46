"""Configuration loader for the npm-lockfile command-line tool.

Settings are read from a JSON file and validated against ``SETTINGS_SCHEMA``
with jsonschema. Every key is optional; when no file is configured the
defaults are used.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator

from .errors import ConfigError

CONFIG_PATH_ENV_VAR = "NPM_LOCKFILE_CONFIG"

DEFAULT_MAX_BYTES = 50 * 1024 * 1024
DEFAULT_EXCLUDE_DIRS = ("node_modules", ".git", ".venv")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

SETTINGS_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "max_bytes": {"type": ["integer", "null"], "minimum": 1},
        "log_level": {"enum": list(LOG_LEVELS)},
        "exclude_dirs": {
            "type": "array",
            "items": {"type": "string", "minLength": 1},
            "uniqueItems": True,
        },
        "http_timeout": {"type": "number", "exclusiveMinimum": 0},
    },
}


@dataclass(slots=True, frozen=True)
class Settings:
    """Top-level settings container."""

    max_bytes: int | None = DEFAULT_MAX_BYTES
    log_level: str = "WARNING"
    exclude_dirs: tuple[str, ...] = DEFAULT_EXCLUDE_DIRS
    http_timeout: float = 30.0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Settings:
        """Create Settings from an already validated dictionary."""
        defaults = cls()
        return cls(
            max_bytes=data.get("max_bytes", defaults.max_bytes),
            log_level=data.get("log_level", defaults.log_level),
            exclude_dirs=tuple(data.get("exclude_dirs", defaults.exclude_dirs)),
            http_timeout=float(data.get("http_timeout", defaults.http_timeout)),
        )


def _resolve_config_path(path: Path | str | None = None) -> Path | None:
    """Resolve the configuration file path.

    Priority:
    1. Explicit path argument
    2. NPM_LOCKFILE_CONFIG environment variable
    3. None (use defaults)
    """
    if path is not None:
        return Path(path)

    env_path = os.environ.get(CONFIG_PATH_ENV_VAR)
    if env_path:
        return Path(env_path)

    return None


def _format_errors(errors: list[Any]) -> str:
    messages = []
    for error in errors:
        pointer = "/".join(str(p) for p in error.path)
        messages.append(f"- {pointer or '<root>'}: {error.message}")
    return "\n".join(messages)


def load_settings(path: Path | str | None = None) -> Settings:
    """Load and validate settings from a JSON file.

    Args:
        path: Optional path to the config file. If not provided, uses the
            NPM_LOCKFILE_CONFIG env var or falls back to built-in defaults.

    Raises:
        ConfigError: If the file cannot be read or contains invalid data.
    """
    config_path = _resolve_config_path(path)
    if config_path is None:
        return Settings()

    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read configuration file: {exc}") from exc

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in configuration file: {exc}") from exc

    validator = Draft202012Validator(SETTINGS_SCHEMA)
    errors = sorted(validator.iter_errors(data), key=lambda e: e.path)
    if errors:
        raise ConfigError(f"Invalid configuration file {config_path}:\n{_format_errors(errors)}")

    return Settings.from_dict(data)
