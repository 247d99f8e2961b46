"""Tests for the CLI settings loader."""

import json

import pytest

from npm_lockfile.errors import ConfigError
from npm_lockfile.settings import (
    CONFIG_PATH_ENV_VAR,
    DEFAULT_MAX_BYTES,
    Settings,
    load_settings,
)


def test_defaults_without_config(monkeypatch):
    monkeypatch.delenv(CONFIG_PATH_ENV_VAR, raising=False)
    settings = load_settings()
    assert settings == Settings()
    assert settings.max_bytes == DEFAULT_MAX_BYTES
    assert "node_modules" in settings.exclude_dirs


def test_load_from_explicit_path(tmp_path):
    config = tmp_path / "settings.json"
    config.write_text(
        json.dumps({"max_bytes": 1024, "log_level": "DEBUG", "exclude_dirs": ["vendor"]})
    )

    settings = load_settings(config)

    assert settings.max_bytes == 1024
    assert settings.log_level == "DEBUG"
    assert settings.exclude_dirs == ("vendor",)
    assert settings.http_timeout == 30.0


def test_load_from_env_var(tmp_path, monkeypatch):
    config = tmp_path / "settings.json"
    config.write_text(json.dumps({"max_bytes": None, "http_timeout": 5}))
    monkeypatch.setenv(CONFIG_PATH_ENV_VAR, str(config))

    settings = load_settings()

    assert settings.max_bytes is None
    assert settings.http_timeout == 5.0


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_settings(tmp_path / "missing.json")


def test_invalid_json(tmp_path):
    config = tmp_path / "settings.json"
    config.write_text("{not json")
    with pytest.raises(ConfigError, match="Invalid JSON"):
        load_settings(config)


@pytest.mark.parametrize(
    "payload, pointer",
    [
        ({"max_bytes": 0}, "max_bytes"),
        ({"log_level": "LOUD"}, "log_level"),
        ({"exclude_dirs": "node_modules"}, "exclude_dirs"),
        ({"http_timeout": 0}, "http_timeout"),
        ({"unknown": True}, "<root>"),
        ([], "<root>"),
    ],
)
def test_schema_violations(tmp_path, payload, pointer):
    config = tmp_path / "settings.json"
    config.write_text(json.dumps(payload))
    with pytest.raises(ConfigError) as exc:
        load_settings(config)
    assert f"- {pointer}:" in str(exc.value)
