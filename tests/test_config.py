# ABOUTME: Tests for settings loading
# ABOUTME: Covers defaults, the settings file and environment overrides
import json
from pathlib import Path

import pytest

from nia_wizard.config import (
    DEFAULT_API_URL,
    DEFAULT_REMOTE_MCP_URL,
    Settings,
    get_config_dir,
    get_config_path,
    load_settings,
)
from nia_wizard.errors import ConfigParseError


def test_config_paths(home: Path):
    """Data directory and settings file live under ~/.nia-wizard."""
    assert get_config_dir() == home / ".nia-wizard"
    assert get_config_path() == home / ".nia-wizard" / "config.json"


def test_settings_defaults():
    settings = Settings()
    assert settings.remote_url == DEFAULT_REMOTE_MCP_URL
    assert settings.api_url == DEFAULT_API_URL
    assert settings.local_command == "pipx"
    assert settings.local_args == ("run", "--no-cache", "nia-mcp-server")
    assert settings.backup_dir is None


def test_load_settings_without_file(home: Path):
    """A missing settings file gives defaults with backups enabled."""
    settings = load_settings(environ={})
    assert settings.remote_url == DEFAULT_REMOTE_MCP_URL
    assert settings.backup_dir == home / ".nia-wizard" / "backups"


def test_load_settings_from_file(tmp_path: Path, home: Path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "remote_url": "http://localhost:8000/mcp",
        "api_url": "http://localhost:8000/",
        "cli_timeout": 5,
        "backups": False,
    }))

    settings = load_settings(path, environ={})

    assert settings.remote_url == "http://localhost:8000/mcp"
    assert settings.api_url == "http://localhost:8000/"
    assert settings.cli_timeout == 5.0
    assert settings.backup_dir is None


def test_environment_overrides_file(tmp_path: Path, home: Path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"remote_url": "http://from-file/mcp"}))

    settings = load_settings(path, environ={
        "NIA_REMOTE_MCP_URL": "https://staging.example.com/mcp",
        "NIA_API_URL": "https://staging.example.com/",
    })

    assert settings.remote_url == "https://staging.example.com/mcp"
    assert settings.api_url == "https://staging.example.com/"


def test_invalid_json_raises(tmp_path: Path, home: Path):
    path = tmp_path / "config.json"
    path.write_text("{oops")
    with pytest.raises(ConfigParseError):
        load_settings(path, environ={})


def test_non_object_raises(tmp_path: Path, home: Path):
    path = tmp_path / "config.json"
    path.write_text("[]")
    with pytest.raises(ConfigParseError, match="must be a JSON object"):
        load_settings(path, environ={})


def test_invalid_url_raises(tmp_path: Path, home: Path):
    with pytest.raises(ConfigParseError, match="HTTP or HTTPS"):
        load_settings(tmp_path / "missing.json", environ={"NIA_REMOTE_MCP_URL": "ftp://nope"})


def test_invalid_timeout_raises(tmp_path: Path, home: Path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"cli_timeout": "soon"}))
    with pytest.raises(ConfigParseError, match="cli_timeout"):
        load_settings(path, environ={})
