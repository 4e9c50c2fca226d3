# Configuration loading for nia-wizard
import json
import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from nia_wizard.errors import ConfigParseError
from nia_wizard.utils.validation import validate_url

# ABOUTME: Production endpoints, overridable for local development
DEFAULT_REMOTE_MCP_URL = "https://apigcp.trynia.ai/mcp"
DEFAULT_API_URL = "https://apigcp.trynia.ai/"

# ABOUTME: Package launched by the client in local (stdio) mode
DEFAULT_LOCAL_COMMAND = "pipx"
DEFAULT_LOCAL_ARGS = ("run", "--no-cache", "nia-mcp-server")

DEFAULT_CLI_TIMEOUT = 30.0

# ABOUTME: Environment variables that take precedence over the config file
ENV_REMOTE_URL = "NIA_REMOTE_MCP_URL"
ENV_API_URL = "NIA_API_URL"


@dataclass(frozen=True)
class Settings:
    """Resolved settings for one wizard invocation.

    ABOUTME: Threaded into the installer and every client at construction
    ABOUTME: backup_dir=None disables config backups
    """
    remote_url: str = DEFAULT_REMOTE_MCP_URL
    api_url: str = DEFAULT_API_URL
    local_command: str = DEFAULT_LOCAL_COMMAND
    local_args: tuple[str, ...] = DEFAULT_LOCAL_ARGS
    backup_dir: Path | None = None
    cli_timeout: float = DEFAULT_CLI_TIMEOUT


def get_config_dir() -> Path:
    """Return the wizard's own data directory (~/.nia-wizard)."""
    return Path.home() / ".nia-wizard"


def get_config_path() -> Path:
    """Return the path to the optional settings file.

    ABOUTME: Returns ~/.nia-wizard/config.json
    ABOUTME: File may not exist - every key is optional
    """
    return get_config_dir() / "config.json"


def _read_settings_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}

    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}", path) from e

    if not isinstance(data, dict):
        raise ConfigParseError(f"Settings in {path} must be a JSON object", path)
    return data


def load_settings(
    path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """Resolve settings from defaults, the settings file and the environment.

    ABOUTME: Precedence: defaults < config.json < environment variables
    ABOUTME: Backups go to ~/.nia-wizard/backups unless "backups": false

    Args:
        path: Settings file (defaults to ~/.nia-wizard/config.json)
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Settings instance

    Raises:
        ConfigParseError: If the file is invalid or a URL is malformed
    """
    env = os.environ if environ is None else environ
    settings_path = path if path is not None else get_config_path()
    data = _read_settings_file(settings_path)

    settings = Settings(backup_dir=get_config_dir() / "backups")

    if "remote_url" in data:
        settings = replace(settings, remote_url=str(data["remote_url"]))
    if "api_url" in data:
        settings = replace(settings, api_url=str(data["api_url"]))
    if "cli_timeout" in data:
        try:
            settings = replace(settings, cli_timeout=float(data["cli_timeout"]))
        except (TypeError, ValueError) as e:
            raise ConfigParseError(
                f"Invalid cli_timeout in {settings_path}: {data['cli_timeout']!r}",
                settings_path,
            ) from e
    if data.get("backups") is False:
        settings = replace(settings, backup_dir=None)

    if env.get(ENV_REMOTE_URL):
        settings = replace(settings, remote_url=env[ENV_REMOTE_URL])
    if env.get(ENV_API_URL):
        settings = replace(settings, api_url=env[ENV_API_URL])

    for url in (settings.remote_url, settings.api_url):
        error = validate_url(url)
        if error is not None:
            raise ConfigParseError(error.message, settings_path)

    return settings
