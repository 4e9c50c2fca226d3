# Codex CLI and Codex App clients
import json
import sys
from pathlib import Path

from nia_wizard.clients.base import ConfigFileClient, HybridCLIClient, user_profile_dir
from nia_wizard.models import SERVER_NAME, ConfigFormat, Mode


def codex_config_path() -> Path:
    """~/.codex/config.toml, shared by the CLI and the desktop app."""
    home = user_profile_dir() if sys.platform == "win32" else Path.home()
    return home / ".codex" / "config.toml"


class CodexCLIClient(HybridCLIClient):
    """Codex CLI: `codex mcp add`, falling back to ~/.codex/config.toml.

    ABOUTME: Uses snake_case mcp_servers key (not mcpServers)
    ABOUTME: stdio only, so remote requests get the local payload
    """

    name = "Codex CLI"
    docs_url = "https://developers.openai.com/codex/mcp/"
    note = "Only supports local mode, uses CLI configuration"
    config_format = ConfigFormat.TOML
    server_property = ("mcp_servers",)
    supports_remote = False
    binary = "codex"

    def default_config_path(self) -> Path:
        return codex_config_path()

    def probe_paths(self) -> list[Path]:
        return [self.config_path().parent]

    def add_args(self, api_key: str, mode: Mode) -> list[str]:
        registration = self.registration(api_key, mode)
        args = ["mcp", "add", SERVER_NAME]
        for key, value in registration.env.items():
            args += ["--env", f"{key}={value}"]
        return [*args, "--", registration.command or "", *registration.args]

    def list_args(self) -> list[str]:
        return ["mcp", "list", "--json"]

    def server_listed(self, output: str) -> bool:
        """Parse `codex mcp list --json`: a list of {"name": ...} objects."""
        try:
            servers = json.loads(output or "[]")
        except json.JSONDecodeError:
            self.logger.debug(f"{self.name}: unexpected mcp list output")
            return False
        if not isinstance(servers, list):
            return False
        return any(isinstance(s, dict) and s.get("name") == SERVER_NAME for s in servers)


class CodexAppClient(ConfigFileClient):
    """Codex desktop app, which reads the same config.toml as the CLI.

    ABOUTME: Detected by its macOS app bundle
    """

    name = "Codex App"
    docs_url = "https://developers.openai.com/codex/mcp/"
    note = "Only supports local mode, shares ~/.codex/config.toml with Codex CLI"
    config_format = ConfigFormat.TOML
    server_property = ("mcp_servers",)
    supports_remote = False
    platforms = ("darwin",)

    def default_config_path(self) -> Path:
        return codex_config_path()

    def probe_paths(self) -> list[Path]:
        return [
            Path("/Applications/Codex.app"),
            Path.home() / "Applications" / "Codex.app",
        ]
