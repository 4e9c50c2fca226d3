# Mistral Vibe CLI client
import re
import sys
from pathlib import Path
from typing import Any

from nia_wizard.clients.base import ConfigFileClient, user_profile_dir
from nia_wizard.models import SERVER_NAME, ConfigFormat, Mode
from nia_wizard.utils import toml_writer

# ABOUTME: Vibe's default config ships an empty inline array that [[mcp_servers]] can't extend
_EMPTY_ARRAY_PATTERN = re.compile(r"^[ \t]*mcp_servers[ \t]*=[ \t]*\[[ \t]*\][ \t]*(?:#.*)?\r?\n?", re.MULTILINE)


class VibeClient(ConfigFileClient):
    """Mistral Vibe CLI (~/.vibe/config.toml).

    ABOUTME: Servers are [[mcp_servers]] tables identified by name = "nia"
    ABOUTME: Remote (streamable-http) only
    """

    name = "Mistral Vibe CLI"
    docs_url = "https://github.com/mistralai/mistral-vibe?tab=readme-ov-file#mcp-server-configuration"
    note = "Only supports remote mode, uses TOML config"
    config_format = ConfigFormat.TOML
    server_property = ("mcp_servers",)
    supports_local = False

    def default_config_path(self) -> Path:
        home = user_profile_dir() if sys.platform == "win32" else Path.home()
        return home / ".vibe" / "config.toml"

    def probe_paths(self) -> list[Path]:
        return [self.config_path()]

    def build_registration(self, api_key: str, mode: Mode) -> dict[str, Any]:
        registration = self.registration(api_key, mode)
        return {
            "name": SERVER_NAME,
            "transport": "streamable-http",
            "url": registration.url,
            "headers": dict(registration.headers),
        }

    def check_installed(self) -> bool:
        path = self.config_path()
        if not path.exists():
            return False
        codec = self.codec
        servers = codec.parse(codec.read(path)).get("mcp_servers")
        if not isinstance(servers, list):
            return False
        return any(isinstance(s, dict) and s.get("name") == SERVER_NAME for s in servers)

    def apply(self, api_key: str, mode: Mode) -> None:
        path = self.config_path()
        codec = self.codec
        document = codec.read(path)

        updated = toml_writer.remove_array_entry(document, "mcp_servers", "name", SERVER_NAME)
        updated = _EMPTY_ARRAY_PATTERN.sub("", updated)
        block = toml_writer.render_array_entry("mcp_servers", self.build_registration(api_key, mode))
        updated = toml_writer.append_block(updated, block)

        self.backup(path)
        codec.write(path, updated)
        self.logger.debug(f"{self.name}: wrote registration to {path}")

    def unapply(self) -> None:
        path = self.config_path()
        if not path.exists():
            return

        codec = self.codec
        document = codec.read(path)
        updated = toml_writer.remove_array_entry(document, "mcp_servers", "name", SERVER_NAME)
        if updated == document:
            return

        self.backup(path)
        codec.write(path, updated)
        self.logger.debug(f"{self.name}: removed registration from {path}")
