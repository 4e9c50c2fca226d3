# Zed client
import sys
from pathlib import Path
from typing import Any

from nia_wizard.clients.base import ConfigFileClient, xdg_config_dir
from nia_wizard.models import ConfigFormat, Mode


class ZedClient(ConfigFileClient):
    """Zed editor settings.json (context_servers)."""

    name = "Zed"
    docs_url = "https://zed.dev/docs/ai/mcp"
    note = "Only supports local (stdio) mode"
    config_format = ConfigFormat.JSONC
    server_property = ("context_servers",)
    supports_remote = False
    platforms = ("darwin", "linux")

    def default_config_path(self) -> Path:
        if sys.platform == "darwin":
            return Path.home() / ".config" / "zed" / "settings.json"
        return xdg_config_dir() / "zed" / "settings.json"

    def probe_paths(self) -> list[Path]:
        return [self.config_path().parent]

    def build_registration(self, api_key: str, mode: Mode) -> dict[str, Any]:
        return {"source": "custom", **self.registration(api_key, mode).to_dict()}
