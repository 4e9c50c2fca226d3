# Windsurf client
import sys
from pathlib import Path
from typing import Any

from nia_wizard.clients.base import ConfigFileClient, appdata_dir
from nia_wizard.models import ConfigFormat, Mode


class WindsurfClient(ConfigFileClient):
    """Windsurf (Codeium) MCP config.

    ABOUTME: Remote registrations use serverUrl instead of url
    """

    name = "Windsurf"
    docs_url = "https://docs.windsurf.com/windsurf/cascade/mcp"
    config_format = ConfigFormat.JSONC
    platforms = ("darwin", "win32", "linux")

    def default_config_path(self) -> Path:
        if sys.platform == "win32":
            return appdata_dir() / "Codeium" / "windsurf" / "mcp_config.json"
        if sys.platform == "darwin":
            return Path.home() / ".codeium" / "windsurf" / "mcp_config.json"
        return Path.home() / ".config" / "windsurf" / "mcp.json"

    def build_registration(self, api_key: str, mode: Mode) -> dict[str, Any]:
        registration = self.registration(api_key, mode)
        if registration.is_local:
            return registration.to_dict()
        return {"serverUrl": registration.url, "headers": dict(registration.headers)}
