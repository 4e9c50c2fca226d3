# Cursor client
import sys
from pathlib import Path
from typing import Any

from nia_wizard.clients.base import ConfigFileClient, appdata_dir
from nia_wizard.models import ConfigFormat, Mode


class CursorClient(ConfigFileClient):
    """Cursor (~/.cursor/mcp.json on macOS).

    ABOUTME: Local registrations carry an explicit type: stdio
    """

    name = "Cursor"
    docs_url = "https://cursor.com/docs/context/mcp"
    config_format = ConfigFormat.JSONC
    platforms = ("darwin", "win32", "linux")

    def default_config_path(self) -> Path:
        if sys.platform == "win32":
            return appdata_dir() / "Cursor" / "mcp.json"
        if sys.platform == "linux":
            return Path.home() / ".config" / "cursor" / "mcp.json"
        return Path.home() / ".cursor" / "mcp.json"

    def build_registration(self, api_key: str, mode: Mode) -> dict[str, Any]:
        registration = self.registration(api_key, mode)
        if registration.is_local:
            return {"type": "stdio", **registration.to_dict()}
        return registration.to_dict()
