# VS Code client
from pathlib import Path
from typing import Any

from nia_wizard.clients.base import ConfigFileClient, vscode_user_dir
from nia_wizard.models import ConfigFormat, Mode


class VSCodeClient(ConfigFileClient):
    """VS Code user-level mcp.json.

    ABOUTME: Uses "servers" (not mcpServers) with an explicit type tag
    """

    name = "VS Code"
    docs_url = "https://code.visualstudio.com/docs/copilot/chat/mcp-servers"
    config_format = ConfigFormat.JSONC
    server_property = ("servers",)
    platforms = ("darwin", "win32", "linux")

    def default_config_path(self) -> Path:
        return vscode_user_dir() / "mcp.json"

    def build_registration(self, api_key: str, mode: Mode) -> dict[str, Any]:
        registration = self.registration(api_key, mode)
        return {"type": "stdio" if registration.is_local else "http", **registration.to_dict()}
