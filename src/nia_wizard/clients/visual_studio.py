# Visual Studio 2022 client
from pathlib import Path
from typing import Any

from nia_wizard.clients.base import ConfigFileClient
from nia_wizard.models import ConfigFormat, Mode


class VisualStudioClient(ConfigFileClient):
    """Visual Studio 2022 (%USERPROFILE%/.vs/mcp.json), Windows only."""

    name = "Visual Studio 2022"
    docs_url = "https://learn.microsoft.com/en-us/visualstudio/ide/mcp-servers"
    config_format = ConfigFormat.JSONC
    server_property = ("servers",)
    platforms = ("win32",)

    def default_config_path(self) -> Path:
        return Path.home() / ".vs" / "mcp.json"

    def build_registration(self, api_key: str, mode: Mode) -> dict[str, Any]:
        registration = self.registration(api_key, mode)
        return {"type": "stdio" if registration.is_local else "http", **registration.to_dict()}
