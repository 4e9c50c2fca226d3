# Crush client
from pathlib import Path
from typing import Any

from nia_wizard.clients.base import ConfigFileClient
from nia_wizard.models import Mode


class CrushClient(ConfigFileClient):
    """Crush (~/.crush/config.json), servers under "mcp"."""

    name = "Crush"
    docs_url = "https://github.com/charmbracelet/crush#mcps"
    server_property = ("mcp",)

    def default_config_path(self) -> Path:
        return Path.home() / ".crush" / "config.json"

    def build_registration(self, api_key: str, mode: Mode) -> dict[str, Any]:
        registration = self.registration(api_key, mode)
        return {"type": "stdio" if registration.is_local else "http", **registration.to_dict()}
