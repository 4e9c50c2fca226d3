# Trae client
import sys
from pathlib import Path

from nia_wizard.clients.base import ConfigFileClient, appdata_dir
from nia_wizard.models import ConfigFormat


class TraeClient(ConfigFileClient):
    """Trae IDE user mcp.json."""

    name = "Trae"
    docs_url = "https://docs.trae.ai/ide/model-context-protocol"
    config_format = ConfigFormat.JSONC

    def default_config_path(self) -> Path:
        if sys.platform == "darwin":
            return Path.home() / "Library" / "Application Support" / "Trae" / "User" / "mcp.json"
        if sys.platform == "win32":
            return appdata_dir() / "Trae" / "User" / "mcp.json"
        return Path.home() / ".config" / "trae" / "mcp.json"
