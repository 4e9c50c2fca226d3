# JetBrains IDEs client
from pathlib import Path

from nia_wizard.clients.base import ConfigFileClient


class JetBrainsClient(ConfigFileClient):
    """JetBrains AI Assistant (~/.jetbrains/mcp.json).

    ABOUTME: Detected by the IDE family's own config directories
    """

    name = "JetBrains"
    docs_url = "https://www.jetbrains.com/help/idea/mcp-server.html"
    note = "Only supports local (stdio) mode"
    supports_remote = False

    def default_config_path(self) -> Path:
        return Path.home() / ".jetbrains" / "mcp.json"

    def probe_paths(self) -> list[Path]:
        home = Path.home()
        return [
            home / ".config" / "JetBrains",
            home / "Library" / "Application Support" / "JetBrains",
        ]
