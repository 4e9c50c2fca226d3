# Claude Desktop client
import sys
from pathlib import Path

from nia_wizard.clients.base import ConfigFileClient, appdata_dir


class ClaudeDesktopClient(ConfigFileClient):
    """Claude Desktop (claude_desktop_config.json).

    ABOUTME: macOS and Windows only; stdio servers only
    """

    name = "Claude Desktop"
    docs_url = "https://modelcontextprotocol.io/quickstart/user"
    note = "Only supports local (stdio) mode"
    supports_remote = False
    platforms = ("darwin", "win32")

    def default_config_path(self) -> Path:
        if sys.platform == "win32":
            return appdata_dir() / "Claude" / "claude_desktop_config.json"
        return Path.home() / "Library" / "Application Support" / "Claude" / "claude_desktop_config.json"
