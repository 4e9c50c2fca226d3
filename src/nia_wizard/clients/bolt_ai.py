# BoltAI client
from pathlib import Path

from nia_wizard.clients.base import ConfigFileClient


class BoltAIClient(ConfigFileClient):
    """BoltAI, macOS only."""

    name = "BoltAI"
    docs_url = "https://docs.boltai.com/docs/plugins/mcp-servers"
    note = "Only supports local (stdio) mode, macOS only"
    supports_remote = False
    platforms = ("darwin",)

    def default_config_path(self) -> Path:
        return Path.home() / "Library" / "Application Support" / "BoltAI" / "mcp.json"
