# Perplexity Desktop client
from pathlib import Path

from nia_wizard.clients.base import ConfigFileClient


class PerplexityClient(ConfigFileClient):
    """Perplexity Desktop, macOS only."""

    name = "Perplexity Desktop"
    docs_url = "https://docs.perplexity.ai/guides/mcp-server"
    note = "Only supports local (stdio) mode, macOS only"
    supports_remote = False
    platforms = ("darwin",)

    def default_config_path(self) -> Path:
        return Path.home() / "Library" / "Application Support" / "Perplexity" / "mcp.json"
