# LM Studio client
from pathlib import Path

from nia_wizard.clients.base import ConfigFileClient


class LMStudioClient(ConfigFileClient):
    """LM Studio (~/.lmstudio/mcp.json), Cursor-style mcpServers."""

    name = "LM Studio"
    docs_url = "https://lmstudio.ai/docs/app/plugins/mcp"

    def default_config_path(self) -> Path:
        return Path.home() / ".lmstudio" / "mcp.json"
