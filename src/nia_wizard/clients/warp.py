# Warp terminal client
from pathlib import Path
from typing import Any

from nia_wizard.clients.base import ConfigFileClient
from nia_wizard.models import Mode


class WarpClient(ConfigFileClient):
    """Warp (~/.warp/mcp.json).

    ABOUTME: Entries also set working_directory and start_on_launch
    """

    name = "Warp"
    docs_url = "https://docs.warp.dev/knowledge-and-collaboration/mcp"
    note = "Only supports local (stdio) mode"
    supports_remote = False

    def default_config_path(self) -> Path:
        return Path.home() / ".warp" / "mcp.json"

    def build_registration(self, api_key: str, mode: Mode) -> dict[str, Any]:
        return {
            **self.registration(api_key, mode).to_dict(),
            "working_directory": None,
            "start_on_launch": True,
        }
