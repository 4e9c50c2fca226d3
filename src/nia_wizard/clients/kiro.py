# Kiro client
from pathlib import Path
from typing import Any

from nia_wizard.clients.base import ConfigFileClient
from nia_wizard.models import Mode


class KiroClient(ConfigFileClient):
    """Kiro (~/.kiro/mcp.json); entries carry disabled and autoApprove."""

    name = "Kiro"
    docs_url = "https://kiro.dev/docs/mcp/"
    note = "Only supports local (stdio) mode"
    supports_remote = False

    def default_config_path(self) -> Path:
        return Path.home() / ".kiro" / "mcp.json"

    def build_registration(self, api_key: str, mode: Mode) -> dict[str, Any]:
        return {
            **self.registration(api_key, mode).to_dict(),
            "disabled": False,
            "autoApprove": [],
        }
