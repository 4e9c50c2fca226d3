# Cline client
from pathlib import Path
from typing import Any

from nia_wizard.clients.base import ConfigFileClient, vscode_user_dir
from nia_wizard.models import ConfigFormat, Mode

# ABOUTME: Tools Cline may call without asking each time
NIA_TOOLS = ["index", "search", "manage_resource", "nia_web_search", "nia_deep_research_agent"]


class ClineClient(ConfigFileClient):
    """Cline VS Code extension (saoudrizwan.claude-dev).

    ABOUTME: Entries carry alwaysAllow and disabled alongside the server
    ABOUTME: Remote entries are tagged type: streamableHttp
    """

    name = "Cline"
    docs_url = "https://docs.cline.bot/mcp/configuring-mcp-servers"
    config_format = ConfigFormat.JSONC

    def default_config_path(self) -> Path:
        return (
            vscode_user_dir() / "globalStorage" / "saoudrizwan.claude-dev"
            / "settings" / "cline_mcp_settings.json"
        )

    def build_registration(self, api_key: str, mode: Mode) -> dict[str, Any]:
        registration = self.registration(api_key, mode)
        base: dict[str, Any] = {"alwaysAllow": list(NIA_TOOLS), "disabled": False}
        if registration.is_local:
            return {**base, **registration.to_dict()}
        return {**base, "type": "streamableHttp", **registration.to_dict()}
