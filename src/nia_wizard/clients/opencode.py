# Opencode client
from pathlib import Path
from typing import Any

from nia_wizard.clients.base import ConfigFileClient
from nia_wizard.models import Mode


class OpencodeClient(ConfigFileClient):
    """Opencode (~/.opencode/config.json).

    ABOUTME: Servers live under "mcp" as type local/remote with enabled: true
    ABOUTME: Local command is one list: executable followed by its args
    """

    name = "Opencode"
    docs_url = "https://opencode.ai/docs/mcp-servers/"
    note = "Also available as dedicated plugin: bunx nia-opencode@latest install"
    server_property = ("mcp",)

    def default_config_path(self) -> Path:
        return Path.home() / ".opencode" / "config.json"

    def build_registration(self, api_key: str, mode: Mode) -> dict[str, Any]:
        registration = self.registration(api_key, mode)
        if registration.is_local:
            return {
                "type": "local",
                "command": [registration.command, *registration.args],
                "env": dict(registration.env),
                "enabled": True,
            }
        return {
            "type": "remote",
            "url": registration.url,
            "headers": dict(registration.headers),
            "enabled": True,
        }
