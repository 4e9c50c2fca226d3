# Google Antigravity client
import sys
from pathlib import Path
from typing import Any

from nia_wizard.clients.base import ConfigFileClient, appdata_dir
from nia_wizard.models import Mode


class AntigravityClient(ConfigFileClient):
    """Google Antigravity (mcp_config.json).

    ABOUTME: Remote registrations use serverUrl instead of url
    """

    name = "Google Antigravity"
    docs_url = "https://developers.google.com/gemini-code-assist/docs/use-mcp-servers"

    def default_config_path(self) -> Path:
        if sys.platform == "win32":
            return appdata_dir() / "Gemini" / "Antigravity" / "mcp_config.json"
        if sys.platform == "linux":
            return Path.home() / ".config" / "gemini" / "antigravity" / "mcp_config.json"
        return Path.home() / ".gemini" / "antigravity" / "mcp_config.json"

    def build_registration(self, api_key: str, mode: Mode) -> dict[str, Any]:
        registration = self.registration(api_key, mode)
        if registration.is_local:
            return registration.to_dict()
        return {"serverUrl": registration.url, "headers": dict(registration.headers)}
