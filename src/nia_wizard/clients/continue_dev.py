# Continue.dev client
import sys
from pathlib import Path
from typing import Any

from nia_wizard.clients.base import ConfigFileClient, user_profile_dir
from nia_wizard.models import ConfigFormat, Mode


class ContinueClient(ConfigFileClient):
    """Continue.dev (~/.continue/config.json).

    ABOUTME: Server lives at experimental.nia.modelContextProtocolServer.transport
    """

    name = "Continue.dev"
    docs_url = "https://docs.continue.dev/customize/mcp-tools"
    config_format = ConfigFormat.JSONC
    server_property = ("experimental",)

    def default_config_path(self) -> Path:
        home = user_profile_dir() if sys.platform == "win32" else Path.home()
        return home / ".continue" / "config.json"

    def probe_paths(self) -> list[Path]:
        return [self.config_path().parent]

    def build_registration(self, api_key: str, mode: Mode) -> dict[str, Any]:
        registration = self.registration(api_key, mode)
        transport = {"type": "stdio" if registration.is_local else "http", **registration.to_dict()}
        return {"modelContextProtocolServer": {"transport": transport}}
