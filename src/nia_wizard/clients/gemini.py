# Gemini CLI client
import sys
from pathlib import Path
from typing import Any

from nia_wizard.clients.base import ConfigFileClient, user_profile_dir
from nia_wizard.models import Mode


class GeminiCLIClient(ConfigFileClient):
    """Gemini CLI (~/.gemini/settings.json).

    ABOUTME: Remote registrations use httpUrl and must accept event streams
    """

    name = "Gemini CLI"
    docs_url = "https://googlegemini.com/docs/gemini-cli/tools/mcp-server"
    dot_dir = ".gemini"

    def default_config_path(self) -> Path:
        home = user_profile_dir() if sys.platform == "win32" else Path.home()
        return home / self.dot_dir / "settings.json"

    def build_registration(self, api_key: str, mode: Mode) -> dict[str, Any]:
        registration = self.registration(api_key, mode)
        if registration.is_local:
            return registration.to_dict()
        return {
            "httpUrl": registration.url,
            "headers": {
                **registration.headers,
                "Accept": "application/json, text/event-stream",
            },
        }
