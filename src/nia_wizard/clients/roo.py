# Roo Code client
from pathlib import Path
from typing import Any, ClassVar

from nia_wizard.clients.base import ConfigFileClient, app_support_dir
from nia_wizard.models import ConfigFormat, Mode


class RooCodeClient(ConfigFileClient):
    """Roo Code VS Code extension (rooveterinaryinc.roo-cline).

    ABOUTME: Uses mcp_settings.json in the extension's globalStorage
    ABOUTME: Entries need the VS Code defaults disabled and alwaysAllow
    """

    name = "Roo Code"
    docs_url = "https://docs.roocode.com/features/mcp/using-mcp-in-roo"
    config_format = ConfigFormat.JSONC
    extension_id: ClassVar[str] = "rooveterinaryinc.roo-cline"
    filename: ClassVar[str] = "mcp_settings.json"

    def default_config_path(self) -> Path:
        """Checks Code/ and Code - Insiders/ for an existing config.

        ABOUTME: Defaults to Code/ when neither exists
        """
        base_path = app_support_dir()
        for variant in ("Code", "Code - Insiders"):
            path = self._settings_path(base_path / variant)
            if path.exists():
                return path
        return self._settings_path(base_path / "Code")

    def _settings_path(self, code_dir: Path) -> Path:
        return code_dir / "User" / "globalStorage" / self.extension_id / "settings" / self.filename

    def build_registration(self, api_key: str, mode: Mode) -> dict[str, Any]:
        registration = self.registration(api_key, mode)
        if registration.is_local:
            server = registration.to_dict()
        else:
            server = {"type": "streamable-http", **registration.to_dict()}
        return {**server, "disabled": False, "alwaysAllow": []}
