# Augment Code client
from pathlib import Path
from typing import Any

from nia_wizard.clients.base import ConfigFileClient, vscode_extension_installed, vscode_user_dir
from nia_wizard.errors import ConfigParseError
from nia_wizard.models import SERVER_NAME, ConfigFormat, Mode


class AugmentClient(ConfigFileClient):
    """Augment Code VS Code extension.

    ABOUTME: Servers are a list under "augment.advanced" -> "mcpServers" in
    ABOUTME: VS Code user settings, each entry identified by its "name" field
    """

    name = "Augment Code"
    docs_url = "https://docs.augmentcode.com/setup-augment/mcp"
    note = "Only supports local (stdio) mode"
    config_format = ConfigFormat.JSONC
    server_property = ("augment.advanced", "mcpServers")
    supports_remote = False

    def default_config_path(self) -> Path:
        return vscode_user_dir() / "settings.json"

    def probe(self) -> bool:
        return vscode_extension_installed("augment.vscode-augment")

    def build_registration(self, api_key: str, mode: Mode) -> dict[str, Any]:
        return {"name": SERVER_NAME, **self.registration(api_key, mode).to_dict()}

    def _entries(self, data: dict[str, Any]) -> list[Any]:
        entries = self._servers(data)
        if entries is None:
            return []
        if not isinstance(entries, list):
            raise ConfigParseError(f"Expected a list at {'.'.join(self.server_property)}")
        return entries

    @staticmethod
    def _is_ours(entry: Any) -> bool:
        return isinstance(entry, dict) and entry.get("name") == SERVER_NAME

    def check_installed(self) -> bool:
        path = self.config_path()
        if not path.exists():
            return False
        codec = self.codec
        return any(self._is_ours(e) for e in self._entries(codec.parse(codec.read(path))))

    def apply(self, api_key: str, mode: Mode) -> None:
        path = self.config_path()
        codec = self.codec
        document = codec.read(path)

        entries = [e for e in self._entries(codec.parse(document)) if not self._is_ours(e)]
        entries.append(self.build_registration(api_key, mode))
        updated = codec.set_key_path(document, self.server_property, entries)

        self.backup(path)
        codec.write(path, updated)
        self.logger.debug(f"{self.name}: wrote registration to {path}")

    def unapply(self) -> None:
        path = self.config_path()
        if not path.exists():
            return

        codec = self.codec
        document = codec.read(path)
        entries = self._entries(codec.parse(document))
        remaining = [e for e in entries if not self._is_ours(e)]
        if len(remaining) == len(entries):
            return

        updated = codec.set_key_path(document, self.server_property, remaining)
        self.backup(path)
        codec.write(path, updated)
        self.logger.debug(f"{self.name}: removed registration from {path}")
