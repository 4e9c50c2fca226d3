# Qodo Gen client
from pathlib import Path

from nia_wizard.clients.base import ConfigFileClient, vscode_extension_installed, vscode_user_dir
from nia_wizard.models import ConfigFormat


class QodoGenClient(ConfigFileClient):
    """Qodo Gen VS Code extension (Codium.codium).

    ABOUTME: Reads mcpServers from VS Code user settings.json
    ABOUTME: Detected by the installed extension, not the shared settings dir
    """

    name = "Qodo Gen"
    docs_url = "https://docs.qodo.ai/qodo-documentation/qodo-gen/tools-mcps/agentic-tools-mcps"
    config_format = ConfigFormat.JSONC

    def default_config_path(self) -> Path:
        return vscode_user_dir() / "settings.json"

    def probe(self) -> bool:
        return vscode_extension_installed("codium.codium")
