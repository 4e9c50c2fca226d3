# GitHub Copilot clients
import sys
from pathlib import Path
from typing import Any

from nia_wizard.clients.base import ConfigFileClient, user_profile_dir
from nia_wizard.models import Mode

# ABOUTME: Tools Copilot is allowed to call
COPILOT_TOOLS = ["index", "search", "manage_resource", "nia_web_search", "nia_deep_research_agent"]


class CopilotCLIClient(ConfigFileClient):
    """Copilot CLI (~/.copilot/mcp-config.json).

    ABOUTME: Local entries are tagged type: local, remote type: http
    """

    name = "Copilot CLI"
    docs_url = "https://docs.github.com/en/copilot/how-tos/use-copilot-agents/use-copilot-cli"
    local_type = "local"

    def default_config_path(self) -> Path:
        home = user_profile_dir() if sys.platform == "win32" else Path.home()
        return home / ".copilot" / "mcp-config.json"

    def build_registration(self, api_key: str, mode: Mode) -> dict[str, Any]:
        registration = self.registration(api_key, mode)
        server_type = self.local_type if registration.is_local else "http"
        return {"type": server_type, **registration.to_dict(), "tools": list(COPILOT_TOOLS)}


class CopilotAgentClient(CopilotCLIClient):
    """Copilot coding agent, configured per repository.

    ABOUTME: Writes .github/copilot-mcp.json relative to the working directory
    ABOUTME: Detected when the working directory has a .github folder
    """

    name = "Copilot Coding Agent"
    docs_url = "https://docs.github.com/en/copilot/how-tos/use-copilot-agents/coding-agent/extend-coding-agent-with-mcp"
    note = "Configures the repository in the current directory"
    local_type = "stdio"

    def default_config_path(self) -> Path:
        return Path.cwd() / ".github" / "copilot-mcp.json"

    def probe_paths(self) -> list[Path]:
        return [self.config_path().parent]
