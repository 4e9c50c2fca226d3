# Claude Code client
import re
from pathlib import Path

from nia_wizard.clients.base import CLIClient
from nia_wizard.models import SERVER_NAME, Mode


def parse_mcp_list_names(output: str) -> list[str]:
    """Parse server names from `claude mcp list` output.

    ABOUTME: Each server is printed as "name: command-or-url - status"

    Examples:
        >>> parse_mcp_list_names("nia: https://x/mcp (HTTP) - ✓ Connected")
        ['nia']
    """
    names: list[str] = []
    for raw_line in (output or "").splitlines():
        match = re.match(r"^([^:\r\n]+):\s+", raw_line.rstrip())
        if not match:
            continue
        name = match.group(1).strip()
        if name and name not in names:
            names.append(name)
    return names


class ClaudeCodeClient(CLIClient):
    """Claude Code, configured with `claude mcp` at user scope."""

    name = "Claude Code"
    docs_url = "https://docs.anthropic.com/en/docs/claude-code/mcp"
    binary = "claude"
    extra_paths = (Path("~/.claude/local/claude"),)

    def add_args(self, api_key: str, mode: Mode) -> list[str]:
        registration = self.registration(api_key, mode)
        if not registration.is_local:
            args = ["mcp", "add", "--transport", "http", SERVER_NAME, registration.url or ""]
            for key, value in registration.headers.items():
                args += ["--header", f"{key}: {value}"]
            return [*args, "-s", "user"]

        args = ["mcp", "add", SERVER_NAME]
        for key, value in registration.env.items():
            args += ["-e", f"{key}={value}"]
        return [*args, "-s", "user", "--", registration.command or "", *registration.args]

    def remove_args(self) -> list[str]:
        return ["mcp", "remove", "--scope", "user", SERVER_NAME]

    def server_listed(self, output: str) -> bool:
        return SERVER_NAME in parse_mcp_list_names(output)
