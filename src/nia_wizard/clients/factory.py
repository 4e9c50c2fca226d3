# Factory (droid) client
import shlex

from nia_wizard.clients.base import CLIClient
from nia_wizard.models import SERVER_NAME, Mode


class FactoryClient(CLIClient):
    """Factory, configured with `droid mcp add`.

    ABOUTME: Local servers are passed as one command string
    """

    name = "Factory"
    docs_url = "https://docs.factory.ai/cli/configuration/mcp"
    note = "Uses droid CLI for configuration"
    binary = "droid"

    def add_args(self, api_key: str, mode: Mode) -> list[str]:
        registration = self.registration(api_key, mode)
        if not registration.is_local:
            args = ["mcp", "add", SERVER_NAME, registration.url or "", "--type", "http"]
            for key, value in registration.headers.items():
                args += ["--header", f"{key}: {value}"]
            return args

        command = shlex.join([registration.command or "", *registration.args])
        args = ["mcp", "add", SERVER_NAME, command]
        for key, value in registration.env.items():
            args += ["--env", f"{key}={value}"]
        return args
