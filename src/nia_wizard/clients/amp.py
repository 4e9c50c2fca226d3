# Amp client
from nia_wizard.clients.base import CLIClient
from nia_wizard.models import SERVER_NAME, Mode


class AmpClient(CLIClient):
    """Amp, configured with `amp mcp add`; remote endpoint only."""

    name = "Amp"
    docs_url = "https://ampcode.com/manual#mcp"
    note = "Only supports remote mode, uses CLI configuration"
    supports_local = False
    binary = "amp"

    def add_args(self, api_key: str, mode: Mode) -> list[str]:
        registration = self.registration(api_key, mode)
        args = ["mcp", "add", SERVER_NAME]
        for key, value in registration.headers.items():
            args += ["--header", f"{key}={value}"]
        return [*args, registration.url or ""]
