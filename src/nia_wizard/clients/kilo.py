# Kilo Code client
from nia_wizard.clients.roo import RooCodeClient


class KiloCodeClient(RooCodeClient):
    """Kilo Code VS Code extension (kilocode.kilocode).

    ABOUTME: Same file name and entry shape as Roo Code, different extension dir
    """

    name = "Kilo Code"
    docs_url = "https://kilocode.ai/docs/features/mcp/using-mcp-in-kilo-code"
    extension_id = "kilocode.kilocode"
