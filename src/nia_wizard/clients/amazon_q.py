# Amazon Q Developer client
from pathlib import Path

from nia_wizard.clients.base import ConfigFileClient


class AmazonQClient(ConfigFileClient):
    """Amazon Q Developer CLI (~/.aws/amazonq/mcp.json)."""

    name = "Amazon Q"
    docs_url = "https://docs.aws.amazon.com/amazonq/latest/qdeveloper-ug/command-line-mcp-configuration.html"
    note = "Only supports local (stdio) mode"
    supports_remote = False

    def default_config_path(self) -> Path:
        return Path.home() / ".aws" / "amazonq" / "mcp.json"

    def probe_paths(self) -> list[Path]:
        # ~/.aws alone only means the AWS CLI is configured
        return [self.config_path().parent]
