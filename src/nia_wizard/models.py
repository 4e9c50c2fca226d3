# Core data models for nia-wizard
import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Literal, Protocol, runtime_checkable

# ABOUTME: Key under which the registration lives in every client config
SERVER_NAME = "nia"

Mode = Literal["local", "remote"]


class InstallMechanism(str, Enum):
    """How a client is told about an external tool server."""

    CONFIG_FILE = "config-file"
    NATIVE_CLI = "native-cli"
    HYBRID = "hybrid-cli-then-config-file"
    UNSUPPORTED = "unsupported"


class ConfigFormat(str, Enum):
    """On-disk format of a client's config file."""

    JSON = "json"
    JSONC = "jsonc"
    TOML = "toml"
    NONE = "none"


@dataclass(frozen=True)
class ServerRegistration:
    """Canonical connection payload for the MCP server.

    ABOUTME: Uses frozen dataclass to prevent accidental mutation
    ABOUTME: stdio carries command/args/env, http carries url/headers
    ABOUTME: Clients adapt it into their own on-disk shape
    """
    name: str
    transport: Literal["stdio", "http"]
    command: str | None = None
    args: list[str] = field(default_factory=list)
    env: dict[str, str] = field(default_factory=dict)
    url: str | None = None
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def is_local(self) -> bool:
        return self.transport == "stdio"

    def to_dict(self) -> dict[str, Any]:
        """Default on-disk shape shared by most clients.

        ABOUTME: Fresh containers on every call so callers may mutate them
        """
        if self.transport == "stdio":
            return {
                "command": self.command,
                "args": list(self.args),
                "env": dict(self.env),
            }
        return {
            "url": self.url,
            "headers": dict(self.headers),
        }


@dataclass(frozen=True)
class InstallOutcome:
    """Result of a single client add/remove."""
    success: bool
    error: str | None = None

    @classmethod
    def ok(cls) -> "InstallOutcome":
        return cls(success=True)

    @classmethod
    def failed(cls, error: str) -> "InstallOutcome":
        return cls(success=False, error=error or "Unknown error")


@runtime_checkable
class ClientDescriptor(Protocol):
    """Protocol every coding-agent client implements.

    ABOUTME: Defines the interface the registry, detection and installer use
    ABOUTME: Uses @runtime_checkable for isinstance() support
    """

    name: str
    docs_url: str
    note: str
    install_mechanism: InstallMechanism
    config_format: ConfigFormat
    server_property: tuple[str, ...]
    supports_local: bool
    supports_remote: bool

    @property
    def logger(self) -> logging.Logger:
        ...

    def detect(self) -> bool:
        """Side-effect-free probe; never raises."""
        ...

    def config_path(self) -> Path:
        """Path to the client config file.

        ABOUTME: Raises UnsupportedOperationError for CLI-managed clients
        """
        ...

    def build_registration(self, api_key: str, mode: Mode) -> dict[str, Any]:
        """Client-specific payload stored under SERVER_NAME."""
        ...

    def is_installed(self) -> bool:
        """Whether SERVER_NAME is currently registered; never raises."""
        ...

    def add(self, api_key: str, mode: Mode) -> InstallOutcome:
        """Register (or overwrite) the server with this client."""
        ...

    def remove(self) -> InstallOutcome:
        """Unregister the server from this client."""
        ...
