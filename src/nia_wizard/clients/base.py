# Client base classes for nia-wizard
import logging
import os
import re
import sys
from pathlib import Path
from typing import Any, ClassVar

from nia_wizard.codec import ConfigCodec, codec_for
from nia_wizard.config import Settings
from nia_wizard.errors import CLIInvocationError, UnsupportedOperationError, WizardError
from nia_wizard.models import (
    SERVER_NAME,
    ConfigFormat,
    InstallMechanism,
    InstallOutcome,
    Mode,
    ServerRegistration,
)
from nia_wizard.registration import build_registration
from nia_wizard.utils.backup import create_backup
from nia_wizard.utils.process import BinaryLocator, CLIResult, run_cli


def appdata_dir() -> Path:
    """%APPDATA% on Windows, with the usual fallback."""
    return Path(os.environ.get("APPDATA") or Path.home() / "AppData" / "Roaming")


def user_profile_dir() -> Path:
    """%USERPROFILE% on Windows, home elsewhere."""
    return Path(os.environ.get("USERPROFILE") or Path.home())


def xdg_config_dir() -> Path:
    return Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")


def app_support_dir() -> Path:
    """Per-user application data root for the current OS.

    ABOUTME: macOS: ~/Library/Application Support
    ABOUTME: Windows: %APPDATA%
    ABOUTME: Linux and others: ~/.config
    """
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    if sys.platform == "win32":
        return appdata_dir()
    return Path.home() / ".config"


def vscode_user_dir() -> Path:
    """VS Code's User directory (settings.json, mcp.json, globalStorage)."""
    return app_support_dir() / "Code" / "User"


def vscode_extension_installed(extension_id: str) -> bool:
    """Whether ~/.vscode/extensions holds any version of an extension.

    ABOUTME: Extension folders are named {publisher}.{name}-{version}
    """
    extensions_dir = Path.home() / ".vscode" / "extensions"
    if not extensions_dir.is_dir():
        return False
    prefix = f"{extension_id.lower()}-"
    return any(
        entry.is_dir() and entry.name.lower().startswith(prefix)
        for entry in extensions_dir.iterdir()
    )


def _shared_roots() -> set[Path]:
    home = Path.home()
    return {
        home,
        home / ".config",
        home / "Library" / "Application Support",
        xdg_config_dir(),
        appdata_dir(),
        user_profile_dir(),
    }


class MCPClient:
    """Base for every coding-agent client.

    ABOUTME: Subclasses declare identity as class attributes and implement
    ABOUTME: probe/check_installed/apply/unapply; the public operations wrap
    ABOUTME: those so detection and status never raise and add/remove return outcomes
    """

    name: ClassVar[str] = ""
    docs_url: ClassVar[str] = ""
    note: ClassVar[str] = ""
    install_mechanism: ClassVar[InstallMechanism] = InstallMechanism.UNSUPPORTED
    config_format: ClassVar[ConfigFormat] = ConfigFormat.NONE
    server_property: ClassVar[tuple[str, ...]] = ()
    supports_local: ClassVar[bool] = True
    supports_remote: ClassVar[bool] = True

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if not cls.supports_local and not cls.supports_remote:
            raise TypeError(f"{cls.__name__} must support at least one of local/remote mode")

    def __init__(
        self,
        settings: Settings | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self._logger = logger or logging.getLogger(type(self).__module__)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    # -- modes and payloads -------------------------------------------------

    def resolve_mode(self, mode: Mode) -> Mode:
        """Requested mode, or the only mode this client can use.

        ABOUTME: The requested mode is a hint; single-mode clients ignore it
        """
        if mode == "remote" and not self.supports_remote:
            return "local"
        if mode == "local" and not self.supports_local:
            return "remote"
        return mode

    def registration(self, api_key: str, mode: Mode) -> ServerRegistration:
        """Canonical registration for the mode this client will actually use."""
        return build_registration(api_key, self.resolve_mode(mode), self.settings)

    def build_registration(self, api_key: str, mode: Mode) -> dict[str, Any]:
        """Client-specific payload stored under SERVER_NAME.

        ABOUTME: Default is the canonical shape; subclasses add or rename fields
        """
        return self.registration(api_key, mode).to_dict()

    # -- operations ---------------------------------------------------------

    def config_path(self) -> Path:
        raise UnsupportedOperationError(f"{self.name} uses CLI configuration")

    def detect(self) -> bool:
        """Side-effect-free probe; any failure means 'not supported'."""
        try:
            supported = bool(self.probe())
        except Exception as e:
            self.logger.debug(f"{self.name}: detection failed: {e}")
            return False
        self.logger.debug(f"{self.name}: {'supported' if supported else 'not supported'}")
        return supported

    def is_installed(self) -> bool:
        """Whether SERVER_NAME is registered; read failures count as no."""
        try:
            return bool(self.check_installed())
        except Exception as e:
            self.logger.debug(f"{self.name}: could not check installation: {e}")
            return False

    def add(self, api_key: str, mode: Mode) -> InstallOutcome:
        resolved = self.resolve_mode(mode)
        if resolved != mode:
            self.logger.debug(f"{self.name}: using {resolved} mode instead of {mode}")
        try:
            self.apply(api_key, resolved)
        except (WizardError, OSError) as e:
            self.logger.debug(f"{self.name}: failed to add server: {e}")
            return InstallOutcome.failed(str(e))
        return InstallOutcome.ok()

    def remove(self) -> InstallOutcome:
        try:
            self.unapply()
        except (WizardError, OSError) as e:
            self.logger.debug(f"{self.name}: failed to remove server: {e}")
            return InstallOutcome.failed(str(e))
        return InstallOutcome.ok()

    # -- subclass hooks -----------------------------------------------------

    def probe(self) -> bool:
        raise NotImplementedError

    def check_installed(self) -> bool:
        raise NotImplementedError

    def apply(self, api_key: str, mode: Mode) -> None:
        raise NotImplementedError

    def unapply(self) -> None:
        raise NotImplementedError


class ConfigFileClient(MCPClient):
    """Client configured by editing its own config file.

    ABOUTME: Registration lives at server_property + (SERVER_NAME,)
    ABOUTME: Existing files are backed up before they are modified
    """

    install_mechanism = InstallMechanism.CONFIG_FILE
    config_format = ConfigFormat.JSON
    server_property = ("mcpServers",)

    # sys.platform values this client exists on; None means everywhere
    platforms: ClassVar[tuple[str, ...] | None] = None

    def __init__(
        self,
        config_path: Path | None = None,
        settings: Settings | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        super().__init__(settings=settings, logger=logger)
        self._config_path = config_path

    def default_config_path(self) -> Path:
        raise NotImplementedError

    def config_path(self) -> Path:
        """Path to the client config file.

        ABOUTME: Auto-detects path based on OS unless one was given
        """
        return self._config_path if self._config_path else self.default_config_path()

    @property
    def codec(self) -> ConfigCodec:
        return codec_for(self.config_format)

    def platform_supported(self) -> bool:
        if self.platforms is None:
            return True
        return sys.platform in self.platforms

    def probe_paths(self) -> list[Path]:
        """Paths whose existence shows the app is installed.

        ABOUTME: Config dir or its parent; the file itself may not exist yet
        ABOUTME: Shared roots like ~ or ~/.config never count as evidence
        """
        config_dir = self.config_path().parent
        shared = _shared_roots()
        return [p for p in (config_dir, config_dir.parent) if p not in shared]

    def probe(self) -> bool:
        if not self.platform_supported():
            return False
        return any(p.exists() for p in self.probe_paths())

    def _servers(self, data: dict[str, Any]) -> Any:
        node: Any = data
        for key in self.server_property:
            if not isinstance(node, dict):
                return None
            node = node.get(key)
        return node

    def check_installed(self) -> bool:
        path = self.config_path()
        if not path.exists():
            return False
        codec = self.codec
        servers = self._servers(codec.parse(codec.read(path)))
        return isinstance(servers, dict) and isinstance(servers.get(SERVER_NAME), dict)

    def backup(self, path: Path) -> None:
        if self.settings.backup_dir is None or not path.exists():
            return
        create_backup(path, self.settings.backup_dir, self.name)

    def apply(self, api_key: str, mode: Mode) -> None:
        path = self.config_path()
        codec = self.codec
        document = codec.read(path)

        payload = self.build_registration(api_key, mode)
        updated = codec.set_key_path(document, (*self.server_property, SERVER_NAME), payload)

        self.backup(path)
        codec.write(path, updated)
        self.logger.debug(f"{self.name}: wrote {mode} registration to {path}")

    def unapply(self) -> None:
        path = self.config_path()
        if not path.exists():
            self.logger.debug(f"{self.name}: {path} does not exist, nothing to remove")
            return

        codec = self.codec
        document = codec.read(path)
        updated = codec.delete_key_path(document, (*self.server_property, SERVER_NAME))
        if updated == document:
            self.logger.debug(f"{self.name}: no registration in {path}")
            return

        self.backup(path)
        codec.write(path, updated)
        self.logger.debug(f"{self.name}: removed registration from {path}")


class CLIDriven:
    """Shared plumbing for clients that own a CLI binary.

    ABOUTME: Subclasses set `binary` and build argument lists; run() turns
    ABOUTME: a missing binary into a failed CLIResult instead of raising
    """

    binary: ClassVar[str] = ""
    extra_paths: ClassVar[tuple[Path, ...]] = ()

    name: ClassVar[str]
    settings: Settings
    logger: logging.Logger
    _locator: BinaryLocator | None = None

    @property
    def locator(self) -> BinaryLocator:
        if self._locator is None:
            self._locator = BinaryLocator(
                self.binary,
                self.extra_paths,
                timeout=self.settings.cli_timeout,
                log=self.logger,
            )
        return self._locator

    def run(self, args: list[str]) -> CLIResult:
        binary = self.locator.locate()
        if binary is None:
            return CLIResult(ok=False, error=f"{self.name} CLI ({self.binary}) not found")
        return run_cli(binary, args, timeout=self.settings.cli_timeout, log=self.logger)

    def add_args(self, api_key: str, mode: Mode) -> list[str]:
        raise NotImplementedError

    def remove_args(self) -> list[str]:
        return ["mcp", "remove", SERVER_NAME]

    def list_args(self) -> list[str]:
        return ["mcp", "list"]

    def server_listed(self, output: str) -> bool:
        """Whether list output mentions SERVER_NAME as a whole word."""
        return re.search(rf"(?<![\w-]){re.escape(SERVER_NAME)}(?![\w-])", output) is not None

    def cli_installed(self) -> bool | None:
        """True/False from the list command, None if it couldn't run."""
        result = self.run(self.list_args())
        if not result.ok:
            return None
        return self.server_listed(result.stdout)

    def cli_add(self, api_key: str, mode: Mode) -> CLIResult:
        """Register via the CLI, replacing any existing entry.

        ABOUTME: Removes first so a re-add overwrites instead of erroring
        """
        removed = self.run(self.remove_args())
        if not removed.ok:
            self.logger.debug(f"{self.name}: pre-add remove skipped: {removed.error}")
        return self.run(self.add_args(api_key, mode))


class CLIClient(CLIDriven, MCPClient):
    """Client configured only through its own CLI."""

    install_mechanism = InstallMechanism.NATIVE_CLI

    def probe(self) -> bool:
        return self.locator.responds()

    def check_installed(self) -> bool:
        return bool(self.cli_installed())

    def apply(self, api_key: str, mode: Mode) -> None:
        result = self.cli_add(api_key, mode)
        if not result.ok:
            raise CLIInvocationError(
                f"Failed to add server to {self.name}: {result.error}", result.returncode
            )

    def unapply(self) -> None:
        result = self.run(self.remove_args())
        if not result.ok:
            raise CLIInvocationError(
                f"Failed to remove server from {self.name}: {result.error}", result.returncode
            )


class HybridCLIClient(CLIDriven, ConfigFileClient):
    """Client with a CLI and a config file it also reads.

    ABOUTME: The CLI is tried first; the file is edited only if the CLI
    ABOUTME: is missing or fails, never after it reported success
    """

    install_mechanism = InstallMechanism.HYBRID

    def probe(self) -> bool:
        return self.locator.responds() or super().probe()

    def check_installed(self) -> bool:
        if self.cli_installed():
            return True
        return super().check_installed()

    def apply(self, api_key: str, mode: Mode) -> None:
        result = self.cli_add(api_key, mode)
        if result.ok:
            self.logger.debug(f"{self.name}: registered via CLI")
            return
        self.logger.debug(f"{self.name}: CLI failed ({result.error}), editing config file")
        super().apply(api_key, mode)

    def unapply(self) -> None:
        result = self.run(self.remove_args())
        if result.ok:
            self.logger.debug(f"{self.name}: removed via CLI")
            return
        self.logger.debug(f"{self.name}: CLI failed ({result.error}), editing config file")
        super().unapply()
