# nia-wizard - installs the Nia MCP server into coding agents
# ABOUTME: Version information
__version__ = "0.1.0"

# ABOUTME: Export core data models and settings
from nia_wizard.config import Settings, load_settings
from nia_wizard.errors import (
    CLIInvocationError,
    ConfigParseError,
    ConfigWriteError,
    UnsupportedOperationError,
    WizardError,
)
from nia_wizard.models import SERVER_NAME, ClientDescriptor, InstallOutcome, ServerRegistration

# ABOUTME: Export the registry and orchestration entry points
from nia_wizard.clients import get_all_clients
from nia_wizard.detection import detect_supported
from nia_wizard.install import InstallReport, RemoveReport, add_all, remove_all
from nia_wizard.registration import build_registration

__all__ = [
    "__version__",
    "SERVER_NAME",
    "Settings",
    "load_settings",
    "ClientDescriptor",
    "InstallOutcome",
    "ServerRegistration",
    "WizardError",
    "ConfigParseError",
    "ConfigWriteError",
    "CLIInvocationError",
    "UnsupportedOperationError",
    "get_all_clients",
    "detect_supported",
    "build_registration",
    "add_all",
    "remove_all",
    "InstallReport",
    "RemoveReport",
]
