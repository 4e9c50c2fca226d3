# ABOUTME: Utility modules for nia-wizard
# ABOUTME: Exports backup, validation and subprocess helpers

from nia_wizard.utils.backup import cleanup_old_backups, create_backup
from nia_wizard.utils.process import BinaryLocator, CLIResult, run_cli
from nia_wizard.utils.validation import (
    ValidationError,
    local_mode_available,
    validate_api_key,
    validate_command_exists,
    validate_url,
)

__all__ = [
    "BinaryLocator",
    "CLIResult",
    "run_cli",
    "ValidationError",
    "local_mode_available",
    "validate_api_key",
    "validate_command_exists",
    "validate_url",
    "create_backup",
    "cleanup_old_backups",
]
