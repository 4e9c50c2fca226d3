# ABOUTME: Validation utilities for wizard inputs
# ABOUTME: API key format, endpoint URLs and local-mode prerequisites
import shutil
from dataclasses import dataclass
from urllib.parse import urlparse

# ABOUTME: Every Nia API key starts with this prefix
API_KEY_PREFIX = "nk_"


@dataclass(frozen=True)
class ValidationError:
    """Represents a validation error or warning.

    ABOUTME: Uses frozen dataclass for immutability
    ABOUTME: Severity level distinguishes between blocking errors and warnings
    """
    field: str
    message: str
    severity: str  # 'error' or 'warning'


def validate_api_key(api_key: str | None) -> ValidationError | None:
    """Validate the shape of an API key.

    ABOUTME: Only checks the prefix and that something follows it
    ABOUTME: The key itself is verified by the server, not here

    Examples:
        >>> validate_api_key("nk_abc123") is None
        True
        >>> validate_api_key("sk-abc").message
        "API key must start with 'nk_'"
    """
    if not api_key or not api_key.strip():
        return ValidationError(
            field="api_key",
            message="API key is required",
            severity="error",
        )

    api_key = api_key.strip()
    if not api_key.startswith(API_KEY_PREFIX):
        return ValidationError(
            field="api_key",
            message=f"API key must start with '{API_KEY_PREFIX}'",
            severity="error",
        )
    if len(api_key) == len(API_KEY_PREFIX):
        return ValidationError(
            field="api_key",
            message="API key is incomplete",
            severity="error",
        )
    return None


def validate_url(url: str) -> ValidationError | None:
    """Validate that a URL is properly formatted.

    ABOUTME: Uses urllib.parse for URL parsing
    ABOUTME: Requires HTTP or HTTPS scheme
    ABOUTME: Returns None if URL valid, ValidationError otherwise

    Args:
        url: URL string to validate

    Returns:
        ValidationError if URL invalid, None otherwise
    """
    try:
        parsed = urlparse(url)
        if parsed.scheme not in ("http", "https"):
            return ValidationError(
                field="url",
                message=f"URL must use HTTP or HTTPS scheme: {url}",
                severity="error"
            )
        if not parsed.netloc:
            return ValidationError(
                field="url",
                message=f"URL missing host/domain: {url}",
                severity="error"
            )
    except Exception as e:
        return ValidationError(
            field="url",
            message=f"Invalid URL format '{url}': {e}",
            severity="error"
        )
    return None


def validate_command_exists(command: str) -> ValidationError | None:
    """Validate that a command exists on the system.

    ABOUTME: Uses shutil.which() for cross-platform command lookup
    ABOUTME: Returns None if command found, ValidationError otherwise
    """
    if shutil.which(command) is None:
        return ValidationError(
            field="command",
            message=f"Command not found: {command}",
            severity="error"
        )
    return None


def local_mode_available(command: str = "pipx") -> bool:
    """Whether local (stdio) mode can launch the server on this machine.

    ABOUTME: Installing the runtime itself is left to the bootstrap step
    """
    return validate_command_exists(command) is None
