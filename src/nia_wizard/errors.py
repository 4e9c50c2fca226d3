# Exception types for nia-wizard
# ABOUTME: Typed failures raised by the codec and client layers
# ABOUTME: Each also extends the matching built-in so generic handlers still catch it


class WizardError(Exception):
    """Base class for all nia-wizard errors."""


class ConfigParseError(WizardError, ValueError):
    """An existing config file could not be parsed.

    ABOUTME: Raised instead of silently discarding an unreadable file
    ABOUTME: Callers abort the add/remove for that client
    """

    def __init__(self, message: str, path: object | None = None) -> None:
        super().__init__(message)
        self.path = path


class ConfigWriteError(WizardError, OSError):
    """A config file could not be written, or the edit would corrupt it."""


class CLIInvocationError(WizardError):
    """An agent's own CLI failed to run or exited non-zero."""

    def __init__(self, message: str, returncode: int | None = None) -> None:
        super().__init__(message)
        self.returncode = returncode


class UnsupportedOperationError(WizardError, NotImplementedError):
    """The operation does not apply to this client.

    ABOUTME: e.g. config_path() on a client managed purely through its CLI
    """
