# ABOUTME: Locating and invoking coding-agent CLI binaries
# ABOUTME: run_cli reports failures as values so callers can fall back
import logging
import os
import shutil
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

# ABOUTME: Install directories checked before falling back to PATH
COMMON_BIN_DIRS = (
    Path("~/.bun/bin"),
    Path("~/.npm/bin"),
    Path("~/.yarn/bin"),
    Path("/usr/local/bin"),
    Path("/opt/homebrew/bin"),
)


@dataclass(frozen=True)
class CLIResult:
    """Outcome of one CLI invocation.

    ABOUTME: ok is True only for a clean exit code 0
    ABOUTME: error explains spawn failures, timeouts and non-zero exits
    """
    ok: bool
    returncode: int | None = None
    stdout: str = ""
    stderr: str = ""
    error: str | None = None


def _is_executable(path: Path) -> bool:
    if not path.is_file():
        return False
    if sys.platform != "win32":
        return os.access(path, os.X_OK)
    return True


def run_cli(
    binary: str,
    args: list[str],
    timeout: float = 30.0,
    log: logging.Logger | None = None,
) -> CLIResult:
    """Run `binary args...` and capture its output.

    ABOUTME: Never raises for spawn errors, timeouts or non-zero exits
    ABOUTME: Arguments are passed as a list, never through a shell

    Args:
        binary: Executable name or path
        args: Arguments after the binary
        timeout: Seconds before the process is killed
        log: Logger for the debug trace (defaults to module logger)

    Returns:
        CLIResult describing what happened
    """
    log = log or logger
    log.debug(f"Running: {binary} {' '.join(args)}")

    try:
        result = subprocess.run(
            [binary, *args],
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
        )
    except subprocess.TimeoutExpired:
        log.debug(f"{binary} timed out after {timeout}s")
        return CLIResult(ok=False, error=f"'{binary} {' '.join(args[:2])}' timed out after {timeout:g}s")
    except OSError as e:
        log.debug(f"Failed to start {binary}: {e}")
        return CLIResult(ok=False, error=f"Failed to run {binary}: {e}")

    stdout = result.stdout or ""
    stderr = result.stderr or ""
    if result.returncode != 0:
        detail = (stderr or stdout).strip()
        log.debug(f"{binary} exited with {result.returncode}: {detail}")
        return CLIResult(
            ok=False,
            returncode=result.returncode,
            stdout=stdout,
            stderr=stderr,
            error=detail or f"exit code {result.returncode}",
        )

    return CLIResult(ok=True, returncode=0, stdout=stdout, stderr=stderr)


class BinaryLocator:
    """Finds an agent's executable and checks that it runs.

    ABOUTME: Search order: extra paths, common install dirs, then PATH
    ABOUTME: The resolved path is cached per instance
    """

    def __init__(
        self,
        binary: str,
        extra_paths: tuple[Path, ...] = (),
        timeout: float = 10.0,
        log: logging.Logger | None = None,
    ) -> None:
        self.binary = binary
        self.extra_paths = extra_paths
        self.timeout = timeout
        self._log = log or logger
        self._resolved: str | None = None

    def candidates(self) -> list[Path]:
        """Fixed locations to try before PATH, in order."""
        dirs = [d.expanduser() / self.binary for d in COMMON_BIN_DIRS]
        return [p.expanduser() for p in self.extra_paths] + dirs

    def locate(self) -> str | None:
        """Return the executable path, or None if the binary is absent."""
        if self._resolved:
            return self._resolved

        for candidate in self.candidates():
            if _is_executable(candidate):
                self._log.debug(f"Found {self.binary} binary at: {candidate}")
                self._resolved = str(candidate)
                return self._resolved

        on_path = shutil.which(self.binary)
        if on_path:
            self._log.debug(f"Found {self.binary} on PATH: {on_path}")
            self._resolved = on_path
            return self._resolved

        self._log.debug(f"{self.binary} not found")
        return None

    def responds(self) -> bool:
        """True if the binary is found and `--version` exits cleanly."""
        binary = self.locate()
        if binary is None:
            return False
        return run_cli(binary, ["--version"], timeout=self.timeout, log=self._log).ok
