# ABOUTME: Tests for CLI binary discovery and invocation
# ABOUTME: subprocess.run is mocked; no real agent CLI is executed
import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

from nia_wizard.utils import process
from nia_wizard.utils.process import BinaryLocator, run_cli


def _completed(returncode=0, stdout="", stderr=""):
    return MagicMock(returncode=returncode, stdout=stdout, stderr=stderr)


class TestRunCli:
    """Tests for run_cli."""

    def test_success(self):
        with patch("nia_wizard.utils.process.subprocess.run", return_value=_completed(stdout="ok\n")) as run:
            result = run_cli("claude", ["mcp", "list"])

        assert result.ok
        assert result.returncode == 0
        assert result.stdout == "ok\n"
        args, kwargs = run.call_args
        assert args[0] == ["claude", "mcp", "list"]
        assert kwargs["capture_output"] is True
        assert "shell" not in kwargs

    def test_non_zero_exit_prefers_stderr(self):
        with patch("nia_wizard.utils.process.subprocess.run",
                   return_value=_completed(returncode=1, stdout="out", stderr="already exists\n")):
            result = run_cli("claude", ["mcp", "add"])

        assert not result.ok
        assert result.returncode == 1
        assert result.error == "already exists"

    def test_non_zero_exit_without_output(self):
        with patch("nia_wizard.utils.process.subprocess.run", return_value=_completed(returncode=2)):
            assert run_cli("amp", []).error == "exit code 2"

    def test_timeout(self):
        with patch("nia_wizard.utils.process.subprocess.run",
                   side_effect=subprocess.TimeoutExpired(cmd="codex", timeout=5)):
            result = run_cli("codex", ["mcp", "list"], timeout=5)

        assert not result.ok
        assert result.returncode is None
        assert "timed out after 5s" in result.error

    def test_spawn_failure(self):
        with patch("nia_wizard.utils.process.subprocess.run", side_effect=FileNotFoundError("no such file")):
            result = run_cli("droid", ["--version"])

        assert not result.ok
        assert "Failed to run droid" in result.error


class TestBinaryLocator:
    """Tests for BinaryLocator."""

    def test_extra_path_checked_first(self, tmp_path: Path):
        binary = tmp_path / "claude"
        locator = BinaryLocator("claude", extra_paths=(binary,))

        assert locator.candidates()[0] == binary
        with patch("nia_wizard.utils.process._is_executable", side_effect=lambda p: p == binary):
            assert locator.locate() == str(binary)

    def test_non_executable_candidate_skipped(self, tmp_path: Path):
        binary = tmp_path / "claude"
        binary.write_text("not executable")
        binary.chmod(0o644)
        locator = BinaryLocator("claude", extra_paths=(binary,))

        real = process._is_executable
        with patch("nia_wizard.utils.process._is_executable", side_effect=lambda p: p == binary and real(p)), \
                patch("nia_wizard.utils.process.shutil.which", return_value=None):
            assert locator.locate() is None

    def test_falls_back_to_path(self):
        locator = BinaryLocator("codex")
        with patch("nia_wizard.utils.process._is_executable", return_value=False), \
                patch("nia_wizard.utils.process.shutil.which", return_value="/usr/bin/codex"):
            assert locator.locate() == "/usr/bin/codex"

    def test_result_is_cached(self):
        locator = BinaryLocator("codex")
        with patch("nia_wizard.utils.process._is_executable", return_value=False), \
                patch("nia_wizard.utils.process.shutil.which", return_value="/usr/bin/codex") as which:
            locator.locate()
            locator.locate()
        assert which.call_count == 1

    def test_responds_runs_version(self):
        locator = BinaryLocator("amp")
        with patch.object(BinaryLocator, "locate", return_value="/usr/bin/amp"), \
                patch("nia_wizard.utils.process.subprocess.run", return_value=_completed()) as run:
            assert locator.responds()
        assert run.call_args[0][0] == ["/usr/bin/amp", "--version"]

    def test_responds_false_when_missing(self):
        locator = BinaryLocator("amp")
        with patch.object(BinaryLocator, "locate", return_value=None):
            assert not locator.responds()
