# ABOUTME: Shared fixtures for nia-wizard tests
# ABOUTME: Every test gets an isolated, empty home directory
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from nia_wizard.utils.process import BinaryLocator

API_KEY = "nk_test123"


@pytest.fixture
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME at an empty directory and pin the platform to Linux."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    for var in ("XDG_CONFIG_HOME", "APPDATA", "USERPROFILE"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.chdir(tmp_path)
    return home_dir


@pytest.fixture
def no_binaries(monkeypatch: pytest.MonkeyPatch) -> None:
    """No agent CLI is installed."""
    monkeypatch.setattr(BinaryLocator, "locate", lambda self: None)


@pytest.fixture
def fake_run(monkeypatch: pytest.MonkeyPatch) -> MagicMock:
    """Every agent CLI is found; subprocess.run is a mock returning exit 0."""
    monkeypatch.setattr(BinaryLocator, "locate", lambda self: f"/usr/bin/{self.binary}")
    run = MagicMock()
    run.return_value = MagicMock(returncode=0, stdout="", stderr="")
    monkeypatch.setattr("nia_wizard.utils.process.subprocess.run", run)
    return run
