# ABOUTME: Tests for the Codex CLI (CLI first, TOML fallback) and Codex App clients
# ABOUTME: config.toml edits are verified by re-parsing with tomli
from pathlib import Path
from unittest.mock import MagicMock

import tomli

from nia_wizard.clients.codex import CodexAppClient, CodexCLIClient, codex_config_path
from nia_wizard.models import InstallMechanism

API_KEY = "nk_test123"

EXISTING = """model = "o3"

[mcp_servers.other]
command = "npx"
args = ["-y", "other-server"]
"""


def _load(path: Path) -> dict:
    return tomli.loads(path.read_text())


def test_default_path(home: Path):
    assert codex_config_path() == home / ".codex" / "config.toml"
    assert CodexCLIClient().config_path() == home / ".codex" / "config.toml"


def test_mechanisms():
    assert CodexCLIClient.install_mechanism == InstallMechanism.HYBRID
    assert CodexAppClient.install_mechanism == InstallMechanism.CONFIG_FILE
    assert not CodexCLIClient.supports_remote


class TestCodexCLIWithBinary:
    """The codex binary is present."""

    def test_add_uses_cli_and_leaves_file_alone(self, tmp_path: Path, fake_run):
        path = tmp_path / "config.toml"
        client = CodexCLIClient(config_path=path)

        assert client.add(API_KEY, "remote").success

        assert fake_run.call_args_list[-1].args[0] == [
            "/usr/bin/codex", "mcp", "add", "nia",
            "--env", f"NIA_API_KEY={API_KEY}",
            "--env", "NIA_API_URL=https://apigcp.trynia.ai/",
            "--", "pipx", "run", "--no-cache", "nia-mcp-server",
        ]
        assert not path.exists()

    def test_cli_failure_falls_back_to_file(self, tmp_path: Path, fake_run):
        fake_run.return_value = MagicMock(returncode=1, stdout="", stderr="unknown subcommand")
        path = tmp_path / "config.toml"
        path.write_text(EXISTING)

        assert CodexCLIClient(config_path=path).add(API_KEY, "local").success

        data = _load(path)
        assert data["mcp_servers"]["nia"]["command"] == "pipx"

    def test_is_installed_from_json_list(self, tmp_path: Path, fake_run):
        fake_run.return_value = MagicMock(
            returncode=0, stdout='[{"name": "nia", "command": "pipx"}]', stderr=""
        )
        assert CodexCLIClient(config_path=tmp_path / "config.toml").is_installed()

    def test_unexpected_list_output_checks_file(self, tmp_path: Path, fake_run):
        fake_run.return_value = MagicMock(returncode=0, stdout="nia  pipx", stderr="")
        path = tmp_path / "config.toml"
        assert not CodexCLIClient(config_path=path).is_installed()

        path.write_text('[mcp_servers.nia]\ncommand = "pipx"\n')
        assert CodexCLIClient(config_path=path).is_installed()


class TestCodexCLIWithoutBinary:
    """No codex binary: config.toml is edited directly."""

    def test_add_writes_toml(self, tmp_path: Path, no_binaries):
        path = tmp_path / "config.toml"
        path.write_text(EXISTING)
        client = CodexCLIClient(config_path=path)

        assert client.add(API_KEY, "local").success

        data = _load(path)
        assert data["model"] == "o3"
        assert data["mcp_servers"]["other"]["args"] == ["-y", "other-server"]
        assert data["mcp_servers"]["nia"] == {
            "command": "pipx",
            "args": ["run", "--no-cache", "nia-mcp-server"],
            "env": {
                "NIA_API_KEY": API_KEY,
                "NIA_API_URL": "https://apigcp.trynia.ai/",
            },
        }
        assert client.is_installed()

    def test_add_twice_is_idempotent(self, tmp_path: Path, no_binaries):
        path = tmp_path / "config.toml"
        path.write_text(EXISTING)
        client = CodexCLIClient(config_path=path)

        client.add(API_KEY, "local")
        first = path.read_text()
        client.add(API_KEY, "local")

        assert path.read_text() == first

    def test_reinstall_replaces_old_key(self, tmp_path: Path, no_binaries):
        path = tmp_path / "config.toml"
        path.write_text(EXISTING)
        client = CodexCLIClient(config_path=path)

        client.add("nk_old", "local")
        client.add("nk_new", "local")

        assert _load(path)["mcp_servers"]["nia"]["env"]["NIA_API_KEY"] == "nk_new"

    def test_remove(self, tmp_path: Path, no_binaries):
        path = tmp_path / "config.toml"
        path.write_text(EXISTING)
        client = CodexCLIClient(config_path=path)
        client.add(API_KEY, "local")

        assert client.remove().success

        assert _load(path) == tomli.loads(EXISTING)
        assert not client.is_installed()

    def test_invalid_toml_is_not_touched(self, tmp_path: Path, no_binaries):
        path = tmp_path / "config.toml"
        path.write_text("[mcp_servers\n")

        outcome = CodexCLIClient(config_path=path).add(API_KEY, "local")

        assert not outcome.success
        assert "Invalid TOML" in outcome.error
        assert path.read_text() == "[mcp_servers\n"

    def test_detected_by_config_dir(self, home: Path, no_binaries):
        assert not CodexCLIClient().detect()
        (home / ".codex").mkdir()
        assert CodexCLIClient().detect()


class TestCodexApp:
    """Tests for the Codex desktop app client."""

    def test_add_and_remove(self, tmp_path: Path):
        path = tmp_path / "config.toml"
        client = CodexAppClient(config_path=path)

        assert client.add(API_KEY, "remote").success
        assert _load(path)["mcp_servers"]["nia"]["command"] == "pipx"
        assert client.is_installed()

        assert client.remove().success
        assert "nia" not in _load(path).get("mcp_servers", {})
