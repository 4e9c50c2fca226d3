# ABOUTME: Tests for the Augment Code client (list of servers in VS Code settings)
import json
from pathlib import Path

from nia_wizard.clients.augment import AugmentClient
from nia_wizard.utils import jsonc

API_KEY = "nk_test123"

OTHER = {"name": "other", "command": "node", "args": ["server.js"]}


def _settings(path: Path) -> dict:
    return jsonc.parse(path.read_text())


def test_add_appends_entry(tmp_path: Path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({
        "editor.fontSize": 14,
        "augment.advanced": {"mcpServers": [OTHER]},
    }, indent=2))
    client = AugmentClient(config_path=path)

    assert client.add(API_KEY, "remote").success

    data = _settings(path)
    servers = data["augment.advanced"]["mcpServers"]
    assert servers[0] == OTHER
    assert servers[1]["name"] == "nia"
    assert servers[1]["command"] == "pipx"
    assert data["editor.fontSize"] == 14
    assert client.is_installed()


def test_reinstall_keeps_single_entry(tmp_path: Path):
    path = tmp_path / "settings.json"
    client = AugmentClient(config_path=path)

    client.add("nk_old", "local")
    client.add(API_KEY, "local")

    servers = _settings(path)["augment.advanced"]["mcpServers"]
    assert len(servers) == 1
    assert servers[0]["env"]["NIA_API_KEY"] == API_KEY


def test_remove_keeps_other_entries(tmp_path: Path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"augment.advanced": {"mcpServers": [OTHER]}}))
    client = AugmentClient(config_path=path)
    client.add(API_KEY, "local")

    assert client.remove().success

    assert _settings(path)["augment.advanced"]["mcpServers"] == [OTHER]
    assert not client.is_installed()


def test_non_list_value_fails(tmp_path: Path):
    path = tmp_path / "settings.json"
    original = json.dumps({"augment.advanced": {"mcpServers": {"nia": {}}}})
    path.write_text(original)

    outcome = AugmentClient(config_path=path).add(API_KEY, "local")

    assert not outcome.success
    assert "Expected a list" in outcome.error
    assert path.read_text() == original
