# ABOUTME: Tests for canonical server registrations
# ABOUTME: Local and remote payloads, settings overrides and determinism
from nia_wizard.config import Settings
from nia_wizard.models import SERVER_NAME, InstallOutcome
from nia_wizard.registration import (
    build_local_registration,
    build_registration,
    build_remote_registration,
)

API_KEY = "nk_test123"


def test_local_registration():
    registration = build_local_registration(API_KEY)

    assert registration.name == SERVER_NAME
    assert registration.transport == "stdio"
    assert registration.is_local
    assert registration.to_dict() == {
        "command": "pipx",
        "args": ["run", "--no-cache", "nia-mcp-server"],
        "env": {
            "NIA_API_KEY": API_KEY,
            "NIA_API_URL": "https://apigcp.trynia.ai/",
        },
    }


def test_remote_registration():
    registration = build_remote_registration(API_KEY)

    assert registration.transport == "http"
    assert not registration.is_local
    assert registration.to_dict() == {
        "url": "https://apigcp.trynia.ai/mcp",
        "headers": {"Authorization": f"Bearer {API_KEY}"},
    }


def test_settings_override_endpoints():
    settings = Settings(remote_url="http://localhost:8000/mcp", api_url="http://localhost:8000/")

    assert build_registration(API_KEY, "remote", settings).url == "http://localhost:8000/mcp"
    assert build_registration(API_KEY, "local", settings).env["NIA_API_URL"] == "http://localhost:8000/"


def test_build_registration_is_deterministic():
    assert build_registration(API_KEY, "local") == build_registration(API_KEY, "local")
    assert build_registration(API_KEY, "remote") == build_registration(API_KEY, "remote")


def test_to_dict_returns_fresh_containers():
    registration = build_local_registration(API_KEY)
    payload = registration.to_dict()
    payload["args"].append("--extra")
    payload["env"]["EXTRA"] = "1"

    assert registration.args == ["run", "--no-cache", "nia-mcp-server"]
    assert "EXTRA" not in registration.env


def test_install_outcome():
    assert InstallOutcome.ok() == InstallOutcome(success=True, error=None)
    failed = InstallOutcome.failed("boom")
    assert not failed.success
    assert failed.error == "boom"
    assert InstallOutcome.failed("").error == "Unknown error"
