# ABOUTME: Tests for input validation utilities
# ABOUTME: Covers API key shape, URLs and local-mode prerequisites
from unittest.mock import patch

from nia_wizard.utils.validation import (
    ValidationError,
    local_mode_available,
    validate_api_key,
    validate_command_exists,
    validate_url,
)


class TestValidateApiKey:
    """Tests for validate_api_key."""

    def test_valid_key(self):
        assert validate_api_key("nk_abc123") is None

    def test_surrounding_whitespace_is_ignored(self):
        assert validate_api_key("  nk_abc123\n") is None

    def test_missing_key(self):
        for value in (None, "", "   "):
            error = validate_api_key(value)
            assert isinstance(error, ValidationError)
            assert error.message == "API key is required"

    def test_wrong_prefix(self):
        error = validate_api_key("sk-abc123")
        assert error is not None
        assert error.field == "api_key"
        assert error.severity == "error"
        assert "nk_" in error.message

    def test_prefix_only(self):
        error = validate_api_key("nk_")
        assert error is not None
        assert error.message == "API key is incomplete"


class TestValidateUrl:
    """Tests for validate_url."""

    def test_valid_urls(self):
        assert validate_url("https://apigcp.trynia.ai/mcp") is None
        assert validate_url("http://localhost:8000/") is None

    def test_rejects_other_schemes(self):
        error = validate_url("ftp://example.com")
        assert error is not None
        assert "HTTP or HTTPS" in error.message

    def test_rejects_missing_host(self):
        error = validate_url("https://")
        assert error is not None
        assert "host" in error.message


class TestCommands:
    """Tests for command lookups."""

    def test_command_found(self):
        with patch("nia_wizard.utils.validation.shutil.which", return_value="/usr/bin/pipx"):
            assert validate_command_exists("pipx") is None
            assert local_mode_available() is True

    def test_command_missing(self):
        with patch("nia_wizard.utils.validation.shutil.which", return_value=None):
            error = validate_command_exists("pipx")
            assert error is not None
            assert error.message == "Command not found: pipx"
            assert local_mode_available() is False
