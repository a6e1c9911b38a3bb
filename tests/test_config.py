"""
Tests for configuration management
"""
import json
import os
from pathlib import Path

import pytest

from archive_renamer import config
from archive_renamer.config import Settings, get_settings, load_credentials, reload_settings
from archive_renamer.exceptions import ConfigurationError, CredentialsError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Isolate tests from ARCHIVE_RENAMER_* variables and the settings singleton"""
    for name in list(os.environ):
        if name.startswith("ARCHIVE_RENAMER_"):
            monkeypatch.delenv(name)
    monkeypatch.setattr(config, "_settings", None)


def test_settings_defaults():
    """Test that settings have sensible defaults"""
    settings = Settings(_env_file=None)

    assert settings.app_name == "Archive Renamer"
    assert settings.settings_path == Path("settings.json")
    assert settings.request_timeout is None
    assert settings.require_complete_metadata is True


def test_run_mode_is_not_configurable():
    """Renaming and recursion are only switched on by -e / -r"""
    settings = Settings(_env_file=None)

    assert not hasattr(settings, "execute")
    assert not hasattr(settings, "recursive")


def test_settings_from_environment(monkeypatch):
    """Environment variables use the ARCHIVE_RENAMER_ prefix"""
    monkeypatch.setenv("ARCHIVE_RENAMER_SETTINGS_PATH", "creds.json")
    monkeypatch.setenv("ARCHIVE_RENAMER_REQUEST_TIMEOUT", "2.5")
    monkeypatch.setenv("ARCHIVE_RENAMER_LOG_LEVEL", "debug")

    settings = Settings(_env_file=None)

    assert settings.settings_path == Path("creds.json")
    assert settings.request_timeout == 2.5
    assert settings.log_level == "DEBUG"


def test_settings_path_expansion():
    """Test that ~ is expanded"""
    settings = Settings(settings_path="~/settings.json", _env_file=None)

    assert settings.settings_path == Path.home() / "settings.json"


def test_settings_validation():
    """Test that invalid values raise errors"""
    with pytest.raises(Exception):
        Settings(request_timeout=0, _env_file=None)


def test_invalid_environment_raises_configuration_error(monkeypatch):
    monkeypatch.setenv("ARCHIVE_RENAMER_REQUEST_TIMEOUT", "0")

    with pytest.raises(ConfigurationError) as exc_info:
        get_settings()

    assert exc_info.value.config_key == "request_timeout"
    assert "greater than 0" in exc_info.value.details


def test_settings_singleton():
    """Test that get_settings returns the same instance"""
    assert get_settings() is get_settings()
    assert reload_settings() is get_settings()


def test_settings_to_dict():
    config_dict = Settings(_env_file=None).to_dict()

    assert isinstance(config_dict, dict)
    assert config_dict["app_name"] == "Archive Renamer"
    assert "fanza_api_url" in config_dict


class TestLoadCredentials:

    def test_valid_file(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"api_id": "abc", "affiliate_id": "xyz-990"}))

        credentials = load_credentials(path)

        assert credentials.api_id == "abc"
        assert credentials.affiliate_id == "xyz-990"

    def test_credentials_are_read_only(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"api_id": "abc", "affiliate_id": "xyz"}))
        credentials = load_credentials(path)

        with pytest.raises(Exception):
            credentials.api_id = "other"

    def test_missing_file(self, tmp_path):
        with pytest.raises(CredentialsError) as exc_info:
            load_credentials(tmp_path / "missing.json")

        assert exc_info.value.path.endswith("missing.json")

    @pytest.mark.parametrize("content", [
        "{not json",
        "[]",
        '{"api_id": "abc"}',
        '{"api_id": 1, "affiliate_id": "xyz"}',
    ])
    def test_malformed_file(self, tmp_path, content):
        path = tmp_path / "settings.json"
        path.write_text(content)

        with pytest.raises(CredentialsError):
            load_credentials(path)
