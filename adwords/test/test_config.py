"""Tests for settings loading and config file location."""

import json
import os

import pytest
from pydantic import ValidationError
from pydantic_settings import SettingsConfigDict

from adwords.config.app_settings import AppSettings
from adwords.util.logging_helper import format_payload, parse_level
from adwords.util.paths import CONFIG_DIR_ENV, CONFIG_FILE_NAME, get_config_path


def settings_from_file(path) -> AppSettings:
    class FileSettings(AppSettings):
        model_config = SettingsConfigDict(json_file=str(path))

    return FileSettings()


class TestAppSettings:
    """Tests for AppSettings sources and defaults."""

    def test_defaults(self):
        """Test the transport defaults."""
        settings = AppSettings()

        assert settings.transport.dial_timeout == 30.0
        assert settings.transport.user_agent == "gowsdl/0.1"
        assert settings.transport.insecure_skip_verify is False
        assert settings.auth.login is None
        assert settings.wsse.must_understand == ""
        assert settings.adwords.developer_token is None

    def test_environment_override(self, monkeypatch):
        """Test ADWORDS_* variables with nested keys."""
        monkeypatch.setenv("ADWORDS_TRANSPORT__DIAL_TIMEOUT", "5")
        monkeypatch.setenv("ADWORDS_ADWORDS__DEVELOPER_TOKEN", "from-env")

        settings = AppSettings()

        assert settings.transport.dial_timeout == 5.0
        assert settings.adwords.developer_token == "from-env"

    def test_json_file(self, tmp_path):
        """Test values are read from the JSON config file."""
        path = tmp_path / CONFIG_FILE_NAME
        path.write_text(json.dumps({"auth": {"login": "file-user", "password": "pw"}, "logging": {"level": "DEBUG"}}))

        settings = settings_from_file(path)

        assert settings.auth.login == "file-user"
        assert settings.logging.level == "DEBUG"

    def test_environment_beats_json_file(self, tmp_path, monkeypatch):
        """Test environment variables take precedence over the file."""
        path = tmp_path / CONFIG_FILE_NAME
        path.write_text(json.dumps({"transport": {"dial_timeout": 10}}))
        monkeypatch.setenv("ADWORDS_TRANSPORT__DIAL_TIMEOUT", "2.5")

        assert settings_from_file(path).transport.dial_timeout == 2.5

    def test_missing_json_file(self, tmp_path):
        """Test a missing config file falls back to defaults."""
        assert settings_from_file(tmp_path / "absent.json").transport.dial_timeout == 30.0

    def test_init_values_win(self, monkeypatch):
        """Test keyword arguments override the environment."""
        monkeypatch.setenv("ADWORDS_TRANSPORT__USER_AGENT", "env-agent")

        assert AppSettings(transport={"user_agent": "init-agent"}).transport.user_agent == "init-agent"

    def test_dial_timeout_must_be_positive(self):
        """Test a non-positive dial timeout is rejected."""
        with pytest.raises(ValidationError):
            AppSettings(transport={"dial_timeout": 0})


class TestPaths:
    """Tests for config path resolution."""

    def test_config_dir_from_environment(self, tmp_path, monkeypatch):
        """Test ADWORDS_CONFIG_DIR selects the config directory."""
        monkeypatch.setenv(CONFIG_DIR_ENV, str(tmp_path))

        assert get_config_path() == os.path.join(str(tmp_path), CONFIG_FILE_NAME)

    def test_defaults_to_working_directory(self, tmp_path, monkeypatch):
        """Test the working directory is used otherwise."""
        monkeypatch.delenv(CONFIG_DIR_ENV, raising=False)
        monkeypatch.chdir(tmp_path)

        assert get_config_path() == os.path.join(os.getcwd(), CONFIG_FILE_NAME)


class TestParseLevel:
    """Tests for log level names."""

    def test_known_names(self):
        """Test names map to logging constants regardless of case."""
        assert parse_level("debug") == 10
        assert parse_level("WARNING") == 30

    def test_unknown_name(self):
        """Test unknown names fall back to the default."""
        assert parse_level("chatty") == 20


class TestFormatPayload:
    """Tests for envelope text in log lines."""

    def test_short_payload_is_whole(self):
        """Test payloads under the limit are logged unchanged."""
        assert format_payload(b"<Envelope/>") == "<Envelope/>"

    def test_long_payload_is_cut(self):
        """Test long payloads are cut at the limit and their size noted."""
        data = b"<data>" + b"A" * 100 + b"</data>"

        text = format_payload(data, limit=10)

        assert text == f"<data>AAAA... [{len(data)} bytes]"

    def test_invalid_utf8_is_replaced(self):
        """Test bytes that are not UTF-8 do not break logging."""
        assert format_payload(b"<a>\xff</a>") == "<a>�</a>"
