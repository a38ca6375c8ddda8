"""Test XLogSettings loading."""

import pytest

from xlog.core.config import XLogSettings, load_settings
from xlog.core.errors import ConfigError, XLogError


class TestSettingsDefaults:
    def test_default_settings(self):
        settings = XLogSettings()
        assert settings.log_level == "INFO"
        assert settings.log_format == "json"
        assert settings.log_stream == "stderr"
        assert settings.event_stream == "stdout"

    def test_level_is_upper_cased(self):
        assert XLogSettings(log_level=" debug ").log_level == "DEBUG"


class TestEnvOverrides:
    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("XLOG_LOG_FORMAT", "console")
        monkeypatch.setenv("XLOG_LOG_LEVEL", "error")
        settings = XLogSettings()
        assert settings.log_format == "console"
        assert settings.log_level == "ERROR"


class TestLoadSettings:
    def test_no_file(self):
        assert load_settings().log_format == "json"

    def test_missing_file_uses_defaults(self, tmp_path):
        settings = load_settings(tmp_path / "absent.toml")
        assert settings.log_level == "INFO"

    def test_xlog_table(self, tmp_path):
        path = tmp_path / "app.toml"
        path.write_text('[xlog]\nlog_level = "DEBUG"\nevent_stream = "stderr"\n')
        settings = load_settings(path)
        assert settings.log_level == "DEBUG"
        assert settings.event_stream == "stderr"

    def test_top_level_keys(self, tmp_path):
        path = tmp_path / "xlog.toml"
        path.write_text('log_format = "console"\n')
        assert load_settings(path).log_format == "console"

    def test_overrides_win(self, tmp_path):
        path = tmp_path / "xlog.toml"
        path.write_text('log_format = "console"\n')
        settings = load_settings(path, overrides={"log_format": "json"})
        assert settings.log_format == "json"

    def test_invalid_value_raises_config_error(self):
        with pytest.raises(ConfigError, match="log_level"):
            load_settings(overrides={"log_level": "LOUD"})

    def test_invalid_toml_raises_config_error(self, tmp_path):
        path = tmp_path / "bad.toml"
        path.write_text("log_level = \n")
        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_settings(path)

    def test_config_error_is_xlog_error(self):
        assert issubclass(ConfigError, XLogError)
