"""Tests for settings loading."""

import pytest
from pydantic import ValidationError

from retail_tokens.config import Environment, LogLevel, Settings, get_settings


class TestSettingsDefaults:
    def test_defaults(self):
        settings = Settings()

        assert settings.app_name == "Retail Design Tokens"
        assert settings.environment is Environment.DEVELOPMENT
        assert settings.log_level is LogLevel.WARNING
        assert settings.log_format == "console"
        assert settings.log_file is None
        assert settings.theme_mode == "system"
        assert settings.system_theme == "light"
        assert settings.css_selector_dark == '[data-theme="dark"]'
        assert settings.debug is False


class TestSettingsFromEnvironment:
    def test_theme_settings_from_env(self, monkeypatch):
        monkeypatch.setenv("RDT_THEME_MODE", "DARK")
        monkeypatch.setenv("RDT_SYSTEM_THEME", "Dark")

        settings = Settings()

        assert settings.theme_mode == "dark"
        assert settings.system_theme == "dark"

    def test_invalid_theme_mode_rejected(self, monkeypatch):
        monkeypatch.setenv("RDT_THEME_MODE", "sepia")

        with pytest.raises(ValidationError):
            Settings()

    def test_system_theme_cannot_be_system(self):
        with pytest.raises(ValidationError):
            Settings(system_theme="system")

    def test_production_defaults_to_json_logs(self, monkeypatch):
        monkeypatch.setenv("RDT_ENVIRONMENT", "production")

        settings = Settings()

        assert settings.environment is Environment.PRODUCTION
        assert settings.log_format == "json"

    def test_explicit_log_format_wins(self, monkeypatch):
        monkeypatch.setenv("RDT_ENVIRONMENT", "production")
        monkeypatch.setenv("RDT_LOG_FORMAT", "console")

        assert Settings().log_format == "console"

    def test_log_level_from_env(self, monkeypatch):
        monkeypatch.setenv("RDT_LOG_LEVEL", "DEBUG")

        assert Settings().log_level is LogLevel.DEBUG


class TestGetSettings:
    def test_is_cached(self):
        assert get_settings() is get_settings()

    def test_cache_clear_reloads(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("RDT_THEME_MODE", "light")
        get_settings.cache_clear()

        assert get_settings() is not first
        assert get_settings().theme_mode == "light"
