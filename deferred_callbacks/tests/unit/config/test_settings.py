"""
Tests for registry settings.
"""

import pytest
from pydantic import ValidationError

from deferred_callbacks.config.settings import (
    RegistrySettings,
    get_settings,
    initialize_settings,
    reset_settings,
)


class TestRegistrySettings:
    """Test cases for RegistrySettings."""

    def test_defaults(self):
        settings = RegistrySettings()

        assert settings.log_level == "INFO"
        assert settings.error_sink == "console"
        assert settings.logger_name == "deferred_callbacks"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("DEFERRED_CALLBACKS_LOG_LEVEL", "debug")
        monkeypatch.setenv("DEFERRED_CALLBACKS_ERROR_SINK", "RAISE")

        settings = RegistrySettings.from_env()

        assert settings.log_level == "DEBUG"
        assert settings.error_sink == "raise"

    def test_overrides_win_over_environment(self, monkeypatch):
        monkeypatch.setenv("DEFERRED_CALLBACKS_LOGGER_NAME", "from_env")

        settings = RegistrySettings.from_env(logger_name="override")

        assert settings.logger_name == "override"

    def test_rejects_unknown_log_level(self):
        with pytest.raises(ValidationError):
            RegistrySettings(log_level="chatty")

    def test_rejects_unknown_error_sink(self):
        with pytest.raises(ValidationError):
            RegistrySettings(error_sink="email")


class TestGlobalSettings:
    """Test cases for the cached global settings."""

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_initialize_settings_replaces_instance(self):
        first = get_settings()

        second = initialize_settings(log_level="WARNING")

        assert second is not first
        assert get_settings() is second
        assert second.log_level == "WARNING"

    def test_reset_settings(self):
        first = get_settings()

        reset_settings()

        assert get_settings() is not first
