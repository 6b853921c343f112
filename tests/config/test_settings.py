"""Tests for classbook configuration."""

from __future__ import annotations

import pytest

from classbook.config import (
    CONFIG_ENVIRONMENT_ERROR,
    ClassbookSettings,
    ConfigError,
    Environment,
    get_settings,
    load_settings,
)


class TestEnvironment:
    def test_environment_values(self) -> None:
        assert Environment.DEVELOPMENT.value == "development"
        assert Environment.TESTING.value == "testing"
        assert Environment.PRODUCTION.value == "production"

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("development", Environment.DEVELOPMENT),
            ("DEV", Environment.DEVELOPMENT),
            ("test", Environment.TESTING),
            (" Testing ", Environment.TESTING),
            ("prod", Environment.PRODUCTION),
            (None, Environment.DEVELOPMENT),
        ],
    )
    def test_from_string(self, raw, expected) -> None:
        assert Environment.from_string(raw) is expected

    def test_only_production_hides_raw_input(self) -> None:
        assert Environment.DEVELOPMENT.logs_raw_input
        assert Environment.TESTING.logs_raw_input
        assert not Environment.PRODUCTION.logs_raw_input

    def test_from_string_invalid(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            Environment.from_string("staging")
        assert exc_info.value.code == CONFIG_ENVIRONMENT_ERROR
        assert exc_info.value.context["provided_value"] == "staging"

    def test_get_current_precedence(self, monkeypatch: pytest.MonkeyPatch) -> None:
        assert Environment.get_current() is Environment.DEVELOPMENT
        monkeypatch.setenv("ENV", "prod")
        assert Environment.get_current() is Environment.PRODUCTION
        monkeypatch.setenv("CLASSBOOK_ENV", "test")
        assert Environment.get_current() is Environment.TESTING


class TestClassbookSettings:
    def test_defaults(self) -> None:
        settings = load_settings()
        assert settings.env is Environment.DEVELOPMENT
        assert settings.log_parse_failures is True
        assert settings.logs_raw_input is True

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CLASSBOOK_ENV", "prod")
        monkeypatch.setenv("CLASSBOOK_LOG_PARSE_FAILURES", "false")
        settings = load_settings()
        assert settings.env is Environment.PRODUCTION
        assert settings.log_parse_failures is False
        assert settings.logs_raw_input is False

    def test_env_falls_back_to_generic_variables(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        assert load_settings().env is Environment.PRODUCTION

    def test_production_keeps_raw_input_out_of_logs(self) -> None:
        settings = ClassbookSettings(env="prod")
        assert settings.log_parse_failures is True
        assert settings.logs_raw_input is False

    def test_invalid_environment(self) -> None:
        with pytest.raises(ConfigError):
            ClassbookSettings(env="staging")

    def test_get_settings_is_cached(self, monkeypatch: pytest.MonkeyPatch) -> None:
        first = get_settings()
        monkeypatch.setenv("CLASSBOOK_ENV", "prod")
        assert get_settings() is first
        get_settings.cache_clear()
        assert get_settings().env is Environment.PRODUCTION
