"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from bearer_grant.core.settings import DEFAULT_LIFETIME, BearerGrantSettings


class TestBearerGrantSettings:
    """Tests for settings defaults and overrides."""

    def test_defaults(self) -> None:
        settings = BearerGrantSettings()
        assert settings.credentials_file == ""
        assert settings.default_scope == "CLOUD_PLATFORM"
        assert settings.default_lifetime == DEFAULT_LIFETIME
        assert settings.log_level == "warning"
        assert settings.log_json is False

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BEARER_GRANT_CREDENTIALS_FILE", "/etc/sa.json")
        monkeypatch.setenv("BEARER_GRANT_DEFAULT_LIFETIME", "600")
        monkeypatch.setenv("BEARER_GRANT_LOG_JSON", "true")
        settings = BearerGrantSettings()
        assert settings.credentials_file == "/etc/sa.json"
        assert settings.default_lifetime == 600
        assert settings.log_json is True

    def test_log_level_accepts_known_name(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("BEARER_GRANT_LOG_LEVEL", "debug")
        assert BearerGrantSettings().log_level == "debug"

    def test_log_level_rejects_unknown_name(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("BEARER_GRANT_LOG_LEVEL", "verbose")
        with pytest.raises(ValidationError, match="log_level"):
            BearerGrantSettings()
