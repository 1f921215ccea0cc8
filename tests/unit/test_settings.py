"""Unit tests for application settings."""

import pytest
from pydantic import ValidationError

from clipdeck.config.settings import Settings, get_settings


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.tikwm_search_url == "https://www.tikwm.com/api/feed/search"
        assert settings.search_default_count == 12
        assert settings.controller_page_size == 18
        assert settings.search_start_cursor == "0"
        assert settings.queue_slot == "tiktok-queue"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("SEARCH_DEFAULT_COUNT", "30")
        monkeypatch.setenv("LOCALE", "ar")

        settings = Settings(_env_file=None)

        assert settings.search_default_count == 30
        assert settings.locale == "ar"

    def test_production_rejects_debug_and_wildcard_cors(self):
        with pytest.raises(ValidationError) as exc_info:
            Settings(
                _env_file=None,
                app_env="production",
                debug=True,
                cors_allowed_origins=["*"],
            )

        assert "debug must be False" in str(exc_info.value)
        assert "cors_allowed_origins" in str(exc_info.value)

    def test_production_accepts_locked_down_settings(self):
        settings = Settings(
            _env_file=None,
            app_env="production",
            debug=False,
            cors_allowed_origins=["https://dash.example"],
        )

        assert settings.is_production

    def test_get_settings_is_cached(self):
        get_settings.cache_clear()

        assert get_settings() is get_settings()
