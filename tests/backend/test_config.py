"""
Tests for settings loading.
"""

import pytest

from user_service.config import Settings, get_settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults_match_service_layout(self, monkeypatch):
        monkeypatch.delenv("MONGODB_URI", raising=False)

        settings = Settings(_env_file=None)

        assert settings.users_db_name == "userdb"
        assert settings.users_collection == "users"
        assert settings.port == 50051
        assert settings.startup_timeout_seconds == 10.0

    def test_mongodb_uri_read_from_environment(self, monkeypatch):
        monkeypatch.setenv("MONGODB_URI", "mongodb://db.internal:27017")

        settings = Settings(_env_file=None)

        assert settings.mongodb_uri == "mongodb://db.internal:27017"

    def test_non_positive_startup_timeout_rejected(self):
        with pytest.raises(ValueError):
            Settings(_env_file=None, startup_timeout_seconds=0)

    def test_get_settings_is_cached(self):
        get_settings.cache_clear()
        assert get_settings() is get_settings()
        get_settings.cache_clear()
