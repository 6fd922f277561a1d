"""Tests for shared/config.py."""

import pytest
from unittest.mock import patch
import os

from pydantic import ValidationError

from shared.config import Settings, get_settings


class TestSettings:
    def test_default_values(self):
        """Settings should have sensible defaults."""
        settings = Settings(_env_file=None)
        assert settings.app_name == "CookShare API"
        assert settings.debug is False
        assert settings.port == 8000
        assert settings.app_version == "0.1.0"
        assert settings.database_url.startswith("postgresql+psycopg2://")

    def test_pool_defaults(self):
        """The pool holds ten connections and queues when exhausted."""
        settings = Settings(_env_file=None)
        assert settings.db_pool_size == 10
        assert settings.db_max_overflow == 0
        assert settings.db_pool_overflow == "queue"

    def test_loads_from_env(self):
        """Settings should load from environment variables."""
        with patch.dict(os.environ, {"DEBUG": "true", "PORT": "9000"}):
            settings = Settings(_env_file=None)
            assert settings.debug is True
            assert settings.port == 9000

    def test_loads_pool_config_from_env(self):
        with patch.dict(os.environ, {
            "DB_POOL_SIZE": "3",
            "DB_POOL_OVERFLOW": "reject",
            "DATABASE_URL": "sqlite://",
        }):
            settings = Settings(_env_file=None)
            assert settings.db_pool_size == 3
            assert settings.db_pool_overflow == "reject"
            assert settings.database_url == "sqlite://"

    def test_rejects_unknown_overflow_mode(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, db_pool_overflow="drop")

    def test_rejects_empty_pool(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, db_pool_size=0)


class TestGetSettings:
    def test_get_settings_returns_settings_instance(self):
        """get_settings should return a Settings instance."""
        # Clear the cache first
        get_settings.cache_clear()
        settings = get_settings()
        assert isinstance(settings, Settings)

    def test_get_settings_caches(self):
        """get_settings should return cached instance."""
        get_settings.cache_clear()
        settings1 = get_settings()
        settings2 = get_settings()
        assert settings1 is settings2
