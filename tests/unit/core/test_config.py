"""
Unit Tests for Configuration.

Loads the YAML files shipped in config/settings/ and checks the
schemas reject malformed input.
"""

from unittest.mock import MagicMock, patch

import pytest
from pydantic import ValidationError

from keepnotes.core.config import (
    Settings,
    get_app_config,
    get_database_url,
    get_redis_url,
)
from keepnotes.core.config_schema import FeaturesSchema, RetentionSchema


class TestAppConfig:
    """Tests for the shipped configuration."""

    def test_retention_defaults(self):
        retention = get_app_config().retention

        assert retention.retention_days == 7
        assert retention.sweep_cron == "0 0 * * *"
        assert retention.timezone == "UTC"

    def test_api_prefix(self):
        assert get_app_config().application.api_prefix == "/api/v1"

    def test_auth_is_off_by_default(self):
        assert get_app_config().features.auth_require_api_authentication is False


class TestConfigSchemas:
    def test_negative_retention_rejected(self):
        with pytest.raises(ValidationError):
            RetentionSchema(retention_days=-1, sweep_cron="0 0 * * *", timezone="UTC")

    def test_unknown_key_rejected(self):
        with pytest.raises(ValidationError):
            FeaturesSchema(
                auth_require_api_authentication=False,
                api_request_logging=True,
                retention_sweep_enabled=True,
                surprise=True,
            )


class TestUrls:
    """Tests for connection URL construction."""

    def test_sqlite_memory_url(self):
        app_config = MagicMock()
        app_config.database.driver = "sqlite"
        app_config.database.name = ":memory:"

        with patch("keepnotes.core.config.get_app_config", return_value=app_config):
            assert get_database_url() == "sqlite+aiosqlite:///:memory:"
            assert get_database_url(async_driver=False) == "sqlite:///:memory:"

    def test_postgresql_url_uses_secret(self):
        app_config = MagicMock()
        app_config.database.driver = "postgresql"
        app_config.database.user = "keepnotes"
        app_config.database.host = "db"
        app_config.database.port = 5432
        app_config.database.name = "keepnotes"

        with patch("keepnotes.core.config.get_app_config", return_value=app_config), \
             patch("keepnotes.core.config.get_settings", return_value=Settings(db_password="pw")):
            assert get_database_url() == "postgresql+asyncpg://keepnotes:pw@db:5432/keepnotes"

    def test_redis_url_without_password(self):
        with patch("keepnotes.core.config.get_settings", return_value=Settings()):
            assert get_redis_url() == "redis://localhost:6379/0"
