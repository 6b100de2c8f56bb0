"""Unit tests for Settings and get_settings.

Tests cover:
- Loading from environment variables
- Defaults for token lifetimes and bcrypt cost
- Secret key length, bcrypt range and log level validation
- Environment convenience properties
- get_settings caching
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from ipauth.core.config import Settings, get_settings
from ipauth.core.enums import Environment

SECRET = "s" * 32


@pytest.mark.unit
class TestSettings:
    def test_defaults(self):
        with patch.dict(os.environ, {"SECRET_KEY": SECRET}, clear=True):
            settings = Settings()

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.algorithm == "HS256"
        assert settings.access_token_expire_hours == 24
        assert settings.refresh_token_expire_days == 7
        assert settings.password_reset_expire_hours == 1
        assert settings.bcrypt_rounds == 12
        assert settings.is_development is True

    def test_loads_from_environment(self):
        env = {
            "SECRET_KEY": SECRET,
            "ENVIRONMENT": "production",
            "DATABASE_URL": "postgresql+asyncpg://u:p@db:5432/ipauth",
            "BCRYPT_ROUNDS": "14",
            "LOG_LEVEL": "debug",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = Settings()

        assert settings.is_production is True
        assert settings.database_url.startswith("postgresql+asyncpg://")
        assert settings.bcrypt_rounds == 14
        assert settings.log_level == "DEBUG"

    def test_secret_key_required(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValidationError):
                Settings()

    def test_short_secret_key_rejected(self):
        with patch.dict(os.environ, {"SECRET_KEY": "short"}, clear=True):
            with pytest.raises(ValidationError, match="at least 32"):
                Settings()

    @pytest.mark.parametrize("rounds", ["9", "21"])
    def test_bcrypt_rounds_out_of_range(self, rounds):
        with patch.dict(os.environ, {"SECRET_KEY": SECRET, "BCRYPT_ROUNDS": rounds}, clear=True):
            with pytest.raises(ValidationError, match="between 10 and 20"):
                Settings()

    def test_unknown_log_level_rejected(self):
        with patch.dict(os.environ, {"SECRET_KEY": SECRET, "LOG_LEVEL": "LOUD"}, clear=True):
            with pytest.raises(ValidationError):
                Settings()


@pytest.mark.unit
class TestGetSettings:
    def test_returns_cached_instance(self):
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()

    def test_testing_environment_from_conftest(self):
        get_settings.cache_clear()
        try:
            settings = get_settings()
            assert settings.is_testing is True
        finally:
            get_settings.cache_clear()
