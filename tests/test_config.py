"""
Tests for settings validation.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from realtor_api.config import Settings
from realtor_api.database import engine_options


class TestSettings:

    def test_sync_postgres_url_uses_asyncpg(self):
        settings = Settings(database_url="postgresql://u:p@localhost:5432/homes")

        assert settings.database_url == "postgresql+asyncpg://u:p@localhost:5432/homes"

    def test_sync_sqlite_url_uses_aiosqlite(self):
        assert Settings(database_url="sqlite:///homes.db").database_url == "sqlite+aiosqlite:///homes.db"

    def test_invalid_environment(self):
        with pytest.raises(PydanticValidationError, match="Environment must be one of"):
            Settings(environment="qa")

    def test_log_level_is_normalized(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_production_flag(self):
        assert Settings(environment="production").is_production is True


class TestEngineOptions:

    def test_sqlite_gets_no_pool_options(self):
        assert "pool_size" not in engine_options("sqlite+aiosqlite:///:memory:")

    def test_postgres_gets_pool_options(self):
        options = engine_options("postgresql+asyncpg://u:p@db/homes")

        assert options["pool_size"] == 10
        assert options["pool_pre_ping"] is True
