# tests/test_config.py

import pytest
from pydantic import ValidationError

from app.adapters.configuration.config import Settings

POSTGRES = {
    "POSTGRES_USER": "app",
    "POSTGRES_PASSWORD": "secret",
    "POSTGRES_DB": "user_access",
    "POSTGRES_HOST": "db",
    "POSTGRES_PORT": 5432,
}


def make_settings(**overrides) -> Settings:
    values = {"DATABASE_URL": None, **overrides}
    return Settings(_env_file=None, **values)


class TestDatabaseUrl:
    def test_assembled_from_postgres_settings(self):
        settings = make_settings(**POSTGRES)

        assert settings.DATABASE_URL == "postgresql+psycopg2://app:secret@db:5432/user_access"
        assert settings.SYNC_DATABASE_URL == settings.DATABASE_URL
        assert settings.ASYNC_DATABASE_URL == "postgresql+asyncpg://app:secret@db:5432/user_access"

    def test_test_mode_uses_test_database(self):
        settings = make_settings(**POSTGRES, TEST_MODE=True, TEST_POSTGRES_DB="user_access_test")

        assert settings.DATABASE_URL.endswith("/user_access_test")

    def test_explicit_url_wins(self):
        settings = make_settings(**POSTGRES, DATABASE_URL="postgresql+asyncpg://u:p@other/x")

        assert settings.ASYNC_DATABASE_URL == "postgresql+asyncpg://u:p@other/x"
        assert settings.SYNC_DATABASE_URL == "postgresql+psycopg2://u:p@other/x"

    def test_sqlite_drivers(self):
        settings = make_settings(DATABASE_URL="sqlite:///./local.db")

        assert settings.ASYNC_DATABASE_URL == "sqlite+aiosqlite:///./local.db"
        assert settings.SYNC_DATABASE_URL == "sqlite:///./local.db"

    def test_missing_connection_settings(self):
        with pytest.raises(ValidationError):
            make_settings()


class TestLogLevel:
    def test_normalized_to_upper_case(self):
        assert make_settings(DATABASE_URL="sqlite://", LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"

    def test_unknown_level_rejected(self):
        with pytest.raises(ValidationError):
            make_settings(DATABASE_URL="sqlite://", LOG_LEVEL="chatty")
