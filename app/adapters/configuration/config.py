# app/adapters/configuration/config.py

import logging
from typing import Optional
from pydantic import Field, PostgresDsn, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import make_url

# Driver swaps between the async app engine and the sync Alembic/seed engine
_ASYNC_DRIVERS = {
    "postgresql": "postgresql+asyncpg",
    "postgresql+psycopg2": "postgresql+asyncpg",
    "sqlite": "sqlite+aiosqlite",
    "sqlite+pysqlite": "sqlite+aiosqlite",
}
_SYNC_DRIVERS = {
    "postgresql+asyncpg": "postgresql+psycopg2",
    "sqlite+aiosqlite": "sqlite",
}


def _swap_driver(url: str, drivers: dict) -> str:
    parsed = make_url(url)
    drivername = drivers.get(parsed.drivername, parsed.drivername)
    return parsed.set(drivername=drivername).render_as_string(hide_password=False)


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"

    # Environment
    ENVIRONMENT: str = "development"  # "development", "production", "testing"
    DEBUG: bool = False

    # Database
    DB_DRIVER: str = "psycopg2"
    POSTGRES_USER: Optional[str] = None
    POSTGRES_PASSWORD: Optional[str] = None
    POSTGRES_DB: Optional[str] = None
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    TEST_MODE: bool = False
    TEST_POSTGRES_DB: str = ""
    DATABASE_URL: Optional[str] = Field(default=None, validate_default=True)

    DB_POOL_SIZE: int = 20
    DB_MAX_OVERFLOW: int = 10
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_RECYCLE: int = 1800

    # API
    API_PREFIX: str = "/api/v1"

    @field_validator("DATABASE_URL", mode="before")
    def assemble_db_url(cls, value, info):
        if value:
            return str(value)

        data = info.data
        if not data.get("POSTGRES_USER") or not data.get("POSTGRES_DB"):
            raise ValueError("Set DATABASE_URL or the POSTGRES_* connection settings")

        db_name = data.get("TEST_POSTGRES_DB") if data.get("TEST_MODE") else data.get("POSTGRES_DB")
        return str(PostgresDsn.build(
            scheme=f"postgresql+{data.get('DB_DRIVER', 'psycopg2')}",
            username=data["POSTGRES_USER"],
            password=data.get("POSTGRES_PASSWORD"),
            host=data["POSTGRES_HOST"],
            port=data["POSTGRES_PORT"],
            path=db_name,
        ))

    @field_validator("LOG_LEVEL", mode="before")
    def validate_log_level(cls, v: str) -> str:
        """Garante que o valor é um nível válido do logging"""
        lvl = str(v).upper()
        if not isinstance(logging.getLevelName(lvl), int):
            raise ValueError(f"LOG_LEVEL inválido: {v!r}")
        return lvl

    @property
    def ASYNC_DATABASE_URL(self) -> str:
        """URL used by the application engine."""
        return _swap_driver(self.DATABASE_URL, _ASYNC_DRIVERS)

    @property
    def SYNC_DATABASE_URL(self) -> str:
        """URL used by Alembic and the seed scripts."""
        return _swap_driver(self.DATABASE_URL, _SYNC_DRIVERS)

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
