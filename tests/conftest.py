# tests/conftest.py

import os

# Settings are read at import time; point them at a throwaway SQLite file
os.environ.setdefault("DATABASE_URL", "sqlite:///./.pytest-user-access.db")
os.environ.setdefault("ENVIRONMENT", "testing")

from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event, text
from sqlalchemy.orm import sessionmaker

from app.main import app
from app.adapters.outbound.persistence.database import (
    _enable_sqlite_foreign_keys,
    build_engine,
    build_session_factory,
    get_db,
)

ROOT = Path(__file__).resolve().parents[1]

# Rows of the external users table used across the tests
USER_IDS = [1, 2, 3]


def make_alembic_config(url: str, output_buffer=None) -> Config:
    config = Config(str(ROOT / "alembic.ini"), output_buffer=output_buffer)
    config.set_main_option("script_location", str(ROOT / "migrations"))
    config.set_main_option("sqlalchemy.url", url)
    return config


@pytest.fixture
def db_path(tmp_path) -> Path:
    return tmp_path / "user_access.db"


@pytest.fixture
def sync_engine(db_path):
    engine = create_engine(f"sqlite:///{db_path}")
    event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    yield engine
    engine.dispose()


@pytest.fixture
def users_table(sync_engine):
    """Stand-in for the users table owned by the user management system."""
    with sync_engine.begin() as conn:
        conn.execute(text("CREATE TABLE users (id INTEGER PRIMARY KEY, username VARCHAR(255))"))
        for user_id in USER_IDS:
            conn.execute(
                text("INSERT INTO users (id, username) VALUES (:id, :name)"),
                {"id": user_id, "name": f"user{user_id}"},
            )


@pytest.fixture
def alembic_config(db_path) -> Config:
    return make_alembic_config(f"sqlite:///{db_path}")


@pytest.fixture
def migrated(users_table, alembic_config, sync_engine):
    command.upgrade(alembic_config, "head")
    # pooled connections opened before the DDL keep a stale schema cache
    sync_engine.dispose()
    return sync_engine


@pytest.fixture
def session_factory(migrated) -> sessionmaker:
    return sessionmaker(bind=migrated, autoflush=False, autocommit=False)


@pytest.fixture
def client(migrated, db_path):
    engine = build_engine(f"sqlite+aiosqlite:///{db_path}")
    factory = build_session_factory(engine)

    async def override_get_db():
        async with factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
