"""Shared pytest fixtures for the Sprocket Sports API tests."""

import os

import pytest

# Keep app import side effects away from a real database.
os.environ.setdefault("RUN_MIGRATIONS_ON_STARTUP", "false")
os.environ.setdefault("AUTO_SEED", "false")
os.environ.setdefault("AUTH_ENABLED", "false")

from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import NullPool  # noqa: E402

from sprocket_api.api.main import app  # noqa: E402
from sprocket_api.db import Base, get_async_session  # noqa: E402


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def db_url(tmp_path):
    """
    Create a fresh SQLite database with all tables for a single test.

    Uses tmp_path so every test starts empty.
    """
    path = tmp_path / "sprocket_test.db"
    engine = create_engine(f"sqlite:///{path}")
    Base.metadata.create_all(engine)
    engine.dispose()
    return f"sqlite+aiosqlite:///{path}"


@pytest.fixture
def session_maker(db_url):
    # NullPool: TestClient may drive each request on its own event loop
    engine = create_async_engine(db_url, poolclass=NullPool)
    return async_sessionmaker(bind=engine, expire_on_commit=False, autoflush=False)


@pytest.fixture
async def session(session_maker):
    async with session_maker() as s:
        yield s


@pytest.fixture
def client(session_maker):
    async def _override_session():
        async with session_maker() as s:
            yield s

    app.dependency_overrides[get_async_session] = _override_session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def team_payload():
    return {
        "name": "Sprocket Strikers",
        "description": "U10 rec soccer",
        "sport": "Soccer",
        "age_group": "U10",
        "players": [
            {"name": "Liam Chen", "birthdate": "2016-07-02", "position": "Goalkeeper"},
            {"name": "Ava Martinez", "birthdate": "2016-03-14", "position": "Forward"},
        ],
    }


@pytest.fixture
def created_team(client, team_payload):
    resp = client.post("/api/v1/teams", json=team_payload)
    assert resp.status_code == 201, resp.text
    return resp.json()
