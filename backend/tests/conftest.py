"""
Promptopia Backend — Test Configuration (conftest.py)
=======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session:  Mock AsyncSession (no real DB needed)
    ├── database_url:     Fresh SQLite file under tmp_path
    ├── connected_db:     Connector pointed at database_url, tables created, no rows
    ├── seeded_db:        connected_db plus two users and their prompts
    └── test_client:      HTTPX AsyncClient talking to the FastAPI app

Seed data:
    users:   u1 (alice), u2 (bob)
    prompts: p1, p2 by u1 (in that order), p3 by u2, p4 by a user that
             no longer exists ("ghost")
"""

import os
import tempfile
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock

# Override settings BEFORE any app imports so no test ever reaches a real database
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///" + os.path.join(
    tempfile.mkdtemp(prefix="promptopia_test_"), "default.db"
)
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from app.database import Base, connect_to_db, dispose_engine, session_scope
from app.models.prompt import Prompt
from app.models.user import User


SEED_TIME = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_list(mock_db_session):
            mock_db_session.execute = AsyncMock(side_effect=[prompts_result, users_result])
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def database_url(tmp_path):
    """A SQLite database file private to one test."""
    return f"sqlite+aiosqlite:///{tmp_path / 'promptopia.db'}"


@pytest_asyncio.fixture
async def connected_db(database_url):
    """
    Connects the shared connector to a fresh database with empty tables.

    The connector is module-level state, so it is disposed both before
    (in case a previous test left it connected) and after each test.
    """
    await dispose_engine()
    engine = await connect_to_db(database_url)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await dispose_engine()


@pytest_asyncio.fixture
async def seeded_db(connected_db):
    """connected_db plus the seed rows described in the module docstring."""
    async with session_scope() as session:
        session.add_all([
            User(id="u1", email="alice@example.com", username="alice",
                 image="https://example.com/alice.png"),
            User(id="u2", email="bob@example.com", username="bob"),
        ])
        session.add_all([
            Prompt(id="p1", creator_id="u1", prompt="hi", tag="#greeting",
                   created_at=SEED_TIME),
            Prompt(id="p2", creator_id="u1", prompt="yo", tag="#greeting",
                   created_at=SEED_TIME + timedelta(minutes=1)),
            Prompt(id="p3", creator_id="u2", prompt="x", tag="#misc",
                   created_at=SEED_TIME + timedelta(minutes=2)),
            # SQLite does not enforce foreign keys by default
            Prompt(id="p4", creator_id="ghost", prompt="orphan", tag="#misc",
                   created_at=SEED_TIME + timedelta(minutes=3)),
        ])
        await session.commit()
    yield connected_db


@pytest_asyncio.fixture
async def test_client():
    """
    Provides an async HTTP test client for endpoint testing.

    ASGITransport does not run the lifespan, so the connector is only
    touched by the handlers themselves.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from app.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
