"""Shared pytest fixtures configured to use SQLite in-memory for tests."""

import logging
import os

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

# Tell app lifespan to skip real DB init
os.environ["TASKBOARD_SKIP_LIFESPAN_DB"] = "1"

from src.taskboard.core.models.base import BaseModel  # noqa: E402
from src.taskboard.core.seed import SEED_USERS, seed_users  # noqa: E402
from src.taskboard.database import get_db_session  # noqa: E402
from src.taskboard.main import app  # noqa: E402

# Silence extremely verbose DEBUG logs from aiosqlite to keep test output readable
logging.getLogger("aiosqlite").setLevel(logging.WARNING)

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def test_engine():
    """Fresh SQLite in-memory engine per test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,  # keep the same memory DB across connections
        connect_args={"check_same_thread": False},
    )

    # SQLite only enforces foreign keys (and ON DELETE CASCADE) with this pragma
    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):  # noqa: ANN001
        cursor = dbapi_connection.cursor()
        try:
            cursor.execute("PRAGMA foreign_keys=ON")
        finally:
            cursor.close()

    from src.taskboard.core import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
async def test_session(test_engine):
    """Database session bound to the test engine."""
    session_maker = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_maker() as session:
        try:
            yield session
        finally:
            await session.rollback()


@pytest.fixture
async def users(test_session):
    """The seeded demo users keyed by username."""
    created = await seed_users(test_session)
    assert len(created) == len(SEED_USERS)
    return {user.username: user for user in created}


@pytest.fixture
def test_app(test_session):
    """App with the DB dependency pointing at the test session."""

    async def _override_get_db():
        yield test_session

    app.dependency_overrides[get_db_session] = _override_get_db
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(test_app):
    """Async client talking to the app in-process."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def todo_payload(users):
    """Valid create-todo body for alex."""
    return {
        "title": "Prepare sprint demo",
        "description": "Slides and a short walkthrough",
        "priority": "high",
        "userPid": users["alex"].pid,
        "tags": ["work", "demo"],
        "mentions": ["@maria"],
    }
