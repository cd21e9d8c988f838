"""
Pytest fixtures for the test database, HTTP client and sample events.

Each test gets a throwaway SQLite file (via aiosqlite) with the schema
created on connect, so tests never share state.
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from eventhub.db.connection import DatabaseConnection
from eventhub.db.session import get_db
from eventhub.main import app
from eventhub.models.event import Event
from eventhub.schemas.event import EventCreate
from eventhub.services.event_service import create_event


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'eventhub_test.db'}"


@pytest_asyncio.fixture(scope="function")
async def database(database_url: str) -> AsyncGenerator[DatabaseConnection, None]:
    """Connected handle with tables created; disposed after the test."""
    db = DatabaseConnection(database_url, auto_create_schema=True)
    await db.connect()
    yield db
    await db.close()


@pytest_asyncio.fixture(scope="function")
async def db_session(database: DatabaseConnection) -> AsyncGenerator[AsyncSession, None]:
    session_factory = await database.sessionmaker()
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client that overrides the DB dependency with the test session."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def event_payload() -> dict:
    """A complete, valid event body; tests override individual fields."""
    return {
        "title": "PyCon US 2026",
        "description": "The largest annual gathering for the Python community.",
        "overview": "Talks, tutorials, sprints and an expo hall.",
        "image": "/images/pycon.png",
        "venue": "Long Beach Convention Center",
        "location": "Long Beach, CA, USA",
        "date": "2026-05-13",
        "time": "09:00",
        "mode": "offline",
        "audience": "Python developers",
        "agenda": ["Registration", "Keynote", "Lightning talks"],
        "organizer": "Python Software Foundation",
        "tags": ["python", "conference"],
    }


@pytest_asyncio.fixture
async def test_event(db_session: AsyncSession, event_payload: dict) -> Event:
    """An event created through the service write path."""
    return await create_event(db_session, EventCreate(**event_payload))
