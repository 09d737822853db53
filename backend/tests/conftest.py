"""Root conftest — shared test configuration, async DB and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test session factory
    - dependency_overrides cleared after every client test

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - ASGITransport does not run the lifespan, so app.state.db_manager stays unset
      unless a test installs one
"""

import os

# Ensure tests never reach a real database
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("ENVIRONMENT", "test")

from datetime import datetime, timezone  # noqa: E402
from types import SimpleNamespace  # noqa: E402

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient  # noqa: E402

from app.db.base import Base  # noqa: E402
from app.infrastructure.database import get_db  # noqa: E402
from app.main import app  # noqa: E402
from app.models.client import Client  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def seed_clients(test_db):
    """Insert two clients: one named, one without a name."""
    clients = [
        Client(
            id="65a1f0c2b3d4e5f60718293a",
            name="Ada Lovelace",
            email="ada@example.com",
            created_at=datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
        ),
        Client(
            id="65a1f0c2b3d4e5f60718293b",
            name=None,
            email="anonymous@example.com",
            created_at=datetime(2024, 1, 3, 0, 0, 0, tzinfo=timezone.utc),
        ),
    ]
    test_db.add_all(clients)
    await test_db.commit()
    return clients


class FakeClientRepository:
    """Satisfies the ClientRepository protocol over a plain dict.

    Every call is recorded in .calls so tests can assert the store was
    (or was not) queried.
    """

    def __init__(self, clients=None):
        self.clients = {c.id: c for c in (clients or [])}
        self.calls: list[tuple] = []

    async def find_all(self):
        self.calls.append(("find_all",))
        return list(self.clients.values())

    async def find_by_id(self, client_id):
        self.calls.append(("find_by_id", client_id))
        return self.clients.get(client_id)


@pytest.fixture
def make_client():
    def _make(client_id, name="Ada Lovelace", email="ada@example.com", created_at=None):
        return SimpleNamespace(
            id=client_id, name=name, email=email, created_at=created_at,
        )
    return _make


@pytest.fixture
def fake_repository_factory():
    return FakeClientRepository
