"""Health probes — liveness always 200, readiness 503 without a database."""

from app.infrastructure.database import DatabaseSessionManager
from app.main import app


async def test_liveness_returns_200_envelope(client):
    res = await client.get("/health")
    assert res.status_code == 200
    body = res.json()
    assert body["meta"]["status"] == 200
    assert body["data"]["status"] == "healthy"


async def test_readiness_without_database_returns_503(client):
    res = await client.get("/health/ready")
    assert res.status_code == 503
    body = res.json()
    assert body["data"] is None
    assert body["meta"]["title"] == "Database unavailable"


async def test_readiness_with_database_returns_200(client):
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    app.state.db_manager = manager
    try:
        res = await client.get("/health/ready")
    finally:
        del app.state.db_manager
        await manager.dispose()
    assert res.status_code == 200
    assert res.json()["data"] == {"status": "ready", "checks": {"database": "healthy"}}
