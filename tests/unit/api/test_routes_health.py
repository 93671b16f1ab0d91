"""Tests for the health endpoint against in-memory SQLite sessions."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from counter_service.adapters.persistence.database import Base, get_session
from counter_service.adapters.persistence.models import CounterModel
from counter_service.main import app


def sqlite_session(create_schema=True, rows=()):
    async def override():
        engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
        if create_schema:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        factory = async_sessionmaker(engine, expire_on_commit=False)
        async with factory() as session:
            if rows:
                session.add_all([CounterModel(id=i, count=c) for i, c in rows])
                await session.commit()
            yield session
        await engine.dispose()

    return override


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health_reports_seeded_counters(client):
    app.dependency_overrides[get_session] = sqlite_session(rows=[(0, 4), (123, 1)])
    r = client.get("/api/health")
    assert r.status_code == 200
    assert r.json() == {
        "status": "ok",
        "counters": "reachable",
        "counter_rows": 2,
        "default_counter_seeded": True,
        "service": "counter-service",
    }


def test_health_on_fresh_database(client):
    app.dependency_overrides[get_session] = sqlite_session()
    body = client.get("/api/health").json()
    assert body["status"] == "ok"
    assert body["counter_rows"] == 0
    assert body["default_counter_seeded"] is False


def test_health_degraded_without_counters_table(client):
    app.dependency_overrides[get_session] = sqlite_session(create_schema=False)
    r = client.get("/api/health")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "degraded"
    assert body["counters"] == "error: OperationalError"
    assert "counter_rows" not in body
