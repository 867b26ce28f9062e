"""Shared test fixtures: in-memory SQLite store and an HTTP client on the app."""

import os

# Must be set before anything imports app.adapters.configuration.config
os.environ.setdefault("SECRET_KEY", "test-signing-secret")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.pool import StaticPool

from app.adapters.outbound.persistence.database import DatabaseSessionManager, get_db
from app.main import app

ADMIN = {
    "full_name": "Ada Lovelace",
    "email": "ada@example.com",
    "password": "analytical-engine",
    "repeatPassword": "analytical-engine",
}


@pytest.fixture
async def db_manager():
    # StaticPool keeps every session on the same in-memory database
    manager = DatabaseSessionManager(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
    )
    await manager.create_all()
    yield manager
    await manager.close()


@pytest.fixture
async def db(db_manager):
    async with db_manager.session() as session:
        yield session


@pytest.fixture
async def client(db_manager):
    """HTTP client on the app with get_db bound to the test store."""
    async def override_get_db():
        async with db_manager.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def admin_token(client):
    response = await client.post("/register", json=ADMIN)
    assert response.status_code == 201
    return response.json()["token"]


@pytest.fixture
async def auth_headers(admin_token):
    return {"Authorization": f"Bearer {admin_token}"}
