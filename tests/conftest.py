import os

# Keep the module-level engine off PostgreSQL during tests
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from typing import AsyncGenerator
from src.main import app
from src.database import get_db, Base


@pytest_asyncio.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Fresh in-memory database and session for each test."""
    test_engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    TestingSessionLocal = sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )

    async with TestingSessionLocal() as session:
        yield session

    await test_engine.dispose()

@pytest_asyncio.fixture(scope="function")
async def async_client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Client for testing API endpoints."""
    # Override the get_db dependency to use our test session
    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def make_client(async_client: AsyncClient):
    """POST a client and return its JSON."""
    async def _make(**overrides):
        payload = {"name": "Tom Cook", "email": "tom@acme.io", "company": "Acme Corporation"}
        payload.update(overrides)
        response = await async_client.post("/api/clients", json=payload)
        assert response.status_code == 201, response.text
        return response.json()
    return _make


@pytest.fixture
def make_project(async_client: AsyncClient, make_client):
    """POST a project (creating a client when none is given) and return its JSON."""
    async def _make(**overrides):
        if "clientId" not in overrides:
            overrides["clientId"] = (await make_client())["id"]
        payload = {"name": "Website Translation - German", "amount": 950, "volume": 15000}
        payload.update(overrides)
        response = await async_client.post("/api/projects", json=payload)
        assert response.status_code == 201, response.text
        return response.json()
    return _make
