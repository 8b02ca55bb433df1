import pytest
from httpx import AsyncClient, ASGITransport

from src.config import settings
from src.main import create_app


@pytest.fixture
def failing_app():
    """App with one route that blows up."""
    app = create_app()

    @app.get("/api/boom")
    async def boom():
        raise RuntimeError("kaboom")

    return app


async def call_boom(app):
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        return await client.get("/api/boom")


@pytest.mark.asyncio
async def test_unhandled_error_includes_stack_outside_production(failing_app, monkeypatch):
    monkeypatch.setattr(settings, "ENVIRONMENT", "development")

    response = await call_boom(failing_app)

    assert response.status_code == 500
    data = response.json()
    assert data["message"] == "Internal server error"
    assert "RuntimeError: kaboom" in data["stack"]


@pytest.mark.asyncio
async def test_unhandled_error_hides_stack_in_production(failing_app, monkeypatch):
    monkeypatch.setattr(settings, "ENVIRONMENT", "production")

    response = await call_boom(failing_app)

    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error"}
