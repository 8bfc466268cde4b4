"""Integration tests for application wiring and health endpoints."""

import pytest
from httpx import ASGITransport, AsyncClient

from gatekeeper.core.config import Settings
from gatekeeper.core.exceptions import SigningError
from gatekeeper.infrastructure.api.app import create_app


def test_create_app_requires_secret_key():
    """Test that the application refuses to build without a signing key."""
    with pytest.raises(SigningError):
        create_app(
            Settings(_env_file=None, secret_key="", environment="testing", log_format="console")
        )


def test_docs_disabled_outside_development(app):
    assert app.docs_url is None
    assert app.openapi_url is None


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    res = await client.get("/health")

    assert res.status_code == 200
    assert res.json()["status"] == "healthy"
    assert res.json()["service"] == "Gatekeeper"


@pytest.mark.asyncio
async def test_live(client: AsyncClient):
    res = await client.get("/live")

    assert res.status_code == 200
    assert res.json()["status"] == "alive"


@pytest.mark.asyncio
async def test_root(client: AsyncClient):
    res = await client.get("/")

    assert res.status_code == 200
    assert res.json()["api_version"] == "v1"


@pytest.mark.asyncio
async def test_unhandled_error_uses_envelope(settings: Settings):
    """Test that an unexpected exception becomes a 500 envelope."""
    app = create_app(settings)

    @app.get("/boom")
    async def boom():
        raise RuntimeError("kaboom")

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        res = await ac.get("/boom")

    assert res.status_code == 500
    assert res.json() == {
        "data": {},
        "success": False,
        "message": "Internal server error",
        "err": "An unexpected error occurred",
    }
