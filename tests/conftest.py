"""Root conftest: shared fixtures for tech stack analyzer tests."""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient


@pytest.fixture
async def api_client():
    """HTTP client bound to the FastAPI app through ASGITransport (no network)."""
    from app.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
