from __future__ import annotations

from collections.abc import AsyncIterator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from demo_admin.config import get_settings
from demo_admin.main import create_app


@pytest.fixture(autouse=True)
def test_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    # Start every app empty so assigned ids are predictable; seeded tests opt back in.
    monkeypatch.setenv("SEED_DEMO_DATA", "false")
    monkeypatch.setenv("ENABLE_METRICS_ENDPOINT", "true")
    get_settings.cache_clear()

    yield

    get_settings.cache_clear()


@pytest.fixture
def app() -> FastAPI:
    return create_app()


@pytest.fixture
def seeded_app(monkeypatch: pytest.MonkeyPatch) -> FastAPI:
    monkeypatch.setenv("SEED_DEMO_DATA", "true")
    get_settings.cache_clear()
    return create_app()


@pytest.fixture
async def api_client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
async def seeded_client(seeded_app: FastAPI) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=seeded_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
