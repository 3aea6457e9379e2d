"""API test fixtures — fresh store, app, and ASGI client per test.

Invariants:
    - Every test gets its own seeded MemStorage
    - Settings handed to create_app carry a zero conversion delay

Design Decisions:
    - create_app(storage=...) over patching a global: the app reads its store
      from app.state, so swapping stores needs no monkeypatching
"""

import pytest
from httpx import ASGITransport, AsyncClient

from media_catalog.config import Settings
from media_catalog.infrastructure.memory_storage import MemStorage
from media_catalog.main import create_app


@pytest.fixture
def test_settings():
    return Settings(conversion_delay_seconds=0)


@pytest.fixture
def storage():
    return MemStorage()


@pytest.fixture
def app(storage, test_settings):
    return create_app(storage=storage, settings=test_settings)


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
