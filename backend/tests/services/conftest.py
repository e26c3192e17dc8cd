"""Service test fixtures — fresh record store + FastAPI test client.

Invariants:
    - Every test gets its own empty RecordStore
    - get_record_store dependency overridden to return that store

Design Decisions:
    - Dependency override instead of running the lifespan: ASGITransport does
      not send lifespan events, and tests need a handle on the store anyway
"""

import pytest
from httpx import ASGITransport, AsyncClient

from employee_registry.core.record_store import RecordStore
from employee_registry.infrastructure.record_store_provider import get_record_store
from employee_registry.main import app


@pytest.fixture
def store():
    return RecordStore()


@pytest.fixture
async def client(store):
    """FastAPI test client with the store dependency overridden."""
    app.dependency_overrides[get_record_store] = lambda: store

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
