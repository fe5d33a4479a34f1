"""Service test fixtures: tmp_path-backed pool service + FastAPI test client.

Invariants:
    - Every test gets a fresh data file under tmp_path
    - get_pool_service dependency overridden to use the test service
    - pool_manager patched for code that reads the module global (readiness)
"""

import pytest
from httpx import ASGITransport, AsyncClient

import deckpool.services.pool_service as pool_module
from deckpool.infrastructure.pool_store import PoolStore
from deckpool.main import app
from deckpool.services.pool_service import PoolService, get_pool_service


@pytest.fixture
def store(tmp_path):
    return PoolStore(tmp_path / "data.json")


@pytest.fixture
def service(store):
    return PoolService.from_store(store)


@pytest.fixture
async def client(service):
    """FastAPI test client with the pool dependency overridden."""
    app.dependency_overrides[get_pool_service] = lambda: service

    original_manager = pool_module.pool_manager
    pool_module.pool_manager = service

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    pool_module.pool_manager = original_manager
