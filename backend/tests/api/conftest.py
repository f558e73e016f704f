"""API fixtures: ASGI test client with lifespan-built objects replaced by fakes.

Invariants:
    - The lifespan is not run (ASGITransport), so no real store or cache is contacted
    - Dependencies are overridden per test and cleared afterwards
"""

import pytest
from httpx import ASGITransport, AsyncClient

from values_service.api.dependencies import (
    get_cache, get_db_manager, get_intake_service,
)
from values_service.main import app
from values_service.services.value_intake import ValueIntakeService


class FakeDbManager:
    def __init__(self):
        self.healthy = True

    async def health_check(self) -> bool:
        return self.healthy


@pytest.fixture
def service(store, cache, channel):
    return ValueIntakeService(store, cache, channel)


@pytest.fixture
def db_manager():
    return FakeDbManager()


@pytest.fixture
async def client(service, cache, db_manager):
    app.dependency_overrides[get_intake_service] = lambda: service
    app.dependency_overrides[get_cache] = lambda: cache
    app.dependency_overrides[get_db_manager] = lambda: db_manager
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    await service.drain()
    app.dependency_overrides.clear()
