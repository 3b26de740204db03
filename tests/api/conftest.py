"""Fixtures for API tests."""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from src.api.dependencies import get_controller
from src.api.main import app
from src.application.master_barang import MasterBarangController
from src.infrastructure.storage.memory import SEED_ITEMS, InMemoryBarangStore


@pytest.fixture
def controller() -> MasterBarangController:
    """A seeded controller private to the test."""
    return MasterBarangController(InMemoryBarangStore(initial=SEED_ITEMS), page_size=2)


@pytest.fixture
async def client(controller: MasterBarangController) -> AsyncGenerator[AsyncClient, None]:
    app.dependency_overrides[get_controller] = lambda: controller
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.pop(get_controller, None)
