"""Pytest configuration and fixtures."""

from collections.abc import Callable, Generator

import pytest

from src.application.services import reset_services
from src.config import reset_settings
from src.core.entities.barang import Barang, BarangDraft
from src.infrastructure.storage.memory import InMemoryBarangStore, reset_barang_store


@pytest.fixture(autouse=True)
def _fresh_singletons() -> Generator[None, None, None]:
    """Every test starts from freshly seeded settings, store and controller."""
    reset_settings()
    reset_barang_store()
    reset_services()
    yield
    reset_services()
    reset_barang_store()
    reset_settings()


@pytest.fixture
def make_items() -> Callable[[int], list[Barang]]:
    """Build ``n`` valid items with ids "1".."n" and codes ITM001..."""

    def _make(n: int) -> list[Barang]:
        return [
            Barang(
                id=str(i),
                code=f"ITM{i:03d}",
                name=f"Item {i}",
                category="Vitamin",
                unit="tablet",
                batch_number=f"B{i:03d}",
            )
            for i in range(1, n + 1)
        ]

    return _make


@pytest.fixture
def sample_draft() -> BarangDraft:
    """A complete form submission."""
    return BarangDraft(
        code="VTC001",
        name="Vitamin C 500mg",
        category="Vitamin",
        batch_number="B100",
    )


@pytest.fixture
def empty_store() -> InMemoryBarangStore:
    return InMemoryBarangStore()
