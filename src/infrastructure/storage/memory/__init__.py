"""In-memory storage implementations."""

from src.config import get_settings
from src.infrastructure.storage.memory.barang_store import InMemoryBarangStore
from src.infrastructure.storage.memory.seed import SEED_ITEMS

# Singleton instance
_barang_store: InMemoryBarangStore | None = None


def create_barang_store() -> InMemoryBarangStore:
    """Build a fresh store from settings (seeded unless disabled)."""
    catalog = get_settings().catalog
    return InMemoryBarangStore(
        initial=SEED_ITEMS if catalog.seed_enabled else (),
        default_unit=catalog.default_unit,
    )


def get_barang_store() -> InMemoryBarangStore:
    """Get singleton item store instance."""
    global _barang_store
    if _barang_store is None:
        _barang_store = create_barang_store()
    return _barang_store


def reset_barang_store() -> None:
    """Drop the singleton so the next access re-seeds (for testing)."""
    global _barang_store
    _barang_store = None


__all__ = [
    "InMemoryBarangStore",
    "SEED_ITEMS",
    "create_barang_store",
    "get_barang_store",
    "reset_barang_store",
]
