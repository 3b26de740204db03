"""Storage infrastructure implementations."""

from src.infrastructure.storage.memory import (
    InMemoryBarangStore,
    get_barang_store,
    reset_barang_store,
)

__all__ = [
    "InMemoryBarangStore",
    "get_barang_store",
    "reset_barang_store",
]
