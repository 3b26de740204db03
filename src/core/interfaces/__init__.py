"""Core interfaces (ports) for dependency injection."""

from src.core.interfaces.barang_store import IBarangStore

__all__ = [
    "IBarangStore",
]
