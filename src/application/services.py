"""
Service factory functions for dependency injection.

Wires the infrastructure store into the screen controller. API handlers
and the CLI obtain the controller from here.
"""

from typing import TYPE_CHECKING

from src.application.master_barang import MasterBarangController
from src.config import get_settings

if TYPE_CHECKING:
    from src.core.interfaces import IBarangStore


# Singleton controller instance (single-user screen state)
_master_barang_controller: MasterBarangController | None = None


def get_master_barang_controller(
    store: "IBarangStore | None" = None,
) -> MasterBarangController:
    """
    Get or create the MasterBarangController instance.

    Args:
        store: Optional store override; the seeded in-memory store otherwise

    Returns:
        The process-wide controller
    """
    global _master_barang_controller

    if _master_barang_controller is None or store is not None:
        if store is None:
            from src.infrastructure.storage.memory import get_barang_store

            store = get_barang_store()

        _master_barang_controller = MasterBarangController(
            store=store,
            page_size=get_settings().catalog.page_size,
        )

    return _master_barang_controller


def reset_services() -> None:
    """Reset all singleton services (for testing)."""
    global _master_barang_controller
    _master_barang_controller = None
