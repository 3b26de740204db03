"""
Application layer - screen controller, DTOs, and service factories.

The API and CLI talk to the catalog only through the controller
returned by ``get_master_barang_controller``.
"""

from src.application.master_barang import ActionOutcome, MasterBarangController
from src.application.services import get_master_barang_controller, reset_services

__all__ = [
    "ActionOutcome",
    "MasterBarangController",
    "get_master_barang_controller",
    "reset_services",
]
