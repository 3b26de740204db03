"""
Dependency injection container for FastAPI.

Provides the screen controller and settings to route handlers.
"""

from functools import lru_cache

from src.application.master_barang import MasterBarangController
from src.application.services import get_master_barang_controller
from src.config import Settings, get_settings


@lru_cache
def get_app_settings() -> Settings:
    """Get cached application settings."""
    return get_settings()


def get_controller() -> MasterBarangController:
    """Get the process-wide Master Barang controller."""
    return get_master_barang_controller()
