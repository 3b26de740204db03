"""API route modules."""

from src.api.routes.barang import router as barang_router
from src.api.routes.health import router as health_router

__all__ = [
    "health_router",
    "barang_router",
]
