"""
Health check endpoints.
"""

import time

from fastapi import APIRouter, Depends

from src.api.dependencies import get_app_settings, get_controller
from src.application.dto.responses import HealthResponse
from src.application.master_barang import MasterBarangController
from src.config import Settings

router = APIRouter(prefix="/api/health", tags=["health"])

# Track startup time
_start_time = time.time()


@router.get("", response_model=HealthResponse)
async def health_check(
    settings: Settings = Depends(get_app_settings),
    controller: MasterBarangController = Depends(get_controller),
) -> HealthResponse:
    """
    Basic health check.

    Returns service status, uptime and the size of the item catalog.
    """
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        uptime_seconds=time.time() - _start_time,
        total_items=controller.catalog_size,
    )
