"""Master barang (item catalog) endpoints."""

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_app_settings, get_controller
from src.application.dto.requests import BarangRequest, GoToPageRequest, SearchRequest
from src.application.dto.responses import (
    ActionOutcomeResponse,
    BarangResponse,
    ErrorResponse,
    FormOptionsResponse,
    PageWindowResponse,
)
from src.application.master_barang import MasterBarangController
from src.config import Settings
from src.core.entities.barang import CATEGORIES, UNITS

router = APIRouter(prefix="/api/barang", tags=["barang"])


def _window(controller: MasterBarangController) -> PageWindowResponse:
    return PageWindowResponse.from_window(
        controller.window(), search_term=controller.search_term
    )


@router.get("", response_model=PageWindowResponse)
async def get_window(
    controller: MasterBarangController = Depends(get_controller),
) -> PageWindowResponse:
    """Current page of the filtered item list."""
    return _window(controller)


@router.put("/search", response_model=PageWindowResponse)
async def set_search_term(
    request: SearchRequest,
    controller: MasterBarangController = Depends(get_controller),
) -> PageWindowResponse:
    """Replace the search term and return to page 1."""
    controller.set_search_term(request.term)
    return _window(controller)


@router.post("/page", response_model=PageWindowResponse)
async def go_to_page(
    request: GoToPageRequest,
    controller: MasterBarangController = Depends(get_controller),
) -> PageWindowResponse:
    """Jump to a page (clamped into range)."""
    controller.go_to_page(request.page)
    return _window(controller)


@router.post("/page/next", response_model=PageWindowResponse)
async def go_to_next_page(
    controller: MasterBarangController = Depends(get_controller),
) -> PageWindowResponse:
    controller.go_to_next_page()
    return _window(controller)


@router.post("/page/previous", response_model=PageWindowResponse)
async def go_to_previous_page(
    controller: MasterBarangController = Depends(get_controller),
) -> PageWindowResponse:
    controller.go_to_previous_page()
    return _window(controller)


@router.get("/options", response_model=FormOptionsResponse)
async def get_form_options(
    settings: Settings = Depends(get_app_settings),
) -> FormOptionsResponse:
    """Category and unit choices for the item form."""
    return FormOptionsResponse(
        categories=list(CATEGORIES),
        units=list(UNITS),
        default_unit=settings.catalog.default_unit,
    )


@router.get("/outcome", response_model=ActionOutcomeResponse | None)
async def get_last_outcome(
    controller: MasterBarangController = Depends(get_controller),
) -> ActionOutcomeResponse | None:
    """Outcome of the last create/update/delete, if any."""
    if controller.last_outcome is None:
        return None
    return ActionOutcomeResponse.from_outcome(controller.last_outcome)


@router.get(
    "/{record_id}",
    response_model=BarangResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_barang(
    record_id: str,
    controller: MasterBarangController = Depends(get_controller),
) -> BarangResponse:
    return BarangResponse.from_entity(controller.get(record_id))


@router.post(
    "",
    response_model=BarangResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def create_barang(
    request: BarangRequest,
    controller: MasterBarangController = Depends(get_controller),
) -> BarangResponse:
    """Add an item to the end of the catalog."""
    item = controller.create(request.to_draft())
    return BarangResponse.from_entity(item)


@router.put(
    "/{record_id}",
    response_model=BarangResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
    },
)
async def update_barang(
    record_id: str,
    request: BarangRequest,
    controller: MasterBarangController = Depends(get_controller),
) -> BarangResponse:
    """Merge the submitted fields over an existing item."""
    item = controller.update(record_id, request.to_draft())
    return BarangResponse.from_entity(item)


@router.delete("/{record_id}", response_model=ActionOutcomeResponse)
async def delete_barang(
    record_id: str,
    controller: MasterBarangController = Depends(get_controller),
) -> ActionOutcomeResponse:
    """Delete an item. Unknown ids are accepted as already deleted."""
    return ActionOutcomeResponse.from_outcome(controller.delete(record_id))
