"""Response DTOs for API endpoints.

Pydantic v2 models for API response serialization.
"""

from datetime import date, datetime

from pydantic import BaseModel, Field

from src.application.master_barang import ActionOutcome
from src.core.entities.barang import Barang
from src.core.services.pagination import PageWindow


class BarangResponse(BaseModel):
    """Item response DTO."""

    id: str
    code: str
    name: str
    category: str
    unit: str
    minimum_stock: int
    active: bool
    status_label: str
    batch_number: str | None = None
    expiry: date | None = None
    description: str | None = None

    @classmethod
    def from_entity(cls, item: Barang) -> "BarangResponse":
        return cls(**item.model_dump(), status_label=item.status_label)


class PageWindowResponse(BaseModel):
    """One page of the filtered item list plus pager state."""

    search_term: str = ""
    current_page: int
    page_size: int
    total_items: int
    total_pages: int
    start_index: int
    end_index: int
    has_next_page: bool
    has_previous_page: bool
    show_controls: bool
    page_numbers: list[int] = Field(default_factory=list)
    items: list[BarangResponse] = Field(default_factory=list)

    @classmethod
    def from_window(
        cls, window: PageWindow[Barang], search_term: str = ""
    ) -> "PageWindowResponse":
        return cls(
            search_term=search_term,
            current_page=window.current_page,
            page_size=window.page_size,
            total_items=window.total_items,
            total_pages=window.total_pages,
            start_index=window.start_index,
            end_index=window.end_index,
            has_next_page=window.has_next_page,
            has_previous_page=window.has_previous_page,
            show_controls=window.show_controls,
            page_numbers=window.page_numbers,
            items=[BarangResponse.from_entity(item) for item in window.items],
        )


class ActionOutcomeResponse(BaseModel):
    """Outcome of a CRUD action, rendered as a toast by the client."""

    success: bool
    title: str
    message: str
    record_id: str | None = None

    @classmethod
    def from_outcome(cls, outcome: ActionOutcome) -> "ActionOutcomeResponse":
        return cls(
            success=outcome.success,
            title=outcome.title,
            message=outcome.message,
            record_id=outcome.record_id,
        )


class FormOptionsResponse(BaseModel):
    """Choice lists for the item form."""

    categories: list[str]
    units: list[str]
    default_unit: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str = "1.0.0"
    uptime_seconds: float
    total_items: int | None = None


class ErrorResponse(BaseModel):
    """Standardized error response DTO.

    Every error response includes:
    - error_code: machine-readable code (e.g. RECORD_NOT_FOUND)
    - message: human-readable description
    - hint: suggested recovery action
    - path: request path that triggered the error
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error description")
    hint: str | None = Field(default=None, description="Suggested recovery action")
    detail: str | None = Field(default=None, description="Additional details")
    path: str | None = Field(default=None, description="Request path")
    timestamp: datetime = Field(default_factory=datetime.now)
