"""Request DTOs for API endpoints.

Pydantic v2 models for API request validation.
These are the ONLY contracts between API and the screen controller.
"""

from datetime import date

from pydantic import BaseModel, Field

from src.core.entities.barang import BarangDraft


class BarangRequest(BaseModel):
    """Item form submission, for both create and update.

    Every field is optional at the schema level; required-field checks
    happen in the store so create and update share one rule.
    """

    code: str | None = Field(default=None, description="Item code", examples=["AMX001"])
    name: str | None = Field(
        default=None, description="Item name", examples=["Amoxicillin 500mg"]
    )
    category: str | None = Field(default=None, examples=["Antibiotik"])
    unit: str | None = Field(
        default=None,
        description="Unit of issue; defaults to the configured fallback on create",
        examples=["tablet"],
    )
    minimum_stock: int | None = Field(default=None, ge=0)
    active: bool | None = None
    batch_number: str | None = Field(default=None, examples=["B001"])
    expiry: date | None = Field(
        default=None,
        description="Expiry date as YYYY-MM-DD",
        examples=["2025-12-31"],
    )
    description: str | None = None

    def to_draft(self) -> BarangDraft:
        """Carry over only the fields the client actually sent."""
        return BarangDraft(**self.model_dump(exclude_unset=True))


class SearchRequest(BaseModel):
    """Replace the search term (matches item name or code)."""

    term: str = Field(default="", max_length=200, examples=["amox"])


class GoToPageRequest(BaseModel):
    """Jump to a page. Out-of-range values are clamped, not rejected."""

    page: int = Field(..., examples=[2])
