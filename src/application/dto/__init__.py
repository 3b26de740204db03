"""Data Transfer Objects for API layer.

Request DTOs: Validate and parse incoming API requests.
Response DTOs: Structure and serialize API responses.
"""

from src.application.dto.requests import (
    BarangRequest,
    GoToPageRequest,
    SearchRequest,
)
from src.application.dto.responses import (
    ActionOutcomeResponse,
    BarangResponse,
    ErrorResponse,
    FormOptionsResponse,
    HealthResponse,
    PageWindowResponse,
)

__all__ = [
    # Requests
    "BarangRequest",
    "SearchRequest",
    "GoToPageRequest",
    # Responses
    "BarangResponse",
    "PageWindowResponse",
    "ActionOutcomeResponse",
    "FormOptionsResponse",
    "HealthResponse",
    "ErrorResponse",
]
