"""
Core business logic services.

Layer-pure services that depend only on:
- src/core/entities/*
- src/core/exceptions.py

NO infrastructure imports.
"""

from src.core.services.pagination import (
    PageWindow,
    PaginationEngine,
    clamp_page,
    compute_total_pages,
)

__all__ = [
    "PageWindow",
    "PaginationEngine",
    "clamp_page",
    "compute_total_pages",
]
