"""Core domain entities."""

from src.core.entities.barang import (
    CATEGORIES,
    MUTABLE_FIELDS,
    REQUIRED_FIELDS,
    UNITS,
    Barang,
    BarangDraft,
)

__all__ = [
    "Barang",
    "BarangDraft",
    "MUTABLE_FIELDS",
    "REQUIRED_FIELDS",
    "CATEGORIES",
    "UNITS",
]
