"""Initial item collection loaded at startup."""

from datetime import date

from src.core.entities.barang import Barang

SEED_ITEMS: tuple[Barang, ...] = (
    Barang(
        id="1", code="AMX001", name="Amoxicillin 500mg", category="Antibiotik",
        unit="tablet", minimum_stock=100, active=True, batch_number="B001",
        expiry=date(2025, 12, 31),
    ),
    Barang(
        id="2", code="PCT001", name="Paracetamol 500mg", category="Analgesik",
        unit="tablet", minimum_stock=200, active=True, batch_number="B002",
        expiry=date(2026, 6, 15),
    ),
    Barang(
        id="3", code="CTM001", name="CTM 4mg", category="Antihistamin",
        unit="tablet", minimum_stock=50, active=True, batch_number="B003",
        expiry=date(2025, 3, 20),
    ),
    Barang(
        id="4", code="ORS001", name="Oralit", category="Elektrolit",
        unit="sachet", minimum_stock=100, active=True, batch_number="B004",
        expiry=date(2027, 1, 10),
    ),
    Barang(
        id="5", code="BTD001", name="Betadine 10ml", category="Antiseptik",
        unit="botol", minimum_stock=25, active=False, batch_number="B005",
        expiry=date(2025, 9, 30),
    ),
)
