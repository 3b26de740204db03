"""Item catalog (master barang) domain entities."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

# Fields a save may overwrite. ``id`` is assigned by the store and never merged.
MUTABLE_FIELDS: tuple[str, ...] = (
    "code",
    "name",
    "category",
    "unit",
    "minimum_stock",
    "active",
    "batch_number",
    "expiry",
    "description",
)

# Fields the save form refuses to submit blank
REQUIRED_FIELDS: tuple[str, ...] = ("code", "name", "category", "batch_number")

# Fields an item may hold as None; a None for any other field is ignored on merge
NULLABLE_FIELDS: tuple[str, ...] = ("batch_number", "expiry", "description")

# Choice lists offered by the item form. Suggestions only, never enforced.
CATEGORIES: tuple[str, ...] = (
    "Antibiotik",
    "Analgesik",
    "Antihistamin",
    "Antiseptik",
    "Elektrolit",
    "Vitamin",
)
UNITS: tuple[str, ...] = ("tablet", "kapsul", "botol", "sachet", "ampul", "tube")


class BarangDraft(BaseModel):
    """Partial item as submitted by the create/edit form.

    Only the fields the caller actually set (``model_fields_set``) take part
    in validation and in the update merge.
    """

    code: str | None = None
    name: str | None = None
    category: str | None = None
    unit: str | None = None
    minimum_stock: int | None = Field(default=None, ge=0)
    active: bool | None = None
    batch_number: str | None = None
    expiry: date | None = None  # ISO calendar date, no time component
    description: str | None = None

    @property
    def supplied(self) -> dict:
        """Fields explicitly set on this draft, in form order."""
        return {
            name: getattr(self, name)
            for name in MUTABLE_FIELDS
            if name in self.model_fields_set
        }


class Barang(BaseModel):
    """A stock item. Snapshots are immutable; updates produce a new snapshot."""

    model_config = ConfigDict(frozen=True)

    id: str
    code: str
    name: str
    category: str
    unit: str
    minimum_stock: int = Field(default=0, ge=0)
    active: bool = True
    batch_number: str | None = None
    expiry: date | None = None
    description: str | None = None

    @property
    def status_label(self) -> str:
        """Badge text shown in the item table."""
        return "Aktif" if self.active else "Non-aktif"

    def matches(self, term: str) -> bool:
        """Case-insensitive substring match on name or code."""
        needle = term.lower()
        return needle in self.name.lower() or needle in self.code.lower()

    def merged(self, draft: BarangDraft) -> "Barang":
        """Return a copy with the draft's supplied fields laid over this one."""
        update = {
            name: value
            for name, value in draft.supplied.items()
            if value is not None or name in NULLABLE_FIELDS
        }
        return self.model_copy(update=update)

    def to_draft(self) -> BarangDraft:
        """Pre-fill an edit form from this item."""
        return BarangDraft(**{name: getattr(self, name) for name in MUTABLE_FIELDS})
