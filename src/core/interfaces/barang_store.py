"""Abstract interface for the item catalog store."""

from abc import ABC, abstractmethod

from src.core.entities.barang import Barang, BarangDraft


class IBarangStore(ABC):
    """Interface for the item collection, its search predicate and CRUD."""

    @property
    @abstractmethod
    def search_term(self) -> str:
        """The active search term ("" matches everything)."""
        pass

    @abstractmethod
    def set_search_term(self, term: str) -> None:
        """Replace the search predicate.

        This is a filter-criteria change: the owner must reset its pagination.
        """
        pass

    @abstractmethod
    def create(self, draft: BarangDraft) -> Barang:
        """Validate, assign a fresh id, apply defaults and append."""
        pass

    @abstractmethod
    def update(self, record_id: str, draft: BarangDraft) -> Barang:
        """Merge the draft's supplied fields over an existing item in place."""
        pass

    @abstractmethod
    def delete(self, record_id: str) -> bool:
        """Remove an item; an unknown id is a no-op. Returns True if removed."""
        pass

    @abstractmethod
    def get(self, record_id: str) -> Barang | None:
        """Get an item by id regardless of the search term."""
        pass

    @abstractmethod
    def list(self) -> tuple[Barang, ...]:
        """Items matching the search term, in insertion order."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Size of the whole collection, ignoring the search term."""
        pass
