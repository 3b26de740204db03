"""
Master Barang screen controller.

Owns the screen state (search term, dialog flags, form draft, last outcome)
and composes the item store with the pagination engine. The presentation
layer reads ``window()`` and ``last_outcome`` and calls the commands below.
"""

from dataclasses import dataclass

from pydantic import ValidationError as PydanticValidationError

from src.config import get_logger
from src.core.entities.barang import Barang, BarangDraft
from src.core.exceptions import NotFoundError, ValidationError
from src.core.interfaces.barang_store import IBarangStore
from src.core.services.pagination import PageWindow, PaginationEngine

logger = get_logger(__name__)

TITLE_SUCCESS = "Berhasil"
TITLE_ERROR = "Error"

MSG_INCOMPLETE = "Harap lengkapi semua field yang diperlukan"
MSG_CREATED = "Data barang berhasil ditambahkan"
MSG_UPDATED = "Data barang berhasil diperbarui"
MSG_DELETED = "Data barang berhasil dihapus"
MSG_NOT_FOUND = "Data barang tidak ditemukan"


@dataclass(frozen=True)
class ActionOutcome:
    """Result of the last CRUD action, for the notification component."""

    success: bool
    title: str
    message: str
    record_id: str | None = None

    @classmethod
    def ok(cls, message: str, record_id: str | None = None) -> "ActionOutcome":
        return cls(success=True, title=TITLE_SUCCESS, message=message, record_id=record_id)

    @classmethod
    def failed(cls, message: str, record_id: str | None = None) -> "ActionOutcome":
        return cls(success=False, title=TITLE_ERROR, message=message, record_id=record_id)


class MasterBarangController:
    """Screen state plus the commands the item screen issues."""

    def __init__(self, store: IBarangStore, page_size: int = 10) -> None:
        self._store = store
        self._pagination: PaginationEngine[Barang] = PaginationEngine(
            page_size=page_size, source=store.list
        )
        self.dialog_open = False
        self.editing_id: str | None = None
        self.draft = BarangDraft()
        self.last_outcome: ActionOutcome | None = None

    # -- Browsing ------------------------------------------------------------

    @property
    def search_term(self) -> str:
        return self._store.search_term

    @property
    def current_page(self) -> int:
        return self._pagination.current_page

    @property
    def catalog_size(self) -> int:
        """Number of items in the catalog, ignoring the search term."""
        return self._store.count()

    def set_search_term(self, term: str) -> PageWindow[Barang]:
        """Apply a new search term, then return to page 1."""
        self._store.set_search_term(term)
        self._pagination.reset()
        return self.window()

    def window(self) -> PageWindow[Barang]:
        return self._pagination.window()

    def go_to_page(self, page: int) -> PageWindow[Barang]:
        self._pagination.go_to_page(page)
        return self.window()

    def go_to_next_page(self) -> PageWindow[Barang]:
        self._pagination.go_to_next_page()
        return self.window()

    def go_to_previous_page(self) -> PageWindow[Barang]:
        self._pagination.go_to_previous_page()
        return self.window()

    def get(self, record_id: str) -> Barang:
        item = self._store.get(record_id)
        if item is None:
            raise NotFoundError(record_id)
        return item

    # -- CRUD ----------------------------------------------------------------

    def create(self, draft: BarangDraft) -> Barang:
        """Create an item. Failures are recorded, then re-raised."""
        try:
            item = self._store.create(draft)
        except ValidationError:
            self.last_outcome = ActionOutcome.failed(MSG_INCOMPLETE)
            raise
        self.last_outcome = ActionOutcome.ok(MSG_CREATED, item.id)
        return item

    def update(self, record_id: str, draft: BarangDraft) -> Barang:
        """Update an item. Failures are recorded, then re-raised."""
        try:
            item = self._store.update(record_id, draft)
        except ValidationError:
            self.last_outcome = ActionOutcome.failed(MSG_INCOMPLETE, record_id)
            raise
        except NotFoundError:
            self.last_outcome = ActionOutcome.failed(MSG_NOT_FOUND, record_id)
            raise
        self.last_outcome = ActionOutcome.ok(MSG_UPDATED, item.id)
        return item

    def delete(self, record_id: str) -> ActionOutcome:
        """Delete an item. Deleting an unknown id still reports success."""
        self._store.delete(record_id)
        self.last_outcome = ActionOutcome.ok(MSG_DELETED, record_id)
        return self.last_outcome

    # -- Dialog --------------------------------------------------------------

    def open_create(self) -> None:
        self.editing_id = None
        self.draft = BarangDraft()
        self.dialog_open = True

    def open_edit(self, record_id: str) -> None:
        """Open the dialog pre-filled with an existing item."""
        item = self.get(record_id)
        self.editing_id = item.id
        self.draft = item.to_draft()
        self.dialog_open = True

    def edit_draft(self, **fields: object) -> BarangDraft:
        """
        Set form fields on the draft, keeping those already entered.

        A value the form cannot hold (negative stock, unparseable expiry)
        leaves the draft unchanged and records a failed outcome.
        """
        values = {**self.draft.supplied, **fields}
        try:
            self.draft = BarangDraft(**values)
        except PydanticValidationError as e:
            logger.info(
                "barang_draft_rejected",
                fields=sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]}),
                editing_id=self.editing_id,
            )
            self.last_outcome = ActionOutcome.failed(MSG_INCOMPLETE, self.editing_id)
        return self.draft

    def cancel(self) -> None:
        self.dialog_open = False
        self.editing_id = None
        self.draft = BarangDraft()

    def save(self) -> ActionOutcome:
        """
        Submit the dialog: create when adding, update when editing.

        On failure the dialog stays open with the draft intact and the
        failed outcome is returned instead of raised.
        """
        try:
            if self.editing_id is None:
                self.create(self.draft)
            else:
                self.update(self.editing_id, self.draft)
        except (ValidationError, NotFoundError) as e:
            logger.info(
                "barang_save_rejected",
                error_code=e.code,
                editing_id=self.editing_id,
            )
            return self.last_outcome  # type: ignore[return-value]

        self.cancel()
        return self.last_outcome  # type: ignore[return-value]
