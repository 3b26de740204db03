"""In-memory implementation of the item catalog store."""

from collections.abc import Iterable

from src.config import get_logger
from src.core.entities.barang import REQUIRED_FIELDS, Barang, BarangDraft
from src.core.exceptions import NotFoundError, RequiredFieldsError
from src.core.interfaces.barang_store import IBarangStore

logger = get_logger(__name__)


def _is_blank(value: object) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class InMemoryBarangStore(IBarangStore):
    """
    Volatile item collection.

    Ids are decimal strings from a counter that starts past the largest
    numeric id of the initial collection. Every issued id is remembered, so
    an id is never handed out twice, even after its item is deleted.
    """

    def __init__(
        self,
        initial: Iterable[Barang] = (),
        default_unit: str = "buah",
    ) -> None:
        self._items: list[Barang] = list(initial)
        self._default_unit = default_unit
        self._search_term = ""
        self._issued_ids: set[str] = {item.id for item in self._items}
        self._next_id = 1 + max(
            (int(item_id) for item_id in self._issued_ids if item_id.isdigit()),
            default=0,
        )

    @property
    def search_term(self) -> str:
        return self._search_term

    def set_search_term(self, term: str) -> None:
        self._search_term = term
        logger.debug("search_term_changed", term=term)

    def create(self, draft: BarangDraft) -> Barang:
        self._validate(draft, partial=False)
        item = Barang(
            id=self._issue_id(),
            code=draft.code,  # type: ignore[arg-type]
            name=draft.name,  # type: ignore[arg-type]
            category=draft.category,  # type: ignore[arg-type]
            unit=draft.unit or self._default_unit,
            minimum_stock=draft.minimum_stock or 0,
            active=True if draft.active is None else draft.active,
            batch_number=draft.batch_number,
            expiry=draft.expiry,
            description=draft.description,
        )
        self._items.append(item)
        logger.info("barang_created", record_id=item.id, code=item.code)
        return item

    def update(self, record_id: str, draft: BarangDraft) -> Barang:
        self._validate(draft, partial=True)
        position = self._position(record_id)
        if position is None:
            raise NotFoundError(record_id)

        item = self._items[position].merged(draft)
        self._items[position] = item
        logger.info(
            "barang_updated",
            record_id=record_id,
            fields=sorted(draft.supplied),
        )
        return item

    def delete(self, record_id: str) -> bool:
        position = self._position(record_id)
        if position is None:
            logger.debug("barang_delete_skipped", record_id=record_id)
            return False
        del self._items[position]
        logger.info("barang_deleted", record_id=record_id)
        return True

    def get(self, record_id: str) -> Barang | None:
        position = self._position(record_id)
        return None if position is None else self._items[position]

    def list(self) -> tuple[Barang, ...]:
        if not self._search_term:
            return tuple(self._items)
        return tuple(item for item in self._items if item.matches(self._search_term))

    def count(self) -> int:
        return len(self._items)

    def _validate(self, draft: BarangDraft, partial: bool) -> None:
        """Required fields must be non-blank.

        A partial (update) draft is only checked on the fields it supplies.
        """
        supplied = draft.supplied
        missing = [
            name
            for name in REQUIRED_FIELDS
            if (name in supplied or not partial) and _is_blank(getattr(draft, name))
        ]
        if missing:
            logger.info("barang_validation_failed", missing_fields=missing)
            raise RequiredFieldsError(missing)

    def _position(self, record_id: str) -> int | None:
        for index, item in enumerate(self._items):
            if item.id == record_id:
                return index
        return None

    def _issue_id(self) -> str:
        while str(self._next_id) in self._issued_ids:
            self._next_id += 1
        record_id = str(self._next_id)
        self._issued_ids.add(record_id)
        self._next_id += 1
        return record_id
