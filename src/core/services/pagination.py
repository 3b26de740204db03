"""
Pagination engine.

Derives a clamped, 1-based page window over an ordered sequence. The engine
knows nothing about the shape of the items it pages; its owner supplies the
sequence (directly or through a source callable) and calls ``reset()``
whenever the criteria that produced the sequence change.
"""

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from src.core.exceptions import ConfigurationError

T = TypeVar("T")


@dataclass(frozen=True)
class PageWindow(Generic[T]):
    """The visible slice of a sequence plus its display bounds."""

    current_page: int
    page_size: int
    total_items: int
    total_pages: int
    items: list[T] = field(default_factory=list)
    start_index: int = 0  # 1-based, 0 when empty
    end_index: int = 0

    @property
    def has_next_page(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def has_previous_page(self) -> bool:
        return self.current_page > 1

    @property
    def page_numbers(self) -> list[int]:
        """Page links to render, 1..total_pages."""
        return list(range(1, self.total_pages + 1))

    @property
    def show_controls(self) -> bool:
        """The pager is only worth rendering with more than one page."""
        return self.total_pages > 1


def compute_total_pages(total_items: int, page_size: int) -> int:
    """ceil(total_items / page_size), 0 for an empty sequence."""
    return max(0, math.ceil(total_items / page_size))


def clamp_page(page: int, total_pages: int) -> int:
    """Clamp into [1, total_pages]; an empty sequence still sits on page 1."""
    return max(1, min(page, total_pages))


class PaginationEngine(Generic[T]):
    """
    Stateful page cursor over a sequence.

    The page size is fixed for the lifetime of the engine. Out-of-range
    navigation is clamped silently, never raised.
    """

    def __init__(
        self,
        page_size: int = 10,
        source: Callable[[], Sequence[T]] | None = None,
    ) -> None:
        if page_size < 1:
            raise ConfigurationError(
                f"Page size must be at least 1, got {page_size}",
                details={"page_size": page_size},
            )
        self._page_size = page_size
        self._source = source
        self._current_page = 1

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def current_page(self) -> int:
        return self._current_page

    def derive(self, sequence: Sequence[T], current_page: int | None = None) -> PageWindow[T]:
        """
        Derive the window for ``current_page`` (defaults to the cursor).

        A page beyond the last one is clamped for the derivation, so a cursor
        left behind by a shrinking sequence shows the last page instead of an
        empty or inverted range.
        """
        total_items = len(sequence)
        total_pages = compute_total_pages(total_items, self._page_size)
        if current_page is None:
            current_page = self._current_page
        page = clamp_page(current_page, total_pages)

        if total_items == 0:
            return PageWindow(
                current_page=page,
                page_size=self._page_size,
                total_items=0,
                total_pages=0,
            )

        start = (page - 1) * self._page_size
        end = min(start + self._page_size, total_items)
        return PageWindow(
            current_page=page,
            page_size=self._page_size,
            total_items=total_items,
            total_pages=total_pages,
            items=list(sequence[start:end]),
            start_index=start + 1,
            end_index=end,
        )

    def window(self) -> PageWindow[T]:
        """
        Derive the window for the bound source at the current cursor.

        A cursor clamped by the derivation is written back, so the cursor
        always names the page being shown.
        """
        window = self.derive(self._sequence())
        if window.total_items:
            self._current_page = window.current_page
        return window

    def go_to_page(self, page: int) -> None:
        """Move the cursor to ``page``, clamped into range."""
        self._current_page = clamp_page(page, self._total_pages())

    def go_to_next_page(self) -> None:
        total_pages = self._settle()
        if self._current_page < total_pages:
            self._current_page += 1

    def go_to_previous_page(self) -> None:
        self._settle()
        if self._current_page > 1:
            self._current_page -= 1

    def reset(self) -> None:
        """Back to page 1. Call on every filter-criteria change."""
        self._current_page = 1

    def _sequence(self) -> Sequence[T]:
        if self._source is None:
            raise ConfigurationError("PaginationEngine has no source bound")
        return self._source()

    def _total_pages(self) -> int:
        return compute_total_pages(len(self._sequence()), self._page_size)

    def _settle(self) -> int:
        """Pull a cursor left past the last page back onto it."""
        total_pages = self._total_pages()
        if total_pages:
            self._current_page = clamp_page(self._current_page, total_pages)
        return total_pages
