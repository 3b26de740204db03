"""
Unit tests for the pagination engine.

Tests:
- Page count and window bounds
- Clamped navigation (go_to_page, next, previous)
- Reset and stale cursors
- Edge cases (empty sequence, single page)
"""

import math

import pytest

from src.core.exceptions import ConfigurationError
from src.core.services.pagination import (
    PageWindow,
    PaginationEngine,
    clamp_page,
    compute_total_pages,
)


def bound_engine(n: int, page_size: int = 10) -> PaginationEngine[int]:
    data = list(range(1, n + 1))
    return PaginationEngine(page_size=page_size, source=lambda: data)


class TestPageMath:
    @pytest.mark.parametrize("page_size", [1, 2, 3, 7, 10, 25])
    def test_total_pages_and_item_sum(self, page_size: int):
        """Every page together covers the sequence exactly once, in order."""
        for n in range(0, 60):
            data = list(range(n))
            engine: PaginationEngine[int] = PaginationEngine(page_size=page_size)
            total_pages = compute_total_pages(n, page_size)
            assert total_pages == math.ceil(n / page_size)

            seen: list[int] = []
            for page in range(1, total_pages + 1):
                seen.extend(engine.derive(data, page).items)
            assert seen == data

    def test_clamp_page(self):
        assert clamp_page(-3, 5) == 1
        assert clamp_page(0, 5) == 1
        assert clamp_page(3, 5) == 3
        assert clamp_page(99, 5) == 5
        assert clamp_page(4, 0) == 1

    def test_invalid_page_size(self):
        with pytest.raises(ConfigurationError):
            PaginationEngine(page_size=0)


class TestDerive:
    def test_first_page_of_25(self):
        engine: PaginationEngine[int] = PaginationEngine(page_size=10)
        window = engine.derive(list(range(25)), 1)
        assert len(window.items) == 10
        assert window.start_index == 1
        assert window.end_index == 10
        assert window.total_pages == 3
        assert window.has_next_page is True
        assert window.has_previous_page is False

    def test_last_page_of_25(self):
        engine: PaginationEngine[int] = PaginationEngine(page_size=10)
        window = engine.derive(list(range(25)), 3)
        assert len(window.items) == 5
        assert window.start_index == 21
        assert window.end_index == 25
        assert window.has_next_page is False
        assert window.has_previous_page is True

    def test_empty_sequence(self):
        engine: PaginationEngine[int] = PaginationEngine(page_size=10)
        window = engine.derive([], 1)
        assert window == PageWindow(current_page=1, page_size=10, total_items=0, total_pages=0)
        assert window.items == []
        assert window.start_index == 0
        assert window.end_index == 0
        assert window.has_next_page is False
        assert window.has_previous_page is False
        assert window.page_numbers == []
        assert window.show_controls is False

    def test_page_beyond_range_is_clamped(self):
        engine: PaginationEngine[int] = PaginationEngine(page_size=10)
        window = engine.derive(list(range(12)), 7)
        assert window.current_page == 2
        assert window.items == [10, 11]
        assert window.start_index == 11
        assert window.end_index == 12

    def test_defaults_to_cursor(self):
        engine = bound_engine(30)
        engine.go_to_page(2)
        assert engine.derive(list(range(30))).current_page == 2

    def test_page_numbers_and_controls(self):
        window = bound_engine(25).window()
        assert window.page_numbers == [1, 2, 3]
        assert window.show_controls is True
        single = bound_engine(4).window()
        assert single.page_numbers == [1]
        assert single.show_controls is False


class TestNavigation:
    @pytest.mark.parametrize("requested", [-100, -1, 0, 1, 2, 3, 4, 1000])
    def test_go_to_page_always_in_range(self, requested: int):
        engine = bound_engine(25)
        engine.go_to_page(requested)
        assert 1 <= engine.current_page <= 3

    @pytest.mark.parametrize("requested", [-1, 0, 1, 5])
    def test_go_to_page_on_empty_sequence(self, requested: int):
        engine = bound_engine(0)
        engine.go_to_page(requested)
        assert engine.current_page == 1
        assert engine.window().items == []

    def test_next_stops_at_last_page(self):
        engine = bound_engine(25)
        for _ in range(10):
            engine.go_to_next_page()
        assert engine.current_page == 3

    def test_previous_stops_at_first_page(self):
        engine = bound_engine(25)
        engine.go_to_page(2)
        engine.go_to_previous_page()
        engine.go_to_previous_page()
        assert engine.current_page == 1

    def test_next_on_empty_is_noop(self):
        engine = bound_engine(0)
        engine.go_to_next_page()
        assert engine.current_page == 1

    def test_reset(self):
        engine = bound_engine(25)
        engine.go_to_page(3)
        engine.reset()
        assert engine.current_page == 1

    def test_stale_cursor_after_shrink_shows_last_page(self):
        data = list(range(25))
        engine: PaginationEngine[int] = PaginationEngine(page_size=10, source=lambda: data)
        engine.go_to_page(3)
        del data[15:]
        window = engine.window()
        assert window.current_page == 2
        assert window.start_index == 11
        assert window.end_index == 15
        assert engine.current_page == 2

    def test_previous_after_shrink_moves_off_shown_page(self):
        data = list(range(25))
        engine: PaginationEngine[int] = PaginationEngine(page_size=10, source=lambda: data)
        engine.go_to_page(3)
        del data[20:]
        engine.go_to_previous_page()
        assert engine.current_page == 1
        assert engine.window().start_index == 1

    def test_window_without_source(self):
        engine: PaginationEngine[int] = PaginationEngine(page_size=10)
        with pytest.raises(ConfigurationError):
            engine.window()
