from __future__ import annotations

import pytest

from brownie_app.services.pagination import (
    PaginationState,
    clamp_page,
    count_pages,
    goto_page,
    next_page,
    paginate,
    prev_page,
)


def test_twenty_records_in_pages_of_eight() -> None:
    records = list(range(1, 21))
    first = paginate(records, 8, 1)
    assert first.visible == list(range(1, 9))
    assert first.total_pages == 3
    last = paginate(records, 8, 3)
    assert last.visible == [17, 18, 19, 20]
    assert not last.has_next
    assert last.has_previous


def test_empty_collection_has_defined_state() -> None:
    window = paginate([], 8, 4)
    assert window.is_empty
    assert window.page == 1
    assert window.total_pages == 0
    assert window.visible == []
    assert not window.has_previous
    assert not window.has_next


@pytest.mark.parametrize(("total", "size", "pages"), [(0, 8, 0), (1, 8, 1), (8, 8, 1), (9, 8, 2), (20, 8, 3)])
def test_count_pages(total: int, size: int, pages: int) -> None:
    assert count_pages(total, size) == pages


def test_count_pages_rejects_non_positive_size() -> None:
    with pytest.raises(ValueError):
        count_pages(3, 0)


def test_clamp_page_bounds() -> None:
    assert clamp_page(0, 3) == 1
    assert clamp_page(9, 3) == 3
    assert clamp_page(5, 0) == 1


def test_moving_past_either_end_is_a_noop() -> None:
    state = PaginationState(page_size=8).resize(20)
    prev_page(state)
    assert state.page == 1
    goto_page(state, 3)
    next_page(state)
    assert state.page == 3
    prev_page(state)
    assert state.page == 2


def test_resize_reclamps_current_page() -> None:
    state = PaginationState(page_size=8).resize(20)
    goto_page(state, 3)
    state.resize(9)
    assert state.total_pages == 2
    assert state.page == 2
    state.resize(0)
    assert state.page == 1
    assert state.total_pages == 0
