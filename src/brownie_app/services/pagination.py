from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PageWindow(Generic[T]):
    visible: list[T]
    page: int
    total_pages: int
    page_size: int
    total_items: int

    @property
    def is_empty(self) -> bool:
        return self.total_items == 0

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


def count_pages(total_items: int, page_size: int) -> int:
    if page_size <= 0:
        raise ValueError("page_size must be greater than 0")
    return math.ceil(total_items / page_size)


def clamp_page(page: int, total_pages: int) -> int:
    return min(max(page, 1), max(total_pages, 1))


def paginate(items: Sequence[T], page_size: int, page_number: int) -> PageWindow[T]:
    total_pages = count_pages(len(items), page_size)
    page = clamp_page(page_number, total_pages)
    start = (page - 1) * page_size
    return PageWindow(
        visible=list(items[start : start + page_size]),
        page=page,
        total_pages=total_pages,
        page_size=page_size,
        total_items=len(items),
    )


@dataclass
class PaginationState:
    page: int = 1
    page_size: int = 8
    total_pages: int = 0

    def resize(self, total_items: int) -> "PaginationState":
        self.total_pages = count_pages(total_items, self.page_size)
        self.page = clamp_page(self.page, self.total_pages)
        return self


def next_page(state: PaginationState) -> PaginationState:
    state.page = clamp_page(state.page + 1, state.total_pages)
    return state


def prev_page(state: PaginationState) -> PaginationState:
    state.page = clamp_page(state.page - 1, state.total_pages)
    return state


def goto_page(state: PaginationState, page: int) -> PaginationState:
    state.page = clamp_page(page, state.total_pages)
    return state
