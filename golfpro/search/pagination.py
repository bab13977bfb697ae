"""Pagination arithmetic over an in-memory result set."""
from typing import List, Sequence, TypeVar

from golfpro.schemas.search import PaginationState

T = TypeVar("T")


def clamp_page(page: int, total_pages: int) -> int:
    """Clamp ``page`` into ``[1, max(total_pages, 1)]``."""
    return min(max(page, 1), max(total_pages, 1))


def go_to_page(pagination: PaginationState, page: int) -> PaginationState:
    """
    Move to ``page``, clamped.

    Returns the same object when the clamped page is already current.
    """
    target = clamp_page(page, pagination.total_pages)
    if target == pagination.current_page:
        return pagination
    return pagination.model_copy(update={"current_page": target})


def reset_for_results(pagination: PaginationState, total_items: int) -> PaginationState:
    """Pagination for a freshly resolved result set: first page, new total."""
    return PaginationState(
        current_page=1,
        page_size=pagination.page_size,
        total_items=total_items,
    )


def page_slice(items: Sequence[T], pagination: PaginationState) -> List[T]:
    """Items on the current page."""
    start = pagination.offset
    return list(items[start:start + pagination.page_size])
