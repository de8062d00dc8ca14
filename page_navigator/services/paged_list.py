"""Fetch one page of items from a backing source."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Awaitable, Callable, Generic, Iterator, TypeVar, Union, overload

from page_navigator.config import DEFAULT_MAX_DISPLAY_PAGES
from page_navigator.utils.pagination import (
    PaginationFailure,
    PaginationResult,
    compute_pagination,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

RangeFetcher = Callable[[int, int], Sequence[T]]
AsyncRangeFetcher = Callable[[int, int], Awaitable[Sequence[T]]]


class PagedList(Sequence, Generic[T]):
    """Read-only list of the items on one page, with its pagination details."""

    def __init__(self, pagination: PaginationResult, items: Sequence[T] = ()):
        self.pagination = pagination
        self.items: Sequence[T] = items

    @overload
    def __getitem__(self, position: int) -> T: ...

    @overload
    def __getitem__(self, position: slice) -> Sequence[T]: ...

    def __getitem__(self, position):
        return self.items[position]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __repr__(self) -> str:
        return (
            f"PagedList(page={self.pagination.current_page}/{self.pagination.total_page_count}, "
            f"items={len(self.items)})"
        )


PagedListOutcome = Union[PagedList[T], PaginationFailure]


def _check_page_length(pagination: PaginationResult, items: Sequence[T]) -> None:
    if len(items) < pagination.count:
        logger.warning(
            "Range fetch returned %d of %d items for page %d (index %d)",
            len(items),
            pagination.count,
            pagination.current_page,
            pagination.index,
        )


def _paginate_source(
    total_item_count: int,
    page: int,
    items_per_page: int,
    max_display_pages: int,
    show_first_last_pages: bool,
    fix_out_of_range_page: bool,
) -> Union[PaginationResult, PaginationFailure]:
    outcome = compute_pagination(
        total_item_count,
        items_per_page,
        page,
        max_display_pages=max_display_pages,
        show_first_last_pages=show_first_last_pages,
        fix_out_of_range_page=fix_out_of_range_page,
    )
    if isinstance(outcome, PaginationFailure):
        logger.debug("Pagination rejected: %s", outcome.message)
    return outcome


def get_paged_list(
    total_item_count: int,
    get_range: RangeFetcher,
    page: int,
    items_per_page: int,
    max_display_pages: int = DEFAULT_MAX_DISPLAY_PAGES,
    show_first_last_pages: bool = True,
    fix_out_of_range_page: bool = True,
) -> PagedListOutcome:
    """Compute pagination and fetch the items of the resulting page.

    ``get_range(index, count)`` must return ``count`` items starting at
    ``index``. It is not called for an empty source or a rejected request.
    """
    outcome = _paginate_source(
        total_item_count,
        page,
        items_per_page,
        max_display_pages,
        show_first_last_pages,
        fix_out_of_range_page,
    )
    if isinstance(outcome, PaginationFailure):
        return outcome
    if total_item_count == 0:
        return PagedList(outcome, [])

    items = get_range(outcome.index, outcome.count)
    _check_page_length(outcome, items)
    return PagedList(outcome, items)


async def get_paged_list_async(
    total_item_count: int,
    get_range: AsyncRangeFetcher,
    page: int,
    items_per_page: int,
    max_display_pages: int = DEFAULT_MAX_DISPLAY_PAGES,
    show_first_last_pages: bool = True,
    fix_out_of_range_page: bool = True,
) -> PagedListOutcome:
    """Async variant of :func:`get_paged_list` awaiting ``get_range``."""
    outcome = _paginate_source(
        total_item_count,
        page,
        items_per_page,
        max_display_pages,
        show_first_last_pages,
        fix_out_of_range_page,
    )
    if isinstance(outcome, PaginationFailure):
        return outcome
    if total_item_count == 0:
        return PagedList(outcome, [])

    items = await get_range(outcome.index, outcome.count)
    _check_page_length(outcome, items)
    return PagedList(outcome, items)
