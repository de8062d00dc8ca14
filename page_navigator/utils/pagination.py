"""Pagination helpers: page slices and navigation windows.

Everything here is a pure function of its arguments. A computation runs in
four stages, each usable on its own:

1. :func:`resolve_parameters` validates the inputs and computes the page count.
2. :func:`compute_slice` derives the item offset and count for the page.
3. :func:`build_page_window` derives the page numbers to offer as links.
4. :func:`assemble_result` packages everything into a :class:`PaginationResult`.

:func:`compute_pagination` chains them and is the normal entry point. Invalid
input comes back as a :class:`PaginationFailure` value rather than an
exception, so callers always handle both outcomes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

from page_navigator.config import DEFAULT_MAX_DISPLAY_PAGES, MIN_DISPLAY_PAGES


class PaginationErrorCode(str, Enum):
    """Reasons a pagination request can be rejected."""

    INVALID_PARAMETERS = "pagination.invalid_parameters"
    INVALID_PAGE = "pagination.invalid_page"
    PAGE_OUT_OF_RANGE = "pagination.page_out_of_range"


@dataclass(frozen=True)
class PaginationFailure:
    """Rejected pagination request."""

    code: PaginationErrorCode
    message: str

    def to_error(self) -> PaginationError:
        return PaginationError(self.code, self.message)


class PaginationError(Exception):
    """Exception form of a :class:`PaginationFailure`."""

    def __init__(self, code: PaginationErrorCode, details: str = ""):
        self.code = code
        self.details = details
        super().__init__(f"{code.value}: {details}" if details else code.value)


@dataclass(frozen=True)
class PaginationRequest:
    """Inputs of a single pagination computation."""

    total_item_count: int
    items_per_page: int
    current_page: int
    max_display_pages: int = DEFAULT_MAX_DISPLAY_PAGES
    show_first_last_pages: bool = True
    fix_out_of_range_page: bool = True


@dataclass(frozen=True)
class ResolvedPage:
    """Validated page position: the page count and the (possibly clamped) page."""

    total_page_count: int
    current_page: int


@dataclass(frozen=True)
class PaginationResult:
    """Computed page slice and navigation window.

    ``index`` and ``count`` select the items of ``current_page`` from the flat
    source collection. ``page_numbers`` holds the window of page numbers to
    render as links; when pages were cropped and first/last pinning is on,
    it starts at 1 and ends at ``total_page_count``, and the two gap flags
    tell a renderer where to put an ellipsis.
    """

    current_page: int
    index: int
    count: int
    items_per_page: int
    total_item_count: int
    total_page_count: int
    pages_count: int
    page_numbers: Tuple[int, ...]
    is_last_page: bool
    has_gap_before_window_end: bool
    has_gap_after_window_start: bool
    show_first_last_pages: bool

    @property
    def has_previous_page(self) -> bool:
        return self.current_page > 1 and self.total_page_count > 0

    @property
    def has_next_page(self) -> bool:
        return not self.is_last_page

    @property
    def end_index(self) -> int:
        """Exclusive end offset of the current page's items."""
        return self.index + self.count

    def is_page_in_range(self, page: int) -> bool:
        return 0 < page <= self.total_page_count


PaginationOutcome = Union[PaginationResult, PaginationFailure]


def compute_total_pages(total_item_count: int, items_per_page: int) -> int:
    """Compute ``ceil(total_item_count / items_per_page)`` without floating point."""
    if total_item_count <= 0:
        return 0
    return -(-total_item_count // items_per_page)


def resolve_parameters(
    total_item_count: int,
    items_per_page: int,
    current_page: int,
    fix_out_of_range_page: bool = True,
) -> Union[ResolvedPage, PaginationFailure]:
    """Validate the request and compute the total page count.

    An empty source is not an error: it resolves to zero pages. With
    ``fix_out_of_range_page`` a page below 1 or past the last page is clamped
    instead of rejected.
    """
    if total_item_count == 0:
        return ResolvedPage(total_page_count=0, current_page=current_page)

    if current_page < 1:
        if not fix_out_of_range_page:
            return PaginationFailure(
                PaginationErrorCode.INVALID_PAGE,
                f"current page must be at least 1, got {current_page}",
            )
        current_page = 1

    if total_item_count < 1 or items_per_page < 1:
        return PaginationFailure(
            PaginationErrorCode.INVALID_PARAMETERS,
            f"total item count and items per page must be positive, "
            f"got {total_item_count} and {items_per_page}",
        )

    total_page_count = compute_total_pages(total_item_count, items_per_page)

    if current_page > total_page_count:
        if not fix_out_of_range_page:
            return PaginationFailure(
                PaginationErrorCode.PAGE_OUT_OF_RANGE,
                f"page {current_page} is past the last page {total_page_count}",
            )
        current_page = total_page_count

    return ResolvedPage(total_page_count=total_page_count, current_page=current_page)


def compute_slice(
    current_page: int,
    total_page_count: int,
    items_per_page: int,
    total_item_count: int,
) -> Tuple[int, int]:
    """Return the zero-based start index and item count of the current page."""
    if total_page_count < 1:
        return 0, 0

    page_size = min(items_per_page, total_item_count)
    index = page_size * (current_page - 1)
    if total_page_count < 2 or current_page < total_page_count:
        return index, page_size

    # Last page of several: only the remainder is left.
    count = page_size - (total_page_count * page_size - total_item_count)
    return index, count


def build_page_window(
    current_page: int,
    total_page_count: int,
    max_display_pages: int = DEFAULT_MAX_DISPLAY_PAGES,
    show_first_last_pages: bool = True,
) -> Tuple[int, ...]:
    """Build the ascending page numbers to display around ``current_page``.

    The window holds at most ``max(max_display_pages, 3)`` pages. When pages
    must be cropped, the window is centered on the current page using
    truncating division, so an even-sized window has one page fewer to the
    right of the current page than to the left. Near either end it is shifted
    to stay full. With ``show_first_last_pages`` the first and last slots are
    replaced by page 1 and the last page.
    """
    if total_page_count <= 0:
        return ()

    window_size = min(max(max_display_pages, MIN_DISPLAY_PAGES), total_page_count)
    if total_page_count <= window_size:
        return tuple(range(1, total_page_count + 1))

    sides = window_size // 2
    start = max(current_page - sides, 1)
    if start + window_size > total_page_count:
        start = total_page_count - window_size + 1

    pages = list(range(start, start + window_size))
    if show_first_last_pages:
        pages[0] = 1
        pages[-1] = total_page_count
    return tuple(pages)


def assemble_result(
    resolved: ResolvedPage,
    index: int,
    count: int,
    items_per_page: int,
    total_item_count: int,
    page_numbers: Tuple[int, ...],
    show_first_last_pages: bool,
) -> PaginationResult:
    """Package computed values and derive the renderer hints."""
    pages_count = len(page_numbers)
    total_page_count = resolved.total_page_count
    return PaginationResult(
        current_page=resolved.current_page,
        index=index,
        count=count,
        items_per_page=items_per_page,
        total_item_count=total_item_count,
        total_page_count=total_page_count,
        pages_count=pages_count,
        page_numbers=page_numbers,
        is_last_page=total_page_count < 1 or resolved.current_page >= total_page_count,
        has_gap_before_window_end=pages_count > 2 and page_numbers[-2] < total_page_count - 1,
        has_gap_after_window_start=pages_count > 2 and page_numbers[1] > 2,
        show_first_last_pages=show_first_last_pages,
    )


def compute_pagination(
    total_item_count: int,
    items_per_page: int,
    current_page: int,
    max_display_pages: int = DEFAULT_MAX_DISPLAY_PAGES,
    show_first_last_pages: bool = True,
    fix_out_of_range_page: bool = True,
) -> PaginationOutcome:
    """Compute the page slice and navigation window for one request."""
    resolved = resolve_parameters(
        total_item_count,
        items_per_page,
        current_page,
        fix_out_of_range_page,
    )
    if isinstance(resolved, PaginationFailure):
        return resolved

    index, count = compute_slice(
        resolved.current_page,
        resolved.total_page_count,
        items_per_page,
        total_item_count,
    )
    page_numbers = build_page_window(
        resolved.current_page,
        resolved.total_page_count,
        max_display_pages,
        show_first_last_pages,
    )
    return assemble_result(
        resolved,
        index,
        count,
        max(min(items_per_page, total_item_count), 0),
        total_item_count,
        page_numbers,
        show_first_last_pages,
    )


def paginate(request: PaginationRequest) -> PaginationOutcome:
    """Run :func:`compute_pagination` for a :class:`PaginationRequest`."""
    return compute_pagination(
        request.total_item_count,
        request.items_per_page,
        request.current_page,
        max_display_pages=request.max_display_pages,
        show_first_last_pages=request.show_first_last_pages,
        fix_out_of_range_page=request.fix_out_of_range_page,
    )


def unwrap_outcome(outcome: PaginationOutcome) -> PaginationResult:
    """Return the result, raising :class:`PaginationError` for a failure."""
    if isinstance(outcome, PaginationFailure):
        raise outcome.to_error()
    return outcome
