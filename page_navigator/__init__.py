"""Page slices and navigation windows for paginated lists."""

from page_navigator.services.page_writer import HtmlPageWriter, PageWriter, TextPageWriter, write_pages
from page_navigator.services.paged_list import PagedList, get_paged_list, get_paged_list_async
from page_navigator.utils.pagination import (
    PaginationError,
    PaginationErrorCode,
    PaginationFailure,
    PaginationOutcome,
    PaginationRequest,
    PaginationResult,
    compute_pagination,
    paginate,
    unwrap_outcome,
)

__all__ = [
    "HtmlPageWriter",
    "PageWriter",
    "PagedList",
    "PaginationError",
    "PaginationErrorCode",
    "PaginationFailure",
    "PaginationOutcome",
    "PaginationRequest",
    "PaginationResult",
    "TextPageWriter",
    "compute_pagination",
    "get_paged_list",
    "get_paged_list_async",
    "paginate",
    "unwrap_outcome",
    "write_pages",
]
