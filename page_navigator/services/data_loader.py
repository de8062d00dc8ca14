"""Data loading and page fetching for tabular sources."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict, List

import pandas as pd

from page_navigator.config import DEFAULT_MAX_DISPLAY_PAGES
from page_navigator.services.paged_list import PagedListOutcome, get_paged_list

logger = logging.getLogger(__name__)

Row = Dict[str, object]
RowFetcher = Callable[[int, int], List[Row]]


def load_items(items_file: Path) -> pd.DataFrame:
    """Load the items to browse from CSV, keeping every column as text."""
    if not items_file.exists():
        raise FileNotFoundError(f"Missing required file: {items_file}")

    dataframe = pd.read_csv(items_file, dtype=str).fillna("")
    logger.info("Loaded %d rows from %s", len(dataframe), items_file)
    return dataframe


def dataframe_range_fetcher(dataframe: pd.DataFrame) -> RowFetcher:
    """Build a range fetcher returning ``count`` rows from position ``index`` as records."""

    def get_range(index: int, count: int) -> List[Row]:
        return dataframe.iloc[index : index + count].to_dict(orient="records")

    return get_range


def paginate_dataframe(
    dataframe: pd.DataFrame,
    page: int,
    page_size: int,
    max_display_pages: int = DEFAULT_MAX_DISPLAY_PAGES,
    show_first_last_pages: bool = True,
    fix_out_of_range_page: bool = True,
) -> PagedListOutcome:
    """Slice one page of rows out of ``dataframe``.

    Each item of the returned list is one row as a column-to-value dict.
    """
    return get_paged_list(
        len(dataframe),
        dataframe_range_fetcher(dataframe),
        page,
        page_size,
        max_display_pages=max_display_pages,
        show_first_last_pages=show_first_last_pages,
        fix_out_of_range_page=fix_out_of_range_page,
    )
