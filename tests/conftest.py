"""
Shared fixtures for the pagination tests.
"""

from typing import Callable, List, Tuple

import pandas as pd
import pytest


# =============================================================================
# SOURCES
# =============================================================================


@pytest.fixture
def eleven_items() -> List[int]:
    """Eleven items: three full pages of three and a last page of two."""
    return [10, 11, 12, 20, 21, 22, 30, 31, 32, 40, 41]


@pytest.fixture
def range_calls() -> List[Tuple[int, int]]:
    """Records the (index, count) arguments a fetcher received."""
    return []


@pytest.fixture
def list_fetcher(eleven_items: List[int], range_calls: List[Tuple[int, int]]) -> Callable:
    """Synchronous fetcher slicing ``eleven_items``."""

    def get_range(index: int, count: int) -> List[int]:
        range_calls.append((index, count))
        return eleven_items[index : index + count]

    return get_range


@pytest.fixture
def items_df() -> pd.DataFrame:
    """Small tabular source of eleven rows."""
    return pd.DataFrame(
        {
            "item_id": [f"ITM-{i:02d}" for i in range(1, 12)],
            "region": ["North", "South", "East", "West"] * 2 + ["North", "South", "East"],
        }
    )
