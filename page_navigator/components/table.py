"""Table component showing the rows of the current page."""

from __future__ import annotations

import pandas as pd
import streamlit as st

from page_navigator.services.paged_list import PagedList


def page_dataframe(paged: PagedList) -> pd.DataFrame:
    """Return the page's row records as a DataFrame."""
    return pd.DataFrame(list(paged))


def render_table(paged: PagedList) -> None:
    """Render the rows of one page, numbered by their position in the source."""
    if len(paged) == 0:
        st.info("No rows available.")
        return

    display_df = page_dataframe(paged).copy()
    # 1-based row numbers relative to the whole source, not the page.
    display_df.index = range(paged.pagination.index + 1, paged.pagination.index + len(display_df) + 1)

    st.dataframe(display_df, width="stretch")
