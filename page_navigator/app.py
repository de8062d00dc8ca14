"""Streamlit app entrypoint for the Page Navigator."""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd
import streamlit as st

from page_navigator.components.navbar import render_navbar, render_page_summary
from page_navigator.components.pager import render_pager
from page_navigator.components.table import render_table
from page_navigator.config import (
    ASSETS_DIR,
    DEFAULT_MAX_DISPLAY_PAGES,
    DEFAULT_PAGE_SIZE,
    ITEMS_FILE,
    MIN_DISPLAY_PAGES,
    PAGE_QUERY_PARAM,
    PAGE_SIZE_OPTIONS,
)
from page_navigator.services import data_loader
from page_navigator.services.page_writer import HtmlPageWriter
from page_navigator.utils.helpers import parse_int
from page_navigator.utils.pagination import PaginationFailure

logger = logging.getLogger(__name__)

PAGE_STATE_KEY = "current_page"

st.set_page_config(page_title="Page Navigator", layout="wide")


def load_css() -> None:
    """Load app-level CSS styling from the assets directory."""
    css_path = ASSETS_DIR / "styles.css"
    if css_path.exists():
        with css_path.open("r", encoding="utf-8") as css_file:
            st.markdown(f"<style>{css_file.read()}</style>", unsafe_allow_html=True)


def init_session_state() -> None:
    """Initialize required session-state variables."""
    requested_page = parse_int(st.query_params.get(PAGE_QUERY_PARAM), default=1)
    st.session_state.setdefault(PAGE_STATE_KEY, requested_page)


@st.cache_data(show_spinner=False)
def get_items(items_path: str, file_mtime: float) -> pd.DataFrame:
    """Load items with cache invalidation by mtime."""
    del file_mtime
    return data_loader.load_items(Path(items_path))


def render_sidebar() -> dict:
    """Render paging settings and return them."""
    st.sidebar.markdown("## Paging")
    page_size = st.sidebar.selectbox(
        "Rows per page",
        options=PAGE_SIZE_OPTIONS,
        index=PAGE_SIZE_OPTIONS.index(DEFAULT_PAGE_SIZE),
        key="page_size",
    )
    max_display_pages = st.sidebar.slider(
        "Page links",
        min_value=MIN_DISPLAY_PAGES,
        max_value=25,
        value=DEFAULT_MAX_DISPLAY_PAGES,
    )
    show_first_last_pages = st.sidebar.checkbox("Always link first and last page", value=True)
    pager_style = st.sidebar.radio("Pager style", options=["Buttons", "Links"], horizontal=True)
    return {
        "page_size": int(page_size),
        "max_display_pages": int(max_display_pages),
        "show_first_last_pages": bool(show_first_last_pages),
        "pager_style": pager_style,
    }


def main() -> None:
    """Render and run the Page Navigator."""
    load_css()
    init_session_state()

    try:
        if not ITEMS_FILE.exists():
            st.error(f"CSV not found: {ITEMS_FILE}")
            st.stop()
        items_df = get_items(str(ITEMS_FILE), ITEMS_FILE.stat().st_mtime)
    except Exception as exc:  # pragma: no cover - streamlit runtime guard
        logger.exception("Failed to load %s", ITEMS_FILE)
        st.error(f"Application initialization failed: {exc}")
        st.stop()

    render_navbar(ITEMS_FILE.name)
    settings = render_sidebar()

    paged = data_loader.paginate_dataframe(
        items_df,
        st.session_state[PAGE_STATE_KEY],
        settings["page_size"],
        max_display_pages=settings["max_display_pages"],
        show_first_last_pages=settings["show_first_last_pages"],
    )
    if isinstance(paged, PaginationFailure):
        st.error(paged.message)
        st.stop()

    result = paged.pagination
    if result.total_page_count and result.current_page != st.session_state[PAGE_STATE_KEY]:
        logger.info("Clamped page %s to %d", st.session_state[PAGE_STATE_KEY], result.current_page)
        st.session_state[PAGE_STATE_KEY] = result.current_page
    st.query_params[PAGE_QUERY_PARAM] = str(result.current_page)

    render_page_summary(result)
    render_table(paged)

    if settings["pager_style"] == "Links":
        pager_html = HtmlPageWriter(chapters=True).render(result)
        if pager_html:
            st.markdown(pager_html, unsafe_allow_html=True)
    else:
        render_pager(result, PAGE_STATE_KEY)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
