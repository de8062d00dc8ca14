"""Header and page summary components."""

from __future__ import annotations

import streamlit as st

from page_navigator.utils.pagination import PaginationResult


def page_summary(result: PaginationResult) -> str:
    """Describe which rows of the source the current page shows."""
    if result.total_item_count == 0:
        return "No rows to show."
    return (
        f"Showing rows {result.index + 1}-{result.end_index} of {result.total_item_count} "
        f"(page {result.current_page} of {result.total_page_count})"
    )


def render_navbar(source_name: str) -> None:
    """Render the app header with the browsed source name."""
    st.markdown(
        f"""
        <div class="navbar">
            <div class="navbar-title">Page Navigator</div>
            <div class="navbar-meta">Source: {source_name}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )


def render_page_summary(result: PaginationResult) -> None:
    st.caption(page_summary(result))
