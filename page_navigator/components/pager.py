"""Pager component rendering page links as Streamlit buttons."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

import streamlit as st

from page_navigator.config import GAP_LABEL
from page_navigator.services.page_writer import PageWriter, previous_next_label, write_pages
from page_navigator.utils.pagination import PaginationResult


@dataclass
class PagerElement:
    label: str
    page: int = 0
    is_current: bool = False
    is_disabled: bool = False
    is_gap: bool = False


def _select_page(state_key: str, page: int) -> None:
    st.session_state[state_key] = page


class StreamlitPageWriter(PageWriter):
    """Collects pager elements, then lays them out as a row of buttons."""

    always_show_previous_next = True

    def __init__(self, state_key: str, chapters: bool = True):
        self.state_key = state_key
        self.chapters = chapters
        self.elements: List[PagerElement] = []

    def write_page(self, page: int, is_current: bool, is_disabled: bool) -> None:
        self.elements.append(PagerElement(str(page), page, is_current=is_current, is_disabled=is_disabled))

    def write_previous_next_page(
        self,
        page: int,
        is_next: bool,
        is_disabled: bool = False,
        is_for_chapter: bool = False,
    ) -> None:
        label = previous_next_label(is_next, is_for_chapter)
        self.elements.append(PagerElement(label, page, is_disabled=is_disabled))

    def write_gap(self) -> None:
        self.elements.append(PagerElement(GAP_LABEL, is_gap=True))

    def render(self) -> None:
        """Draw the collected elements in a single row."""
        if not self.elements:
            return

        columns = st.columns(len(self.elements))
        for position, (column, element) in enumerate(zip(columns, self.elements)):
            with column:
                if element.is_gap:
                    st.markdown(f'<div class="pager-gap">{GAP_LABEL}</div>', unsafe_allow_html=True)
                    continue
                st.button(
                    element.label,
                    key=f"{self.state_key}_pager_{position}",
                    type="primary" if element.is_current else "secondary",
                    disabled=element.is_disabled or element.is_current,
                    on_click=_select_page,
                    args=(self.state_key, element.page),
                )


def render_pager(result: PaginationResult, state_key: str, chapters: bool = True) -> bool:
    """Render navigation for ``result``; the chosen page lands in ``st.session_state[state_key]``.

    Returns False when there is only one page and nothing was drawn.
    """
    writer = StreamlitPageWriter(state_key, chapters=chapters)
    if not write_pages(result, writer):
        return False
    writer.render()
    return True
