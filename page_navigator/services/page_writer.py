"""Renderer contract for pagination links and the driver that feeds it."""

from __future__ import annotations

import html
from abc import ABC, abstractmethod
from typing import List, Optional

from page_navigator.config import (
    GAP_LABEL,
    MIN_CHAPTER_JUMP,
    NEXT_CHAPTER_LABEL,
    NEXT_LABEL,
    PAGE_URL_TEMPLATE,
    PREVIOUS_CHAPTER_LABEL,
    PREVIOUS_LABEL,
)
from page_navigator.utils.pagination import PaginationResult


class PageWriter(ABC):
    """Receives pagination elements in display order and renders them.

    The class attributes switch optional elements on or off:

    - ``can_show_previous`` / ``can_show_next``: write previous/next links.
    - ``always_show_previous_next``: write them disabled when unavailable
      instead of leaving them out.
    - ``show_gap``: write a gap marker where the window skips pages.
    - ``chapters``: write jumps over a gap, several pages at once.
    """

    can_show_previous = True
    can_show_next = True
    always_show_previous_next = False
    show_gap = True
    chapters = False

    @abstractmethod
    def write_page(self, page: int, is_current: bool, is_disabled: bool) -> None:
        """Write a link to a single page."""

    @abstractmethod
    def write_previous_next_page(
        self,
        page: int,
        is_next: bool,
        is_disabled: bool = False,
        is_for_chapter: bool = False,
    ) -> None:
        """Write a previous/next link, or a chapter jump when ``is_for_chapter``."""

    @abstractmethod
    def write_gap(self) -> None:
        """Write the marker for omitted pages."""


def chapter_jump_size(result: PaginationResult) -> int:
    """Number of pages a chapter jump moves: the visible window without gaps, at least 3."""
    visible = result.pages_count
    visible -= 1 if result.has_gap_after_window_start else 0
    visible -= 1 if result.has_gap_before_window_end else 0
    return max(visible, MIN_CHAPTER_JUMP)


def write_pages(result: PaginationResult, writer: PageWriter) -> bool:
    """Walk ``result`` and write its navigation elements with ``writer``.

    Returns False without writing anything when there is at most one page.
    """
    if result is None:
        raise ValueError("pagination result is required")
    if writer is None:
        raise ValueError("page writer is required")

    if result.total_item_count == 0 or result.total_page_count <= 1:
        return False

    current = result.current_page
    jump = chapter_jump_size(result)
    has_previous = writer.can_show_previous and current - 1 > 0
    has_next = writer.can_show_next and current + 1 <= result.total_page_count

    if writer.chapters and result.has_gap_after_window_start:
        writer.write_previous_next_page(max(current - jump, 1), is_next=False, is_for_chapter=True)

    if writer.always_show_previous_next or has_previous:
        writer.write_previous_next_page(current - 1, is_next=False, is_disabled=not has_previous)

    last_position = len(result.page_numbers) - 1
    for position, page in enumerate(result.page_numbers):
        if writer.show_gap and position == last_position and result.has_gap_before_window_end:
            writer.write_gap()

        writer.write_page(page, is_current=page == current, is_disabled=False)

        if writer.show_gap and position == 0 and result.has_gap_after_window_start:
            writer.write_gap()

    if writer.always_show_previous_next or has_next:
        writer.write_previous_next_page(current + 1, is_next=True, is_disabled=not has_next)

    if writer.chapters and result.has_gap_before_window_end:
        writer.write_previous_next_page(
            min(current + jump, result.total_page_count),
            is_next=True,
            is_for_chapter=True,
        )

    return True


def previous_next_label(is_next: bool, is_for_chapter: bool) -> str:
    if is_for_chapter:
        return NEXT_CHAPTER_LABEL if is_next else PREVIOUS_CHAPTER_LABEL
    return NEXT_LABEL if is_next else PREVIOUS_LABEL


class HtmlPageWriter(PageWriter):
    """Collects pagination links as an HTML ``<nav>`` fragment."""

    def __init__(
        self,
        url_template: str = PAGE_URL_TEMPLATE,
        css_class: str = "pagination",
        chapters: bool = False,
        always_show_previous_next: bool = False,
    ):
        self.url_template = url_template
        self.css_class = css_class
        self.chapters = chapters
        self.always_show_previous_next = always_show_previous_next
        self.parts: List[str] = []

    def _link(self, page: int, label: str, classes: str, extra: str = "") -> str:
        href = html.escape(self.url_template.format(page=page), quote=True)
        return f'<a class="{classes}" href="{href}"{extra}>{html.escape(label)}</a>'

    def write_page(self, page: int, is_current: bool, is_disabled: bool) -> None:
        label = str(page)
        if is_disabled:
            self.parts.append(f'<span class="page disabled">{label}</span>')
        elif is_current:
            self.parts.append(self._link(page, label, "page current", ' aria-current="page"'))
        else:
            self.parts.append(self._link(page, label, "page"))

    def write_previous_next_page(
        self,
        page: int,
        is_next: bool,
        is_disabled: bool = False,
        is_for_chapter: bool = False,
    ) -> None:
        label = previous_next_label(is_next, is_for_chapter)
        kind = "chapter" if is_for_chapter else ("next" if is_next else "previous")
        if is_disabled:
            self.parts.append(f'<span class="{kind} disabled">{html.escape(label)}</span>')
        else:
            self.parts.append(self._link(page, label, kind))

    def write_gap(self) -> None:
        self.parts.append(f'<span class="gap">{html.escape(GAP_LABEL)}</span>')

    def render(self, result: PaginationResult) -> str:
        """Return the HTML for ``result``, or an empty string when there is nothing to page."""
        self.parts = []
        if not write_pages(result, self):
            return ""
        return f'<nav class="{html.escape(self.css_class)}">' + "".join(self.parts) + "</nav>"


class TextPageWriter(PageWriter):
    """Plain-text pager line, e.g. ``‹ 1 … 4 5 [6] 7 8 … 20 ›``."""

    def __init__(self, chapters: bool = False, separator: str = " "):
        self.chapters = chapters
        self.separator = separator
        self.parts: List[str] = []

    def write_page(self, page: int, is_current: bool, is_disabled: bool) -> None:
        self.parts.append(f"[{page}]" if is_current else str(page))

    def write_previous_next_page(
        self,
        page: int,
        is_next: bool,
        is_disabled: bool = False,
        is_for_chapter: bool = False,
    ) -> None:
        if not is_disabled:
            self.parts.append(previous_next_label(is_next, is_for_chapter))

    def write_gap(self) -> None:
        self.parts.append(GAP_LABEL)

    def render(self, result: Optional[PaginationResult]) -> str:
        self.parts = []
        if result is None or not write_pages(result, self):
            return ""
        return self.separator.join(self.parts)
