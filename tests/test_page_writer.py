"""
Tests of the page writer driver and the bundled HTML/text writers.
"""

from typing import List, Tuple

import pytest

from page_navigator import config
from page_navigator.services import page_writer
from page_navigator.services.page_writer import (
    HtmlPageWriter,
    PageWriter,
    TextPageWriter,
    chapter_jump_size,
    write_pages,
)
from page_navigator.utils.pagination import PaginationResult, compute_pagination


class RecordingWriter(PageWriter):
    """Writer that records every call in order."""

    def __init__(self, **flags: bool):
        for name, value in flags.items():
            setattr(self, name, value)
        self.calls: List[Tuple] = []

    def write_page(self, page: int, is_current: bool, is_disabled: bool) -> None:
        self.calls.append(("page", page, is_current))

    def write_previous_next_page(
        self,
        page: int,
        is_next: bool,
        is_disabled: bool = False,
        is_for_chapter: bool = False,
    ) -> None:
        kind = "chapter" if is_for_chapter else "step"
        self.calls.append((kind, page, "next" if is_next else "previous", is_disabled))

    def write_gap(self) -> None:
        self.calls.append(("gap",))


def _result(*args, **kwargs) -> PaginationResult:
    outcome = compute_pagination(*args, **kwargs)
    assert isinstance(outcome, PaginationResult)
    return outcome


@pytest.fixture
def middle_result() -> PaginationResult:
    """Page 6 of 20 with a window of 7: 1 ... 4 5 [6] 7 8 ... 20."""
    return _result(200, 10, 6, max_display_pages=7)


class TestWritePages:
    """Order and content of the written elements."""

    def test_nothing_written_for_single_page(self) -> None:
        writer = RecordingWriter()
        assert write_pages(_result(5, 10, 1), writer) is False
        assert writer.calls == []

    def test_nothing_written_for_empty_source(self) -> None:
        writer = RecordingWriter()
        assert write_pages(_result(0, 10, 1), writer) is False
        assert writer.calls == []

    def test_missing_writer_rejected(self, middle_result: PaginationResult) -> None:
        with pytest.raises(ValueError):
            write_pages(middle_result, None)  # type: ignore[arg-type]

    def test_full_sequence_with_chapters(self, middle_result: PaginationResult) -> None:
        writer = RecordingWriter(chapters=True)

        assert write_pages(middle_result, writer) is True
        assert writer.calls == [
            ("chapter", 1, "previous", False),
            ("step", 5, "previous", False),
            ("page", 1, False),
            ("gap",),
            ("page", 4, False),
            ("page", 5, False),
            ("page", 6, True),
            ("page", 7, False),
            ("page", 8, False),
            ("gap",),
            ("page", 20, False),
            ("step", 7, "next", False),
            ("chapter", 11, "next", False),
        ]

    def test_gaps_can_be_hidden(self, middle_result: PaginationResult) -> None:
        writer = RecordingWriter(show_gap=False)
        write_pages(middle_result, writer)
        assert ("gap",) not in writer.calls

    def test_previous_left_out_on_first_page(self) -> None:
        writer = RecordingWriter()
        write_pages(_result(30, 10, 1), writer)
        assert writer.calls == [
            ("page", 1, True),
            ("page", 2, False),
            ("page", 3, False),
            ("step", 2, "next", False),
        ]

    def test_previous_disabled_when_always_shown(self) -> None:
        writer = RecordingWriter(always_show_previous_next=True)
        write_pages(_result(30, 10, 3), writer)
        assert writer.calls[0] == ("step", 2, "previous", False)
        assert writer.calls[-1] == ("step", 4, "next", True)

    def test_previous_next_switched_off(self) -> None:
        writer = RecordingWriter(can_show_previous=False, can_show_next=False)
        write_pages(_result(30, 10, 2), writer)
        assert [call[0] for call in writer.calls] == ["page", "page", "page"]

    @pytest.mark.parametrize(
        "page, previous_jump, next_jump",
        [(3, 1, 6), (8, 5, 10)],
    )
    def test_chapter_jumps_are_clamped(self, page: int, previous_jump: int, next_jump: int) -> None:
        writer = RecordingWriter(chapters=True)
        write_pages(_result(100, 10, page, max_display_pages=3), writer)
        chapters = [call for call in writer.calls if call[0] == "chapter"]
        assert chapters == [("chapter", previous_jump, "previous", False), ("chapter", next_jump, "next", False)]

    def test_chapter_only_where_gap_exists(self) -> None:
        writer = RecordingWriter(chapters=True)
        write_pages(_result(200, 10, 1, max_display_pages=5), writer)
        chapters = [call for call in writer.calls if call[0] == "chapter"]
        assert chapters == [("chapter", 5, "next", False)]


class TestChapterJumpSize:
    """Distance of a chapter jump."""

    def test_both_gaps(self, middle_result: PaginationResult) -> None:
        assert chapter_jump_size(middle_result) == 5

    def test_one_gap(self) -> None:
        assert chapter_jump_size(_result(200, 10, 1, max_display_pages=5)) == 4

    def test_minimum_of_three(self) -> None:
        assert chapter_jump_size(_result(200, 10, 10, max_display_pages=3)) == 3

    def test_minimum_comes_from_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        assert page_writer.MIN_CHAPTER_JUMP == config.MIN_CHAPTER_JUMP

        monkeypatch.setattr(page_writer, "MIN_CHAPTER_JUMP", 8)
        assert chapter_jump_size(_result(200, 10, 10, max_display_pages=3)) == 8


class TestTextPageWriter:
    """Plain text rendering."""

    def test_render_middle(self, middle_result: PaginationResult) -> None:
        assert TextPageWriter().render(middle_result) == "‹ 1 … 4 5 [6] 7 8 … 20 ›"

    def test_render_with_chapters(self, middle_result: PaginationResult) -> None:
        assert TextPageWriter(chapters=True).render(middle_result) == "« ‹ 1 … 4 5 [6] 7 8 … 20 › »"

    def test_render_nothing(self) -> None:
        assert TextPageWriter().render(_result(3, 10, 1)) == ""
        assert TextPageWriter().render(None) == ""

    def test_render_is_repeatable(self, middle_result: PaginationResult) -> None:
        writer = TextPageWriter()
        assert writer.render(middle_result) == writer.render(middle_result)


class TestHtmlPageWriter:
    """HTML rendering."""

    def test_render_links(self) -> None:
        html = HtmlPageWriter().render(_result(30, 10, 2))

        assert html.startswith('<nav class="pagination">')
        assert html.endswith("</nav>")
        assert '<a class="page" href="?page=1">1</a>' in html
        assert '<a class="page current" href="?page=2" aria-current="page">2</a>' in html
        assert '<a class="next" href="?page=3">›</a>' in html

    def test_render_gap_and_disabled(self) -> None:
        html = HtmlPageWriter(always_show_previous_next=True).render(_result(200, 10, 20, max_display_pages=5))

        assert '<span class="gap">…</span>' in html
        assert '<span class="next disabled">›</span>' in html

    def test_url_template_is_escaped(self) -> None:
        html = HtmlPageWriter(url_template="/items?sort=name&page={page}").render(_result(30, 10, 1))
        assert 'href="/items?sort=name&amp;page=2"' in html

    def test_render_nothing_for_single_page(self) -> None:
        assert HtmlPageWriter().render(_result(3, 10, 1)) == ""
