"""Tests for the Page and Paginator entities."""

import pytest

from simpagin.common.utils.pagination import paginate
from simpagin.domain.entities.page import Page, PageKind
from simpagin.domain.entities.paginator import Paginator


class TestPage:
    def test_format_without_formatter(self):
        assert Page(index=20, number=3).format() == "3"
        assert str(Page(number=0)) == ""
        assert str(Page(number=-1)) == ""

    def test_formatter_output_is_verbatim(self):
        page = Page(number=0, kind=PageKind.NEXT, formatter=lambda p: f"<{p.kind}:{p.number}>")
        assert page.format() == "<next:0>"

    def test_sentinel(self):
        assert Page(kind=PageKind.PREVIOUS).is_sentinel
        assert not Page(number=1).is_sentinel

    def test_formatter_is_not_part_of_equality(self):
        assert Page(number=2, formatter=str) == Page(number=2)


class TestPaginator:
    def test_set_formatter_returns_same_instance(self, comma_formatter):
        pg = paginate(3, 100, 10, 5)
        assert pg.set_formatter(comma_formatter) is pg

    def test_set_formatter_shares_one_function(self, comma_formatter):
        pg = paginate(3, 100, 10, 5).set_formatter(comma_formatter)
        assert pg.previous_page.formatter is comma_formatter
        assert pg.next_page.formatter is comma_formatter
        assert all(page.formatter is comma_formatter for page in pg.pages)

    def test_render_without_formatter(self):
        assert paginate(1, 30, 10, 5).render() == "1232"
        assert str(paginate(3, 30, 10, 5)) == "2123"

    def test_iteration_order(self):
        pg = paginate(8, 15, 2, 3)
        kinds = [page.kind for page in pg]
        assert kinds == [PageKind.PREVIOUS, PageKind.MIDDLE, PageKind.MIDDLE, PageKind.MIDDLE, PageKind.NEXT]
        assert [page.number for page in pg] == [7, 6, 7, 8, 0]

    def test_scroller_sentinel_carries_formatter(self, comma_formatter):
        pg = paginate(1, 5, 10, 3).set_formatter(comma_formatter)
        sentinel = pg.scroller(PageKind.PREVIOUS)
        assert sentinel.number == 0
        assert sentinel.index == 0
        assert sentinel.formatter is comma_formatter

    def test_scroller_rejects_middle_kind(self):
        with pytest.raises(ValueError):
            paginate(1, 5, 10, 3).scroller(PageKind.MIDDLE)

    def test_has_previous_and_next(self):
        pg = paginate(2, 30, 10, 3)
        assert pg.has_previous and pg.has_next
        pg = paginate(3, 30, 10, 3)
        assert pg.has_previous and not pg.has_next

    def test_active_and_offset(self):
        pg = paginate(11, 160, 8, 7)
        assert pg.active.number == 11
        assert pg.offset == 80
        assert paginate(1, 0, 8, 7).active is None

    def test_get_start_index_window_from_first_page(self):
        pg = paginate(3, 100, 10, 10)
        assert pg.get_start_index() == 20

    def test_get_start_index_is_positional(self):
        # Окно 2..6: позиция 3 соответствует странице 5, а не активной 4
        pg = paginate(4, 200, 10, 5)
        assert [p.number for p in pg.pages] == [2, 3, 4, 5, 6]
        assert pg.get_start_index() == 40
        assert pg.offset == 30

    def test_get_start_index_out_of_bounds(self):
        assert paginate(11, 160, 8, 7).get_start_index() == 0
        assert paginate(0, 0, 0, 0).get_start_index() == 0

    def test_page_items(self):
        items = list(range(23))
        assert paginate(2, len(items), 10, 3).page_items(items) == list(range(10, 20))
        assert paginate(3, len(items), 10, 3).page_items(items) == [20, 21, 22]
        assert paginate(1, 0, 10, 3).page_items([]) == []

    def test_direct_construction(self):
        pg = Paginator(active_page=1, items_count=0, items_on_page=10, frame_length=2, pages_count=0)
        assert pg.render() == ""
        assert list(pg) == [Page(kind=PageKind.PREVIOUS), Page(kind=PageKind.NEXT)]
