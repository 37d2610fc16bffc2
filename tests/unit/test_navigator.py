"""
Unit tests for PageNavigator and PagerState.
"""

import pytest

from pagewindow import (
    ListQuery,
    PageNavigator,
    PagerFrozenError,
    PagerOptions,
    PagerState,
    SimplePager,
)


def _pager(rows, page=1, max_per_page=10, threshold=1):
    pager = SimplePager(max_per_page=max_per_page, threshold=threshold, query=ListQuery(rows))
    pager.page = page
    pager.init()
    return pager


class TestPagerState:
    def test_setters_before_init(self):
        state = PagerState()
        state.set_page(4)
        state.set_max_per_page(25)

        assert state.page == 4
        assert state.max_per_page == 25

    def test_setters_after_init_raise(self):
        state = PagerState(initialized=True)

        with pytest.raises(PagerFrozenError, match="page"):
            state.set_page(2)
        with pytest.raises(PagerFrozenError, match="query"):
            state.set_query(None)

    @pytest.mark.parametrize("attribute", ["page", "max_per_page", "query"])
    def test_fields_are_read_only(self, attribute):
        state = PagerState(initialized=True)

        with pytest.raises(AttributeError):
            setattr(state, attribute, 5)


class TestNextAndPrevious:
    def test_first_page(self, make_rows):
        nav = PageNavigator(_pager(make_rows(25)))

        assert nav.is_first_page() is True
        assert nav.is_last_page() is False
        assert nav.previous_page == 1
        assert nav.next_page == 2

    def test_last_page_does_not_advance(self, make_rows):
        nav = PageNavigator(_pager(make_rows(25), page=3))

        assert nav.is_last_page() is True
        assert nav.next_page == 3
        assert nav.previous_page == 2


class TestLinks:
    def test_links_limited_by_threshold_look_ahead(self, make_rows):
        pager = _pager(make_rows(100), threshold=3)
        nav = PageNavigator(pager, PagerOptions(max_page_links=5))

        assert pager.last_page == 4
        assert nav.links() == [1, 2, 3, 4]

    def test_links_centred_on_current_page(self, make_rows):
        pager = _pager(make_rows(200), page=6, threshold=5)

        assert pager.last_page == 11
        assert PageNavigator(pager).links(5) == [4, 5, 6, 7, 8]

    def test_links_shift_left_near_the_end(self, make_rows):
        pager = _pager(make_rows(95), page=9, threshold=1)

        assert pager.last_page == 10
        assert PageNavigator(pager).links(5) == [6, 7, 8, 9, 10]

    def test_single_page(self, make_rows):
        assert PageNavigator(_pager(make_rows(3))).links() == [1]

    def test_default_link_count_from_options(self, make_rows):
        nav = PageNavigator(_pager(make_rows(200), threshold=10))

        assert nav.max_page_links == 5
        assert nav.links() == [1, 2, 3, 4, 5]


class TestIndexes:
    def test_first_page_indexes(self, make_rows):
        nav = PageNavigator(_pager(make_rows(25)))

        assert nav.first_index == 1
        assert nav.last_index == 10

    def test_partial_last_page_indexes(self, make_rows):
        nav = PageNavigator(_pager(make_rows(25), page=3))

        assert nav.first_index == 21
        assert nav.last_index == 25

    def test_disabled_pager_indexes(self, make_rows):
        nav = PageNavigator(_pager(make_rows(25), page=0))

        assert nav.first_index == 1
        assert nav.last_index == 0
