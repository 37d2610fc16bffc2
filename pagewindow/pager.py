"""
Pagination contract shared by all pager strategies.

Strategies do not inherit state from a common base class. Each one owns a
PagerState and conforms to the PaginationStrategy protocol; PageNavigator adds
page-link arithmetic on top of any conforming strategy.
"""

from collections.abc import Iterable, Sequence
from typing import Any, Protocol, runtime_checkable

from .config import PagerOptions
from .exceptions import PagerFrozenError


@runtime_checkable
class ProxyQuery(Protocol):
    """The query collaborator a pager configures and executes."""

    def set_first_result(self, offset: int | None) -> None: ...

    def set_max_results(self, limit: int | None) -> None: ...

    def execute(self) -> Iterable[Any]: ...


@runtime_checkable
class PaginationStrategy(Protocol):
    """Lifecycle every pager implements: configure, init() once, then read."""

    @property
    def query(self) -> ProxyQuery | None: ...

    @property
    def page(self) -> int: ...

    @property
    def max_per_page(self) -> int: ...

    @property
    def last_page(self) -> int: ...

    def init(self) -> None: ...

    def get_current_page_results(self) -> Sequence[Any]: ...

    def count_results(self) -> int: ...

    def have_to_paginate(self) -> bool: ...


class PagerState:
    """
    Bookkeeping for a single page request.

    page == 0 and max_per_page == 0 are sentinels for "fetch nothing".
    page, max_per_page and query change only through the set_* methods,
    which refuse once initialized is set.
    """

    def __init__(
        self,
        page: int = 1,
        max_per_page: int = 10,
        last_page: int = 1,
        query: ProxyQuery | None = None,
        initialized: bool = False,
    ):
        self._page = page
        self._max_per_page = max_per_page
        self._query = query
        self.last_page = last_page
        self.initialized = initialized

    @property
    def page(self) -> int:
        return self._page

    @property
    def max_per_page(self) -> int:
        return self._max_per_page

    @property
    def query(self) -> ProxyQuery | None:
        return self._query

    def ensure_mutable(self, attribute: str) -> None:
        if self.initialized:
            raise PagerFrozenError(attribute)

    def set_page(self, page: int) -> None:
        self.ensure_mutable("page")
        self._page = page

    def set_max_per_page(self, max_per_page: int) -> None:
        self.ensure_mutable("max_per_page")
        self._max_per_page = max_per_page

    def set_query(self, query: ProxyQuery | None) -> None:
        self.ensure_mutable("query")
        self._query = query


class PageNavigator:
    """
    Page-link helpers for any initialized pagination strategy.

    Usage:
        pager.init()
        nav = PageNavigator(pager)
        nav.links()          # e.g. [1, 2, 3]
        nav.next_page
    """

    first_page = 1

    def __init__(self, pager: PaginationStrategy, options: PagerOptions | None = None):
        self.pager = pager
        self.max_page_links = (options or PagerOptions()).max_page_links

    @property
    def next_page(self) -> int:
        return min(self.pager.page + 1, self.pager.last_page)

    @property
    def previous_page(self) -> int:
        return max(self.pager.page - 1, self.first_page)

    def is_first_page(self) -> bool:
        return self.pager.page == self.first_page

    def is_last_page(self) -> bool:
        return self.pager.page == self.pager.last_page

    def links(self, nb_links: int | None = None) -> list[int]:
        """
        Returns up to nb_links page numbers around the current page.

        The window is centred on the current page and shifted left when it
        would run past the last known page.
        """
        if nb_links is None:
            nb_links = self.max_page_links

        last_page = self.pager.last_page
        begin = self.pager.page - nb_links // 2
        limit = max(last_page - nb_links + 1, 1)
        begin = min(begin, limit) if begin > 0 else 1

        return [page for page in range(begin, begin + nb_links) if page <= last_page]

    @property
    def first_index(self) -> int:
        """1-based position of the first row shown on the current page."""
        page = self.pager.page
        if page == 0:
            return 1
        return (page - 1) * self.pager.max_per_page + 1

    @property
    def last_index(self) -> int:
        """1-based position of the last row shown on the current page."""
        page = self.pager.page
        count = self.pager.count_results()
        if page == 0:
            return count
        return min(page * self.pager.max_per_page, count)
