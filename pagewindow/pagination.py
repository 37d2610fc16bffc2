"""
Page snapshots for API responses.

paginate() runs a SimplePager for one request and freezes what a list screen
or JSON endpoint needs to render the page and its links.
"""

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from .config import PagerOptions
from .pager import PageNavigator, ProxyQuery
from .simple_pager import SimplePager

T = TypeVar("T")


@dataclass(frozen=True)
class PageWindow(Generic[T]):
    """
    Represents a single page of results with navigation data.

    Attributes:
        items: Rows for this page (at most max_per_page)
        page: Current 1-based page number
        max_per_page: Page size used for the request
        last_page: Last page known from the over-fetch window (an estimate)
        count: Estimated row count up to the current page
        has_more: True if pagination controls should be shown
        links: Page numbers to render as links
    """

    items: list[T]
    page: int
    max_per_page: int
    last_page: int
    count: int
    has_more: bool
    links: list[int] = field(default_factory=list)

    @property
    def has_next(self) -> bool:
        return self.page < self.last_page

    @property
    def has_previous(self) -> bool:
        return self.page > 1


def paginate(
    query: ProxyQuery,
    page: int = 1,
    max_per_page: int | None = None,
    threshold: int | None = None,
    options: PagerOptions | None = None,
) -> PageWindow[Any]:
    """
    Fetches one page window from the query.

    Args:
        query: Collaborator providing set_first_result/set_max_results/execute
        page: 1-based page number (0 disables fetching)
        max_per_page: Overrides options.max_per_page
        threshold: Overrides options.threshold
        options: Defaults; PagerOptions() when omitted

    Returns:
        PageWindow snapshot of the pager after init().
    """
    opts = (options or PagerOptions()).with_overrides(
        max_per_page=max_per_page, threshold=threshold
    )

    pager = SimplePager(max_per_page=opts.max_per_page, threshold=opts.threshold, query=query)
    pager.page = page
    pager.init()

    items = list(pager.get_current_page_results()) if pager.last_page else []
    navigator = PageNavigator(pager, opts)

    return PageWindow(
        items=items,
        page=pager.page,
        max_per_page=pager.max_per_page,
        last_page=pager.last_page,
        count=pager.count_results(),
        has_more=pager.have_to_paginate(),
        links=navigator.links(),
    )
