import math
from collections.abc import Sequence
from typing import Any

from ._logging import logger
from .exceptions import PagerNotInitializedError, UninitializedQueryError
from .pager import PagerState, ProxyQuery
from .query import as_sequence


class SimplePager:
    """
    Over-fetch pager: answers "are there more pages" without a COUNT query.

    init() asks the query for max_per_page * threshold + 1 rows starting at the
    current page's offset. The extra rows reveal how many further pages exist
    (up to threshold of them) and are discarded before results are returned.

    The threshold parameter can be used to determine how far ahead the pager
    should fetch results.

    If set to 1 which is the minimal value the pager will generate a link to the next page
    If set to 2 the pager will generate links to the next two pages
    If set to 3 the pager will generate links to the next three pages
    etc.

    Usage:
        pager = SimplePager(max_per_page=25, threshold=3, query=query)
        pager.page = 2
        pager.init()
        rows = pager.get_current_page_results()
    """

    def __init__(
        self, max_per_page: int = 10, threshold: int = 1, query: ProxyQuery | None = None
    ):
        self._state = PagerState(max_per_page=max_per_page, query=query)
        self.threshold = threshold

        self._results: Sequence[Any] | None = None
        self._have_to_paginate = False
        # None until get_current_page_results() has executed the query
        self._threshold_count: int | None = None

    # --- STATE ---

    @property
    def query(self) -> ProxyQuery | None:
        return self._state.query

    @query.setter
    def query(self, query: ProxyQuery | None) -> None:
        self._state.set_query(query)

    @property
    def page(self) -> int:
        return self._state.page

    @page.setter
    def page(self, page: int) -> None:
        self._state.set_page(page)

    @property
    def max_per_page(self) -> int:
        return self._state.max_per_page

    @max_per_page.setter
    def max_per_page(self, max_per_page: int) -> None:
        self._state.set_max_per_page(max_per_page)

    @property
    def last_page(self) -> int:
        return self._state.last_page

    @property
    def threshold(self) -> int:
        return self._threshold

    @threshold.setter
    def threshold(self, threshold: int) -> None:
        # Values <= 0 fetch a single extra row
        self._threshold = threshold

    @property
    def threshold_count(self) -> int | None:
        """Rows returned by the over-fetch window, or None before the query ran."""
        return self._threshold_count

    # --- LIFECYCLE ---

    def init(self) -> None:
        """
        Configures and executes the query for the current page.

        Raises:
            UninitializedQueryError: If no query has been attached
        """
        query = self._state.query
        if query is None:
            raise UninitializedQueryError()

        if self._state.initialized:
            logger.debug("Pager already initialized, skipping", extra={"page": self.page})
            return

        self._have_to_paginate = False

        if self.page == 0 or self.max_per_page == 0:
            self._state.last_page = 0
            query.set_first_result(0)
            query.set_max_results(0)
            self._state.initialized = True
            logger.debug(
                "Pagination disabled",
                extra={"page": self.page, "max_per_page": self.max_per_page},
            )
            return

        offset = (self.page - 1) * self.max_per_page
        if self.threshold > 0:
            limit = self.max_per_page * self.threshold + 1
        else:
            limit = self.max_per_page + 1

        query.set_first_result(offset)
        query.set_max_results(limit)

        logger.info(
            "Fetching page window",
            extra={
                "page": self.page,
                "max_per_page": self.max_per_page,
                "offset": offset,
                "limit": limit,
            },
        )

        self._fetch(query)

        assert self._threshold_count is not None
        last_page = math.ceil(self._threshold_count / self.max_per_page) + self.page - 1
        self._state.last_page = max(1, last_page)
        self._state.initialized = True

        logger.debug(
            "Page window ready",
            extra={
                "page": self.page,
                "threshold_count": self._threshold_count,
                "last_page": self.last_page,
            },
        )

    def get_current_page_results(self) -> Sequence[Any]:
        """
        Returns at most max_per_page rows for the current page.

        The query runs once; later calls return the cached sequence object.

        Raises:
            PagerNotInitializedError: If init() has not been called
        """
        if not self._state.initialized:
            raise PagerNotInitializedError("results")

        if self._results is not None:
            return self._results

        # Only reached after a "fetch nothing" init(); the query carries limit 0
        assert self._state.query is not None
        return self._fetch(self._state.query)

    def _fetch(self, query: ProxyQuery) -> Sequence[Any]:
        """Executes the query and keeps at most max_per_page rows."""
        results = as_sequence(query.execute())
        self._threshold_count = len(results)

        if len(results) > self.max_per_page:
            self._have_to_paginate = True
            self._results = results[: self.max_per_page]
        else:
            self._have_to_paginate = False
            self._results = results

        return self._results

    def count_results(self) -> int:
        """
        Estimates the number of rows up to the current page.

        This is not a table-wide total: rows past the over-fetch window are
        never seen.

        Raises:
            PagerNotInitializedError: If init() has not been called
        """
        if not self._state.initialized:
            raise PagerNotInitializedError("threshold_count")

        if self.last_page == 0:
            return 0

        n = (self.last_page - 1) * self.max_per_page
        if self.last_page == self.page:
            return n + (self._threshold_count or 0)
        return n

    def have_to_paginate(self) -> bool:
        return self._have_to_paginate or self.page > 1

    def __repr__(self) -> str:
        return (
            f"SimplePager(page={self.page}, max_per_page={self.max_per_page}, "
            f"threshold={self.threshold}, last_page={self.last_page})"
        )
