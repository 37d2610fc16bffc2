"""
Query collaborators for pagers.

A pager only needs three things from a query: an offset, a limit and a way to
execute it. This module provides the in-memory implementation and the shim that
turns whatever execute() returns into something countable and sliceable.
"""

from collections.abc import Iterable, Sequence
from typing import Any, Generic, TypeVar

from ._logging import logger

T = TypeVar("T")


def as_sequence(results: Any) -> Sequence[Any]:
    """
    Adapts a query result container to an indexable sequence.

    Lists and tuples are returned untouched. Collection wrappers exposing
    to_list() are unwrapped, and any other iterable (generators, lazy query
    builders) is materialized. Anything else is a collaborator bug and the
    TypeError from list() propagates.
    """
    if isinstance(results, Sequence):
        return results

    to_list = getattr(results, "to_list", None)
    if callable(to_list):
        return list(to_list())

    return list(results)


class ListQuery(Generic[T]):
    """
    In-memory query over a list of items.

    Usage:
        query = ListQuery(rows)
        pager = SimplePager(max_per_page=20, query=query)
    """

    def __init__(self, items: Iterable[T]):
        self.items: list[T] = list(items)
        self.first_result: int | None = None
        self.max_results: int | None = None
        self.execute_count = 0

    def set_first_result(self, offset: int | None) -> None:
        self.first_result = offset

    def set_max_results(self, limit: int | None) -> None:
        self.max_results = limit

    def execute(self) -> list[T]:
        """Returns the configured window of items. A limit of None means unbounded."""
        self.execute_count += 1
        start = self.first_result or 0

        if self.max_results is None:
            window = self.items[start:]
        else:
            window = self.items[start : start + self.max_results]

        logger.debug(
            "Executed in-memory query",
            extra={"offset": start, "limit": self.max_results, "result_count": len(window)},
        )
        return window
