from .config import PagerOptions
from .dynamo import DynamoTableQuery
from .exceptions import (
    PagerError,
    PagerFrozenError,
    PagerNotInitializedError,
    ProvisionedThroughputExceededError,
    RequestTimeoutError,
    TableNotFoundError,
    UninitializedQueryError,
    ValidationError,
)
from .pager import PageNavigator, PagerState, PaginationStrategy, ProxyQuery
from .pagination import PageWindow, paginate
from .query import ListQuery, as_sequence
from .simple_pager import SimplePager

__all__ = [
    "SimplePager",
    "PagerOptions",
    "paginate",
    "PageWindow",
    # Contract
    "PaginationStrategy",
    "ProxyQuery",
    "PagerState",
    "PageNavigator",
    # Query collaborators
    "ListQuery",
    "DynamoTableQuery",
    "as_sequence",
    # Exceptions
    "PagerError",
    "UninitializedQueryError",
    "PagerNotInitializedError",
    "PagerFrozenError",
    "TableNotFoundError",
    "ProvisionedThroughputExceededError",
    "RequestTimeoutError",
    "ValidationError",
]
