from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True)
class PagerOptions:
    """
    Default pagination settings.

    Passed to paginate() and PageNavigator so an application can configure
    page size, look-ahead and link count in one place.
    """

    max_per_page: int = 10
    # How many pages to look forward to create links to next pages.
    threshold: int = 1
    max_page_links: int = 5

    def with_overrides(self, **overrides: Any) -> "PagerOptions":
        """
        Return a copy with the given fields replaced.

        None values are ignored so callers can forward optional arguments as-is.

        Raises:
            TypeError: If an unknown option name is passed
        """
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)
