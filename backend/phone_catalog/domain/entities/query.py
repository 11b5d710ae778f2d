"""Domain value objects for phone collection queries: filtering and pagination."""

import math
from dataclasses import dataclass, field

from .phone import PhoneSummary

# Upper bound for page and limit; keeps (page - 1) * limit within a 64-bit int.
MAX_PAGING_VALUE = 2**31 - 1


def _clean_text(raw: str | None) -> str | None:
    """Trim a text parameter; blank means absent."""
    if raw is None:
        return None
    value = raw.strip()
    return value or None


def _positive_int(raw: str | None, default: int = 1) -> int:
    """Parse a positive integer parameter into ``1..MAX_PAGING_VALUE``.

    Unusable values become 1.
    """
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return 1
    return min(max(value, 1), MAX_PAGING_VALUE)


@dataclass(frozen=True)
class PhoneFilter:
    """Record filter applied before counting and paging.

    ``q`` is a case-insensitive substring match on title, brand or description.
    ``brand`` is a case-insensitive exact match on brand.
    """

    q: str | None = None
    brand: str | None = None

    def matches(self, title: str, brand: str, description: str) -> bool:
        """Evaluate the filter in memory (used by non-database repositories)."""
        if self.brand is not None and brand.casefold() != self.brand.casefold():
            return False
        if self.q is not None:
            needle = self.q.casefold()
            return any(needle in text.casefold() for text in (title, brand, description))
        return True


@dataclass(frozen=True)
class PhoneQuery:
    """A normalised collection query.

    Pagination is opt-in: ``limit`` is ``None`` unless the client supplied
    one, in which case ``page`` defaults to 1.
    """

    filter: PhoneFilter = field(default_factory=PhoneFilter)
    page: int = 1
    limit: int | None = None

    @classmethod
    def from_params(
        cls,
        *,
        q: str | None = None,
        brand: str | None = None,
        page: str | None = None,
        limit: str | None = None,
    ) -> "PhoneQuery":
        """Build a query from raw query-string values."""
        parsed_limit = None
        if limit is not None and limit.strip():
            parsed_limit = _positive_int(limit)
        return cls(
            filter=PhoneFilter(q=_clean_text(q), brand=_clean_text(brand)),
            page=_positive_int(page),
            limit=parsed_limit,
        )

    @property
    def is_paginated(self) -> bool:
        return self.limit is not None

    @property
    def skip(self) -> int:
        if self.limit is None:
            return 0
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class Pagination:
    """Pagination metadata for one page of a filtered collection."""

    page: int
    limit: int
    total_items: int
    count: int = 0

    @property
    def total_pages(self) -> int:
        # An empty result still has one (empty) page.
        return max(math.ceil(self.total_items / self.limit), 1)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    @property
    def prev_page(self) -> int:
        """Previous existing page; clamps to the last page when overshooting."""
        return min(self.page - 1, self.total_pages)


@dataclass
class PhoneCollection:
    """Result of a collection query: summaries, optional pagination, links."""

    items: list[PhoneSummary] = field(default_factory=list)
    pagination: Pagination | None = None
    links: dict[str, str] = field(default_factory=dict)
