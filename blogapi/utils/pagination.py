"""Pagination normalization for listing endpoints."""

from dataclasses import dataclass
from math import isfinite

from blogapi.configs.settings import DEFAULT_PAGE

type RawNumber = int | float | str | None

# Largest OFFSET/LIMIT PostgreSQL accepts (signed 64-bit).
MAX_OFFSET = 2**63 - 1


@dataclass(frozen=True)
class PageRequest:
    """Normalized page request."""

    page: int
    limit: int

    @property
    def skip(self) -> int:
        """Number of records to skip before this page."""
        return (self.page - 1) * self.limit


def _coerce(value: RawNumber) -> int | None:
    """Coerce a raw query value to an int, or None if it is not a usable number."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not isfinite(number):
        return None
    return int(number)


def normalize_pagination(
    page: RawNumber = DEFAULT_PAGE,
    limit: RawNumber = None,
    *,
    default_limit: int = 20,
    max_limit: int | None = None,
) -> PageRequest:
    """
    Clamp raw page/limit input into a usable page request.

    Missing, non-numeric and zero values fall back to the defaults;
    negative values are floored at 1. Oversized values are clamped so that
    the limit and the skip both stay within `MAX_OFFSET`.

    Args:
        page: Requested page (1-based)
        limit: Requested page size
        default_limit: Page size used when limit is missing or unusable
        max_limit: Optional upper bound for the page size

    Returns:
        PageRequest: Normalized page and limit
    """
    page_number = _coerce(page) or DEFAULT_PAGE
    page_size = _coerce(limit) or default_limit

    page_number = max(page_number, 1)
    page_size = max(page_size, 1)
    if max_limit is not None:
        page_size = min(page_size, max_limit)
    page_size = min(page_size, MAX_OFFSET)
    page_number = min(page_number, MAX_OFFSET // page_size + 1)

    return PageRequest(page=page_number, limit=page_size)
