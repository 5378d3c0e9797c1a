"""Typed blog listing queries shared by the query builder and the repositories."""

from dataclasses import dataclass, field
from enum import StrEnum
from math import ceil
from uuid import UUID

from blogapi.models import BlogDB, BlogState


class SortField(StrEnum):
    """Fields a blog listing may be sorted by."""

    READ_COUNT = "read_count"
    READING_TIME = "reading_time"
    TIMESTAMP = "timestamp"


@dataclass(frozen=True)
class SortOrder:
    field: SortField = SortField.TIMESTAMP
    descending: bool = True


@dataclass(frozen=True)
class TextSearch:
    """
    Free-text search clause.

    Matches a blog when `term` is a case-insensitive substring of its title
    or of any tag, or when the blog was written by one of `author_ids`.
    """

    term: str
    author_ids: tuple[UUID, ...] = ()


@dataclass(frozen=True)
class BlogFilter:
    """Field constraints; every constraint that is set must hold."""

    states: tuple[BlogState, ...] | None = None
    author_id: UUID | None = None
    title_contains: str | None = None
    tags_any: tuple[str, ...] = ()
    search: TextSearch | None = None


@dataclass(frozen=True)
class BlogQuery:
    filter: BlogFilter
    sort: SortOrder
    page: int
    limit: int

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class BlogListParams:
    """Raw public listing parameters as received from the query string."""

    page: str | None = None
    limit: str | None = None
    state: str | None = None
    q: str | None = None
    author: str | None = None
    title: str | None = None
    tags: str | None = None
    sort: str | None = None


@dataclass(frozen=True)
class OwnerListParams:
    """Raw owner listing parameters."""

    page: str | None = None
    limit: str | None = None
    state: str | None = None
    sort: str | None = None


@dataclass
class BlogPage:
    """One page of blogs plus the counts needed for the pagination envelope."""

    docs: list[BlogDB] = field(default_factory=list)
    total_docs: int = 0
    limit: int = 20
    page: int = 1

    @property
    def total_pages(self) -> int:
        return ceil(self.total_docs / self.limit) if self.limit else 0

    @property
    def has_next_page(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_prev_page(self) -> bool:
        return self.page > 1
