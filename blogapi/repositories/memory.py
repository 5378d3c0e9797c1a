"""
In-memory repositories.

Used by the test-suite and for local runs without PostgreSQL. Matching
and ordering follow the SQL repositories: case-insensitive literal
substring search, OR across tags, id as the sort tie-breaker.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from uuid import UUID

from blogapi.errors.database import DuplicateEntryError
from blogapi.models import BlogDB, BlogState, UserDB
from blogapi.schemas.query import BlogFilter, BlogPage, BlogQuery, TextSearch
from blogapi.utils.helpers import utc_now


@dataclass
class InMemoryStore:
    """Rows shared by the in-memory repositories."""

    users: dict[UUID, UserDB] = field(default_factory=dict)
    blogs: dict[UUID, BlogDB] = field(default_factory=dict)

    def clear(self) -> None:
        self.users.clear()
        self.blogs.clear()


def _contains(value: str | None, term: str) -> bool:
    return value is not None and term.casefold() in value.casefold()


def _matches_search(blog: BlogDB, search: TextSearch) -> bool:
    return (
        _contains(blog.title, search.term)
        or any(_contains(tag, search.term) for tag in blog.tags)
        or blog.author_id in search.author_ids
    )


def _matches(blog: BlogDB, blog_filter: BlogFilter) -> bool:
    if blog_filter.states is not None and BlogState(blog.state) not in blog_filter.states:
        return False
    if blog_filter.author_id is not None and blog.author_id != blog_filter.author_id:
        return False
    if blog_filter.title_contains and not _contains(blog.title, blog_filter.title_contains):
        return False
    if blog_filter.tags_any and not set(blog_filter.tags_any).intersection(blog.tags):
        return False
    return blog_filter.search is None or _matches_search(blog, blog_filter.search)


class InMemoryUserRepository:
    """User repository backed by an `InMemoryStore`."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def create(self, user: UserDB) -> UserDB:
        if any(existing.email == user.email for existing in self.store.users.values()):
            raise DuplicateEntryError(detail="Email already registered")
        self.store.users[user.id] = user
        return user

    async def get_by_id(self, user_id: UUID) -> UserDB | None:
        return self.store.users.get(user_id)

    async def get_by_email(self, email: str) -> UserDB | None:
        return next((user for user in self.store.users.values() if user.email == email), None)

    async def get_many(self, user_ids: Iterable[UUID]) -> dict[UUID, UserDB]:
        return {uid: self.store.users[uid] for uid in set(user_ids) if uid in self.store.users}

    async def find_ids_matching(self, term: str) -> list[UUID]:
        return [
            user.id
            for user in self.store.users.values()
            if _contains(user.first_name, term)
            or _contains(user.last_name, term)
            or _contains(user.email, term)
        ]


class InMemoryBlogRepository:
    """Blog repository backed by an `InMemoryStore`."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    def _title_taken(self, blog: BlogDB) -> bool:
        return any(
            other.title == blog.title and other.id != blog.id for other in self.store.blogs.values()
        )

    async def create(self, blog: BlogDB) -> BlogDB:
        if self._title_taken(blog):
            raise DuplicateEntryError(detail="Blog title must be unique")
        self.store.blogs[blog.id] = blog
        return blog

    async def get_by_id(self, blog_id: UUID) -> BlogDB | None:
        return self.store.blogs.get(blog_id)

    async def get_by_title(self, title: str) -> BlogDB | None:
        return next((blog for blog in self.store.blogs.values() if blog.title == title), None)

    async def save(self, blog: BlogDB) -> BlogDB:
        if self._title_taken(blog):
            raise DuplicateEntryError(detail="Title already used")
        blog.updated_at = utc_now()
        self.store.blogs[blog.id] = blog
        return blog

    async def delete(self, blog: BlogDB) -> None:
        self.store.blogs.pop(blog.id, None)

    async def increment_read_count(self, blog_id: UUID) -> BlogDB | None:
        blog = self.store.blogs.get(blog_id)
        if blog is None:
            return None
        blog.read_count += 1
        return blog

    async def find(self, query: BlogQuery) -> BlogPage:
        matched = [blog for blog in self.store.blogs.values() if _matches(blog, query.filter)]
        sort_field = query.sort.field.value
        # Stable sorts: tie-break by id ascending, then the requested order.
        matched.sort(key=lambda blog: blog.id)
        matched.sort(key=lambda blog: getattr(blog, sort_field), reverse=query.sort.descending)
        docs = matched[query.skip : query.skip + query.limit]
        return BlogPage(docs=docs, total_docs=len(matched), limit=query.limit, page=query.page)
