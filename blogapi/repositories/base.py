"""Repository interfaces the services depend on."""

from collections.abc import Iterable
from typing import Protocol, runtime_checkable
from uuid import UUID

from blogapi.models import BlogDB, UserDB
from blogapi.schemas.query import BlogPage, BlogQuery


def like_pattern(term: str) -> str:
    """Build a LIKE pattern matching `term` literally anywhere in a value."""
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


@runtime_checkable
class UserRepositoryProtocol(Protocol):
    """
    Protocol for user storage.

    Both the SQL `UserRepository` and `InMemoryUserRepository` conform to it.
    """

    async def create(self, user: UserDB) -> UserDB:
        """Persist a new user; raises `DuplicateEntryError` on a taken email."""
        ...

    async def get_by_id(self, user_id: UUID) -> UserDB | None:
        """Get a user by id."""
        ...

    async def get_by_email(self, email: str) -> UserDB | None:
        """Get a user by exact email."""
        ...

    async def get_many(self, user_ids: Iterable[UUID]) -> dict[UUID, UserDB]:
        """Get several users keyed by id; unknown ids are absent."""
        ...

    async def find_ids_matching(self, term: str) -> list[UUID]:
        """Ids of users whose first name, last name or email contains `term`."""
        ...


@runtime_checkable
class BlogRepositoryProtocol(Protocol):
    """
    Protocol for blog storage.

    Both the SQL `BlogRepository` and `InMemoryBlogRepository` conform to it.
    """

    async def create(self, blog: BlogDB) -> BlogDB:
        """Persist a new blog; raises `DuplicateEntryError` on a taken title."""
        ...

    async def get_by_id(self, blog_id: UUID) -> BlogDB | None:
        """Get a blog by id."""
        ...

    async def get_by_title(self, title: str) -> BlogDB | None:
        """Get a blog by exact title."""
        ...

    async def save(self, blog: BlogDB) -> BlogDB:
        """Persist changes made to a blog and refresh its `updated_at`."""
        ...

    async def delete(self, blog: BlogDB) -> None:
        """Remove a blog permanently."""
        ...

    async def increment_read_count(self, blog_id: UUID) -> BlogDB | None:
        """Atomically add one read; returns the updated blog or None if unknown."""
        ...

    async def find(self, query: BlogQuery) -> BlogPage:
        """Run a filtered, sorted and paginated listing query."""
        ...
