# tests/blogs/test_blog_repository.py
"""Tests for blogapi/repositories/blog.py module."""

from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from blogapi.errors import ForbiddenError
from blogapi.models import BlogDB, BlogState
from blogapi.repositories import BlogRepository, InMemoryUserRepository
from blogapi.services import BlogService


def _session_returning(blog: BlogDB | None) -> AsyncMock:
    session = AsyncMock(spec=AsyncSession)
    result = MagicMock()
    result.scalar_one_or_none.return_value = blog
    session.execute.return_value = result
    return session


class TestIncrementReadCount:
    """Tests for BlogRepository.increment_read_count."""

    async def test_commits_after_update(self) -> None:
        """The increment is committed before the caller checks visibility."""
        blog = BlogDB(
            title="Draft",
            body="b",
            author_id=uuid4(),
            state=BlogState.DRAFT,
            read_count=1,
        )
        session = _session_returning(blog)

        result = await BlogRepository(session).increment_read_count(blog.id)

        assert result is blog
        session.execute.assert_awaited_once()
        session.commit.assert_awaited_once()
        session.rollback.assert_not_awaited()
        names = [name for name, *_ in session.mock_calls]
        assert names.index("commit") > names.index("execute")

    async def test_unknown_blog_commits_nothing(self) -> None:
        session = _session_returning(None)

        result = await BlogRepository(session).increment_read_count(uuid4())

        assert result is None
        session.commit.assert_not_awaited()

    async def test_forbidden_read_still_committed(self, user_repo: InMemoryUserRepository) -> None:
        """A rejected read of a draft keeps its increment in the database."""
        blog = BlogDB(title="Draft", body="b", author_id=uuid4(), state=BlogState.DRAFT)
        session = _session_returning(blog)
        service = BlogService(BlogRepository(session), user_repo)

        with pytest.raises(ForbiddenError):
            await service.get_one(str(blog.id))

        session.commit.assert_awaited_once()
