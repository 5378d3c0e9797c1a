"""Pytest configuration and fixtures for blog tests."""

from collections.abc import Callable, Coroutine
from datetime import UTC, datetime, timedelta
from typing import Any

from pytest import fixture

from blogapi.models import BlogDB, BlogState, UserDB
from blogapi.repositories import InMemoryBlogRepository, InMemoryUserRepository
from blogapi.services import BlogService

type MakeBlogFn = Callable[..., Coroutine[Any, Any, BlogDB]]


@fixture
def blog_service(
    blog_repo: InMemoryBlogRepository,
    user_repo: InMemoryUserRepository,
) -> BlogService:
    return BlogService(blog_repo, user_repo)


@fixture
async def alice(user_repo: InMemoryUserRepository) -> UserDB:
    return await user_repo.create(
        UserDB(
            first_name="Alice",
            last_name="Smith",
            email="alice@example.com",
            password_hash="$argon2id$v=19$m=8192,t=1,p=1$somehash",
        ),
    )


@fixture
async def bob(user_repo: InMemoryUserRepository) -> UserDB:
    return await user_repo.create(
        UserDB(
            first_name="Bob",
            last_name="Jones",
            email="bob@example.com",
            password_hash="$argon2id$v=19$m=8192,t=1,p=1$somehash",
        ),
    )


@fixture
def make_blog(blog_repo: InMemoryBlogRepository) -> MakeBlogFn:
    """Store a blog directly, with a timestamp `minutes_ago` in the past."""
    base = datetime.now(tz=UTC)

    async def _make_blog(
        author: UserDB,
        title: str,
        *,
        state: BlogState = BlogState.PUBLISHED,
        tags: list[str] | None = None,
        body: str = "Some body text",
        read_count: int = 0,
        reading_time: int = 1,
        minutes_ago: int = 0,
    ) -> BlogDB:
        return await blog_repo.create(
            BlogDB(
                title=title,
                author_id=author.id,
                body=body,
                state=state,
                tags=tags or [],
                read_count=read_count,
                reading_time=reading_time,
                timestamp=base - timedelta(minutes=minutes_ago),
            ),
        )

    return _make_blog
