# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os

# Must be set before the app (and its settings) are imported anywhere.
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_TO_FILE"] = "false"
os.environ["PASSWORD_SECURITY_LEVEL"] = "low"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["MAX_PAGE_LIMIT"] = "100"

from collections.abc import AsyncGenerator, Callable, Coroutine  # noqa: E402
from typing import Any  # noqa: E402
from uuid import UUID  # noqa: E402

from httpx import ASGITransport, AsyncClient  # noqa: E402
from pytest import fixture  # noqa: E402

from blogapi.dependencies import get_blog_repository, get_user_repository  # noqa: E402
from blogapi.main import app  # noqa: E402
from blogapi.repositories import (  # noqa: E402
    InMemoryBlogRepository,
    InMemoryStore,
    InMemoryUserRepository,
)

type SignupFn = Callable[..., Coroutine[Any, Any, tuple[str, UUID]]]


@fixture
def store() -> InMemoryStore:
    """Fresh in-memory rows for each test."""
    return InMemoryStore()


@fixture
def user_repo(store: InMemoryStore) -> InMemoryUserRepository:
    return InMemoryUserRepository(store)


@fixture
def blog_repo(store: InMemoryStore) -> InMemoryBlogRepository:
    return InMemoryBlogRepository(store)


@fixture
async def client(
    user_repo: InMemoryUserRepository,
    blog_repo: InMemoryBlogRepository,
) -> AsyncGenerator[AsyncClient]:
    """HTTP client against the app with repositories swapped for in-memory ones."""
    app.dependency_overrides[get_user_repository] = lambda: user_repo
    app.dependency_overrides[get_blog_repository] = lambda: blog_repo
    try:
        async with AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()


@fixture
def signup(client: AsyncClient) -> SignupFn:
    """Register a user through the API and return its token and id."""

    async def _signup(
        email: str = "alice@example.com",
        first_name: str = "Alice",
        last_name: str = "Smith",
        password: str = "password123",
    ) -> tuple[str, UUID]:
        response = await client.post(
            "/auth/signup",
            json={
                "first_name": first_name,
                "last_name": last_name,
                "email": email,
                "password": password,
            },
        )
        assert response.status_code == 201, response.text
        body = response.json()
        return body["token"], UUID(body["user"]["id"])

    return _signup


@fixture
def bearer() -> Callable[[str], dict[str, str]]:
    """Build an Authorization header for a token."""

    def _bearer(token: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token}"}

    return _bearer
