"""Repository pattern implementation for database operations."""

from blogapi.repositories.base import BlogRepositoryProtocol, UserRepositoryProtocol
from blogapi.repositories.blog import BlogRepository
from blogapi.repositories.memory import (
    InMemoryBlogRepository,
    InMemoryStore,
    InMemoryUserRepository,
)
from blogapi.repositories.user import UserRepository

__all__ = [
    "BlogRepository",
    "BlogRepositoryProtocol",
    "InMemoryBlogRepository",
    "InMemoryStore",
    "InMemoryUserRepository",
    "UserRepository",
    "UserRepositoryProtocol",
]
