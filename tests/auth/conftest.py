"""Pytest configuration and fixtures for authentication tests."""

from pytest import fixture

from blogapi.repositories import InMemoryUserRepository
from blogapi.services import AuthService


@fixture
def auth_service(user_repo: InMemoryUserRepository) -> AuthService:
    return AuthService(user_repo)


@fixture
def signup_payload() -> dict[str, str]:
    return {
        "first_name": "Alice",
        "last_name": "Smith",
        "email": "alice@example.com",
        "password": "password123",
        "bio": "Writes about Python.",
    }
