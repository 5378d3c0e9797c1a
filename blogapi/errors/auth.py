"""Authentication errors."""

from logging import getLogger

from starlette.status import HTTP_401_UNAUTHORIZED

from blogapi.configs import file_logger
from blogapi.errors.base import BaseAppError, create_exception_handler

logger = file_logger(getLogger(__name__))


class AuthError(BaseAppError):
    """Base class for authentication errors."""

    def __init__(
        self,
        detail: str = "Authentication failed",
        status_code: int = HTTP_401_UNAUTHORIZED,
    ) -> None:
        super().__init__(detail, status_code)


class InvalidCredentialsError(AuthError):
    """Raised when email or password is wrong; the message never says which."""

    def __init__(self) -> None:
        super().__init__("Invalid credentials")


class MissingTokenError(AuthError):
    """Raised when a protected route is called without a bearer token."""

    def __init__(self) -> None:
        super().__init__("Not authenticated")


class InvalidTokenError(AuthError):
    """Raised when a bearer token is malformed, expired or badly signed."""

    def __init__(self) -> None:
        super().__init__("Could not validate credentials")


class UserNotFoundError(AuthError):
    """Raised when a valid token refers to a user that no longer exists."""

    def __init__(self) -> None:
        super().__init__("User not found")


auth_exception_handler = create_exception_handler(logger)
