"""Request-level errors shared by the blog and auth services."""

from logging import getLogger

from starlette.status import (
    HTTP_403_FORBIDDEN,
    HTTP_404_NOT_FOUND,
    HTTP_409_CONFLICT,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from blogapi.configs import DEFAULT_ERROR_MESSAGE, file_logger
from blogapi.errors.base import (
    BaseAppError,
    create_exception_handler,
    create_unhandled_exception_handler,
)

logger = file_logger(getLogger(__name__))


class ForbiddenError(BaseAppError):
    """Raised when an authenticated caller may not access a resource."""

    def __init__(self, detail: str = "Forbidden") -> None:
        super().__init__(detail, HTTP_403_FORBIDDEN)


class NotFoundError(BaseAppError):
    """Raised when a resource does not exist."""

    def __init__(self, detail: str = "Not found") -> None:
        super().__init__(detail, HTTP_404_NOT_FOUND)


class ConflictError(BaseAppError):
    """Raised when a uniqueness rule would be violated."""

    def __init__(self, detail: str = "Conflict") -> None:
        super().__init__(detail, HTTP_409_CONFLICT)


class InternalError(BaseAppError):
    """Raised for unexpected failures in the store, hashing or signing layers."""

    def __init__(self, detail: str = DEFAULT_ERROR_MESSAGE) -> None:
        super().__init__(detail, HTTP_500_INTERNAL_SERVER_ERROR)


api_exception_handler = create_exception_handler(logger)
unhandled_exception_handler = create_unhandled_exception_handler(logger)
