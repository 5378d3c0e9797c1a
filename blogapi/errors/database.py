from logging import getLogger

from blogapi.configs import file_logger
from blogapi.errors.base import create_exception_handler
from blogapi.errors.exceptions import ConflictError, InternalError

logger = file_logger(getLogger(__name__))


class DatabaseError(InternalError):
    """Base exception for database errors."""

    def __init__(self, detail: str = "Database Error") -> None:
        super().__init__(detail)


class DatabaseConnectionError(DatabaseError):
    """Exception raised when database connection fails."""

    def __init__(
        self,
        detail: str = "Failed to connect to the database",
    ) -> None:
        super().__init__(detail)


class DuplicateEntryError(ConflictError):
    """Exception raised when a unique constraint rejects a write."""

    def __init__(
        self,
        detail: str = "A record with this value already exists",
    ) -> None:
        super().__init__(detail)


database_exception_handler = create_exception_handler(logger)
