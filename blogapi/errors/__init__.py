from blogapi.errors.auth import (
    AuthError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
    UserNotFoundError,
    auth_exception_handler,
)
from blogapi.errors.base import (
    BaseAppError,
    create_exception_handler,
    create_unhandled_exception_handler,
)
from blogapi.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DuplicateEntryError,
    database_exception_handler,
)
from blogapi.errors.exceptions import (
    ConflictError,
    ForbiddenError,
    InternalError,
    NotFoundError,
    api_exception_handler,
    unhandled_exception_handler,
)
from blogapi.errors.password_hasher import (
    PasswordHashingError,
    password_hashing_exception_handler,
)
from blogapi.errors.validation import (
    ValidationError,
    validation_error_handler,
    validation_exception_handler,
)

__all__ = [
    "AuthError",
    "BaseAppError",
    "ConflictError",
    "DatabaseConnectionError",
    "DatabaseError",
    "DuplicateEntryError",
    "ForbiddenError",
    "InternalError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "MissingTokenError",
    "NotFoundError",
    "PasswordHashingError",
    "UserNotFoundError",
    "ValidationError",
    "api_exception_handler",
    "auth_exception_handler",
    "create_exception_handler",
    "create_unhandled_exception_handler",
    "database_exception_handler",
    "password_hashing_exception_handler",
    "unhandled_exception_handler",
    "validation_error_handler",
    "validation_exception_handler",
]
