from logging import getLogger

from blogapi.configs import file_logger
from blogapi.errors.base import create_exception_handler
from blogapi.errors.exceptions import InternalError

logger = file_logger(getLogger(__name__))


class PasswordHashingError(InternalError):
    """Base error for password hasher module."""

    def __init__(self, detail: str = "Password hashing failed") -> None:
        super().__init__(detail)


password_hashing_exception_handler = create_exception_handler(logger)
