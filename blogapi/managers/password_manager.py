"""
Password hashing module using Argon2 with passlib's CryptContext.

Hashing is CPU-bound, so the async helpers run it on a small thread pool
instead of the event loop.
"""

from asyncio import get_running_loop
from concurrent.futures import ThreadPoolExecutor
from logging import getLogger

from passlib.context import CryptContext
from passlib.exc import InternalBackendError

from blogapi.configs import CONFIG_MAP, file_logger, settings
from blogapi.errors import PasswordHashingError

executor = ThreadPoolExecutor(max_workers=4)
logger = file_logger(getLogger(__name__))


class PasswordHasher:
    """
    Password hashing and verification with Argon2id.

    Wraps passlib's CryptContext; cost parameters come from the configured
    `PASSWORD_SECURITY_LEVEL`.
    """

    def __init__(self) -> None:
        self.level = settings.PASSWORD_SECURITY_LEVEL
        self.pwd_context = CryptContext(
            schemes=["argon2", "pbkdf2_sha256"],
            deprecated="pbkdf2_sha256",
            argon2__memory_cost=CONFIG_MAP[self.level].memory_cost,
            argon2__time_cost=CONFIG_MAP[self.level].time_cost,
            argon2__parallelism=CONFIG_MAP[self.level].parallelism,
        )
        logger.info(f"PasswordHasher initialized with Argon2id on level {self.level}")

    def hash(self, password: str) -> str:
        """
        Hash a plaintext password using Argon2id.

        Args:
            password: The plaintext password to hash

        Returns:
            str: The hashed password in Argon2id format

        Raises:
            ValueError: If password is empty
            PasswordHashingError: If hashing fails

        Example:
            >>> hasher = PasswordHasher()
            >>> hasher.hash("my_secure_password")  # $argon2id$v=19$...
        """
        if not password:
            msg = "Password cannot be empty"
            raise ValueError(msg)

        try:
            return self.pwd_context.hash(password)
        except (ValueError, InternalBackendError, UnicodeError) as e:
            logger.exception("Error hashing password")
            mssg = "Failed to hash password"
            raise PasswordHashingError(mssg) from e

    def verify(self, password: str, hashed_password: str | None) -> bool:
        """
        Verify a plaintext password against a stored hash.

        When there is no stored hash a dummy verification still runs, so a
        missing account costs as much time as a wrong password.

        Args:
            password: The plaintext password to verify
            hashed_password: The stored hash, or None when the user is unknown

        Returns:
            bool: True if password matches, False otherwise
        """
        if hashed_password is None:
            self.pwd_context.dummy_verify()
            return False

        if not hashed_password.strip():
            logger.warning("Invalid hash format provided")
            return False

        try:
            return self.pwd_context.verify(password, hashed_password)
        except (ValueError, TypeError):
            logger.exception("Stored hash is corrupted or invalid format")
            return False


_default_hasher = PasswordHasher()


def get_password_hasher() -> PasswordHasher:
    """Get the default password hasher instance."""
    return _default_hasher


async def hash_password(password: str) -> str:
    """
    Hash a password with the default hasher off the event loop.

    Args:
        password: The plaintext password to hash

    Returns:
        str: The hashed password
    """
    return await get_running_loop().run_in_executor(
        executor,
        get_password_hasher().hash,
        password,
    )


async def verify_password(password: str, hashed_password: str | None) -> bool:
    """
    Verify a password with the default hasher off the event loop.

    Args:
        password: The plaintext password to verify
        hashed_password: The stored hash, or None to run a dummy verification

    Returns:
        bool: True if password matches, False otherwise
    """
    return await get_running_loop().run_in_executor(
        executor,
        get_password_hasher().verify,
        password,
        hashed_password,
    )
