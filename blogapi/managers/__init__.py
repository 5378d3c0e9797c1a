from blogapi.managers.password_manager import (
    PasswordHasher,
    get_password_hasher,
    hash_password,
    verify_password,
)
from blogapi.managers.token_manager import (
    create_access_token,
    decode_access_token,
    verify_bearer,
)

__all__ = [
    "PasswordHasher",
    "create_access_token",
    "decode_access_token",
    "get_password_hasher",
    "hash_password",
    "verify_bearer",
    "verify_password",
]
