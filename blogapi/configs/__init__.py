from blogapi.configs.logger import file_logger
from blogapi.configs.settings import (
    CONFIG_MAP,
    DEFAULT_ERROR_MESSAGE,
    WORDS_PER_MINUTE,
    PasswordHashConfig,
    Settings,
    settings,
)

__all__ = [
    "CONFIG_MAP",
    "DEFAULT_ERROR_MESSAGE",
    "WORDS_PER_MINUTE",
    "PasswordHashConfig",
    "Settings",
    "file_logger",
    "settings",
]
