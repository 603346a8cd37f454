"""Runtime configuration read from the environment."""

from .settings import DB_PATH_ENV, LOG_LEVEL_ENV, Settings, load_settings

__all__ = [
    "DB_PATH_ENV",
    "LOG_LEVEL_ENV",
    "Settings",
    "load_settings",
]
