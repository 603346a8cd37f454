"""Environment-backed settings for the store, API and CLI."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional


logger = logging.getLogger(__name__)

DB_PATH_ENV = "SQUADSTATS_DB_PATH"
LOG_LEVEL_ENV = "SQUADSTATS_LOG_LEVEL"

_DEFAULT_DB_PATH = Path(__file__).resolve().parent.parent / "squadstats.sqlite"
_DEFAULT_LOG_LEVEL = "INFO"
_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


@dataclass(frozen=True)
class Settings:
    db_path: Path | str
    log_level: str

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)


def _env_db_path(env: Mapping[str, str]) -> Path | str:
    raw = env.get(DB_PATH_ENV)
    if not raw:
        return _DEFAULT_DB_PATH
    # ``file:`` URIs are handed to sqlite unchanged.
    if raw.startswith("file:"):
        return raw
    return Path(raw)


def _env_log_level(env: Mapping[str, str]) -> str:
    raw = env.get(LOG_LEVEL_ENV)
    if raw is None:
        return _DEFAULT_LOG_LEVEL
    level = raw.strip().upper()
    if level not in _LOG_LEVELS:
        logger.warning("Invalid log level for %s: %s; using default %s", LOG_LEVEL_ENV, raw, _DEFAULT_LOG_LEVEL)
        return _DEFAULT_LOG_LEVEL
    return level


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if env is None else env
    return Settings(db_path=_env_db_path(env), log_level=_env_log_level(env))
