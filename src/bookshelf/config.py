"""Lightweight application configuration loader."""

from __future__ import annotations

import os
from dataclasses import dataclass


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in {"0", "false", "no"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    return default if raw is None or not raw.strip() else int(raw)


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    return default if raw is None or not raw.strip() else float(raw)


@dataclass(frozen=True)
class AppSettings:
    """Immutable configuration sourced from environment variables."""

    environment: str = "development"
    database_url: str = "sqlite+aiosqlite:///bookshelf.db"
    pool_size: int = 5
    pool_max_overflow: int = 10
    pool_timeout: float = 30.0
    sql_echo: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> AppSettings:
        return cls(
            environment=os.getenv("BOOKSHELF_ENV", cls.environment),
            database_url=os.getenv("BOOKSHELF_DATABASE_URL", cls.database_url),
            pool_size=_env_int("BOOKSHELF_POOL_SIZE", cls.pool_size),
            pool_max_overflow=_env_int("BOOKSHELF_POOL_MAX_OVERFLOW", cls.pool_max_overflow),
            pool_timeout=_env_float("BOOKSHELF_POOL_TIMEOUT", cls.pool_timeout),
            sql_echo=_env_bool("BOOKSHELF_SQL_ECHO", cls.sql_echo),
            log_level=os.getenv("BOOKSHELF_LOG_LEVEL", cls.log_level).upper(),
        )


__all__ = ["AppSettings"]
