"""Service container wiring application components."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from sqlalchemy.engine import make_url

from bookshelf.config import AppSettings
from bookshelf.persistence import BookRepository
from bookshelf.persistence.sql import ConnectionPool, SQLBookRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ServiceContainer:
    """Aggregates constructed services with shared configuration."""

    settings: AppSettings
    pool: ConnectionPool
    book_repository: BookRepository


def _ensure_sqlite_directory(database_url: str) -> None:
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite" or not url.database:
        return
    if url.database == ":memory:":
        return
    db_path = Path(url.database).expanduser()
    db_path.parent.mkdir(parents=True, exist_ok=True)


def build_container(settings: AppSettings | None = None) -> ServiceContainer:
    """Construct the primary service container."""

    resolved_settings = settings or AppSettings.from_env()
    _ensure_sqlite_directory(resolved_settings.database_url)
    pool = ConnectionPool.from_url(
        resolved_settings.database_url,
        pool_size=resolved_settings.pool_size,
        max_overflow=resolved_settings.pool_max_overflow,
        pool_timeout=resolved_settings.pool_timeout,
        echo=resolved_settings.sql_echo,
    )
    logger.debug("Connection pool ready for %s", pool.url)

    return ServiceContainer(
        settings=resolved_settings,
        pool=pool,
        book_repository=SQLBookRepository(pool),
    )


__all__ = ["ServiceContainer", "build_container"]
