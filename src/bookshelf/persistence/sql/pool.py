"""Async connection pool wrapper around a SQLAlchemy engine."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine


class ConnectionPool:
    """Lends pooled connections for the duration of a single statement."""

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine

    @classmethod
    def from_url(
        cls,
        database_url: str,
        *,
        pool_size: int = 5,
        max_overflow: int = 10,
        pool_timeout: float = 30.0,
        echo: bool = False,
    ) -> ConnectionPool:
        url = make_url(database_url)
        options: dict[str, Any] = {"echo": echo}
        # SQLite drivers pick their own pool class, which rejects queue sizing.
        if url.get_backend_name() != "sqlite":
            options.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_timeout=pool_timeout,
                pool_pre_ping=True,
            )
        return cls(create_async_engine(url, **options))

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @property
    def url(self) -> str:
        return self._engine.url.render_as_string(hide_password=True)

    @asynccontextmanager
    async def connect(self) -> AsyncIterator[AsyncConnection]:
        """Borrow a connection; it returns to the pool on every exit path."""

        async with self._engine.connect() as conn:
            yield conn

    @asynccontextmanager
    async def begin(self) -> AsyncIterator[AsyncConnection]:
        """Borrow a connection inside a transaction committed on success."""

        async with self._engine.begin() as conn:
            yield conn

    async def dispose(self) -> None:
        await self._engine.dispose()


__all__ = ["ConnectionPool"]
