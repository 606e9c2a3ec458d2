"""Table bootstrap for the books store."""

from __future__ import annotations

import asyncio

from .models import Base
from .pool import ConnectionPool

_schema_lock = asyncio.Lock()
_initialised_urls: set[str] = set()


async def ensure_schema(pool: ConnectionPool) -> None:
    """Create the ``books`` table once per database URL."""

    async with _schema_lock:
        if pool.url in _initialised_urls:
            return
        async with pool.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        _initialised_urls.add(pool.url)


__all__ = ["ensure_schema"]
