from __future__ import annotations

import asyncio
from pathlib import Path

from bookshelf.config import AppSettings
from bookshelf.container import build_container
from bookshelf.persistence.sql import SQLBookRepository, ensure_schema


def test_build_container_wires_sql_repository(tmp_path: Path) -> None:
    db_file = tmp_path / "nested" / "container.db"
    settings = AppSettings(environment="test", database_url=f"sqlite+aiosqlite:///{db_file}")

    container = build_container(settings)

    assert db_file.parent.exists()
    assert isinstance(container.book_repository, SQLBookRepository)
    assert container.settings is settings

    async def _round_trip() -> int:
        try:
            await ensure_schema(container.pool)
            books = await container.book_repository.find_all()
        finally:
            await container.pool.dispose()
        return len(books)

    assert asyncio.run(_round_trip()) == 0
    assert db_file.exists()
