"""SQL repository implementation for books."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pydantic import ValidationError
from sqlalchemy import insert, select
from sqlalchemy.exc import SQLAlchemyError

from bookshelf.domain import Book, BookId, CreateBook
from bookshelf.persistence.errors import SpecificOperationError
from bookshelf.persistence.interfaces import BookRepository

from .mappers import row_from_mapping, to_book
from .models import BOOK_ROW_COLUMNS, BookRecord
from .pool import ConnectionPool

logger = logging.getLogger(__name__)

# Driver and decoding failures. Async drivers raise socket errors and connect
# timeouts (OSError, TimeoutError) without SQLAlchemy wrapping them.
_STORAGE_ERRORS = (SQLAlchemyError, ValidationError, ValueError, OSError, TimeoutError)


def _operation_error(operation: str, exc: Exception) -> SpecificOperationError:
    logger.warning("Book repository %s failed: %s", operation, exc)
    return SpecificOperationError(operation, exc)


class SQLBookRepository(BookRepository):
    def __init__(self, pool: ConnectionPool) -> None:
        self._db = pool

    async def create(self, command: CreateBook) -> None:
        stmt = insert(BookRecord).values(
            title=command.title,
            author=command.author,
            isbn=command.isbn,
            description=command.description,
        )
        logger.debug("Inserting book %r", command.title)
        try:
            async with self._db.begin() as conn:
                await conn.execute(stmt)
        except _STORAGE_ERRORS as exc:
            raise _operation_error("create", exc) from exc

    async def find_all(self) -> Sequence[Book]:
        stmt = select(*BOOK_ROW_COLUMNS).order_by(BookRecord.created_at.desc())
        try:
            async with self._db.connect() as conn:
                result = await conn.execute(stmt)
                rows = [row_from_mapping(r) for r in result.mappings().all()]
            books = [to_book(row) for row in rows]
        except _STORAGE_ERRORS as exc:
            raise _operation_error("find_all", exc) from exc
        logger.debug("Loaded %d books", len(books))
        return books

    async def find_by_id(self, book_id: BookId) -> Book | None:
        stmt = select(*BOOK_ROW_COLUMNS).where(BookRecord.book_id == book_id)
        try:
            async with self._db.connect() as conn:
                result = await conn.execute(stmt)
                record = result.mappings().one_or_none()
            book = to_book(row_from_mapping(record)) if record is not None else None
        except _STORAGE_ERRORS as exc:
            raise _operation_error("find_by_id", exc) from exc
        logger.debug("Lookup for book %s %s", book_id, "hit" if book else "missed")
        return book


__all__ = ["SQLBookRepository"]
