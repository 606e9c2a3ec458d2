"""In-memory repository implementation for unit testing."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from dataclasses import dataclass, field
from uuid import uuid4

from bookshelf.domain import Book, BookId, CreateBook
from bookshelf.persistence.interfaces import BookRepository


@dataclass
class InMemoryBookRepository(BookRepository):
    _books: list[Book] = field(default_factory=list)
    _lock: asyncio.Lock = field(default_factory=asyncio.Lock)

    async def create(self, command: CreateBook) -> None:
        book = Book(id=BookId(uuid4()), **command.model_dump())
        async with self._lock:
            self._books.append(book)

    async def find_all(self) -> Sequence[Book]:
        async with self._lock:
            # insertion order is creation order
            return list(reversed(self._books))

    async def find_by_id(self, book_id: BookId) -> Book | None:
        async with self._lock:
            for book in self._books:
                if book.id == book_id:
                    return book
        return None


__all__ = ["InMemoryBookRepository"]
