"""Persistence layer abstractions for repositories."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from bookshelf.domain import Book, BookId, CreateBook


class BookRepository(Protocol):
    """Create and read access to books.

    Implementations raise ``SpecificOperationError`` for storage failures.
    A missing book is reported as ``None``, never as an error.
    """

    async def create(self, command: CreateBook) -> None: ...

    async def find_all(self) -> Sequence[Book]: ...

    async def find_by_id(self, book_id: BookId) -> Book | None: ...


__all__ = ["BookRepository"]
