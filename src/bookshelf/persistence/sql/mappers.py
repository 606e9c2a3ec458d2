"""Conversions from storage rows to domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from bookshelf.domain import Book, BookId

from .models import BookRow


def row_from_mapping(mapping: Mapping[str, Any]) -> BookRow:
    return BookRow(
        book_id=mapping["book_id"],
        title=mapping["title"],
        author=mapping["author"],
        isbn=mapping["isbn"],
        description=mapping["description"],
    )


def to_book(row: BookRow) -> Book:
    """Re-type a stored row as a ``Book`` without altering any field."""

    return Book(
        id=BookId(row.book_id),
        title=row.title,
        author=row.author,
        isbn=row.isbn,
        description=row.description,
    )


__all__ = ["row_from_mapping", "to_book"]
