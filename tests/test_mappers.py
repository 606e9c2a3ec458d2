from __future__ import annotations

from uuid import uuid4

from bookshelf.domain import Book
from bookshelf.persistence.sql.mappers import row_from_mapping, to_book
from bookshelf.persistence.sql.models import BookRow


def test_to_book_copies_every_field() -> None:
    row = BookRow(
        book_id=uuid4(),
        title="Test Title",
        author="Test Author",
        isbn="Test ISBN",
        description="Test Description",
    )

    book = to_book(row)

    assert isinstance(book, Book)
    assert book.id == row.book_id
    assert (book.title, book.author, book.isbn, book.description) == (
        "Test Title",
        "Test Author",
        "Test ISBN",
        "Test Description",
    )


def test_to_book_keeps_unicode_and_empty_values() -> None:
    row = BookRow(book_id=uuid4(), title="吾輩は猫である", author="夏目漱石", isbn="", description="")
    book = to_book(row)
    assert book.title == "吾輩は猫である"
    assert book.author == "夏目漱石"
    assert book.isbn == ""
    assert book.description == ""


def test_row_from_mapping_ignores_extra_columns() -> None:
    book_id = uuid4()
    row = row_from_mapping(
        {
            "book_id": book_id,
            "title": "t",
            "author": "a",
            "isbn": "i",
            "description": "d",
            "created_at": "ignored",
        }
    )
    assert row == BookRow(book_id=book_id, title="t", author="a", isbn="i", description="d")
