"""Book entity and the command used to create one."""

from __future__ import annotations

from pydantic import Field

from .base import DomainModel
from .types import BookId


class Book(DomainModel):
    """A persisted book as seen by callers of the repository."""

    id: BookId
    title: str
    author: str
    isbn: str
    description: str


class CreateBook(DomainModel):
    """Input for registering a new book; storage assigns the identifier."""

    title: str = Field(max_length=255)
    author: str = Field(max_length=255)
    isbn: str = Field(max_length=255)
    description: str = Field(max_length=1024)


__all__ = ["Book", "CreateBook"]
