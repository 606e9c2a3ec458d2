"""Domain models for the bookshelf."""

from .base import DomainModel
from .book import Book, CreateBook
from .types import BookId

__all__ = ["Book", "BookId", "CreateBook", "DomainModel"]
