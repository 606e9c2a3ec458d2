"""Persistence package exports."""

from .errors import RepositoryError, SpecificOperationError
from .interfaces import BookRepository
from .memory import InMemoryBookRepository

__all__ = [
    "BookRepository",
    "InMemoryBookRepository",
    "RepositoryError",
    "SpecificOperationError",
]
