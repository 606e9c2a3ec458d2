"""Custom persistence exceptions."""

from __future__ import annotations


class RepositoryError(RuntimeError):
    """Base class for persistence layer errors."""


class SpecificOperationError(RepositoryError):
    """Raised when a storage call behind a repository operation fails.

    The original exception is kept on ``cause`` and chained as ``__cause__``.
    """

    def __init__(self, operation: str, cause: BaseException) -> None:
        super().__init__(f"{operation} failed: {cause}")
        self.operation = operation
        self.cause = cause


__all__ = ["RepositoryError", "SpecificOperationError"]
