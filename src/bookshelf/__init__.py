"""Bookshelf: book persistence behind a repository contract."""

__version__ = "0.1.0"
