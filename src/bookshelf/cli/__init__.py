"""Command-line interface for the bookshelf."""
