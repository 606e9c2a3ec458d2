"""Shared CLI dependency helpers."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

from bookshelf.config import AppSettings
from bookshelf.container import ServiceContainer, build_container


@lru_cache(maxsize=1)
def get_container() -> ServiceContainer:
    """Return a cached service container for CLI commands."""

    env_path = Path.cwd() / ".env"
    if env_path.exists():
        load_dotenv(env_path)
    settings = AppSettings.from_env()
    return build_container(settings)


def reset_container() -> None:
    """Clear the cached container (useful for tests)."""

    get_container.cache_clear()
