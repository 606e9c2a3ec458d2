from __future__ import annotations

import pytest

from bookshelf.config import AppSettings


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "BOOKSHELF_ENV",
        "BOOKSHELF_DATABASE_URL",
        "BOOKSHELF_POOL_SIZE",
        "BOOKSHELF_POOL_MAX_OVERFLOW",
        "BOOKSHELF_POOL_TIMEOUT",
        "BOOKSHELF_SQL_ECHO",
        "BOOKSHELF_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = AppSettings.from_env()

    assert settings == AppSettings()
    assert settings.database_url == "sqlite+aiosqlite:///bookshelf.db"


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BOOKSHELF_ENV", "production")
    monkeypatch.setenv("BOOKSHELF_DATABASE_URL", "postgresql+asyncpg://app@db/books")
    monkeypatch.setenv("BOOKSHELF_POOL_SIZE", "20")
    monkeypatch.setenv("BOOKSHELF_POOL_MAX_OVERFLOW", "0")
    monkeypatch.setenv("BOOKSHELF_POOL_TIMEOUT", "2.5")
    monkeypatch.setenv("BOOKSHELF_SQL_ECHO", "yes")
    monkeypatch.setenv("BOOKSHELF_LOG_LEVEL", "debug")

    settings = AppSettings.from_env()

    assert settings.environment == "production"
    assert settings.database_url == "postgresql+asyncpg://app@db/books"
    assert settings.pool_size == 20
    assert settings.pool_max_overflow == 0
    assert settings.pool_timeout == 2.5
    assert settings.sql_echo is True
    assert settings.log_level == "DEBUG"


def test_settings_echo_can_be_disabled(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BOOKSHELF_SQL_ECHO", "false")
    assert AppSettings.from_env().sql_echo is False
