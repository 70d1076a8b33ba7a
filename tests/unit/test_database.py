"""Unit tests for sqla_crud/infrastructure/database.py.

Tests cover Settings defaults, env var override, and object types.
No database connection is required.
"""

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

from sqla_crud.infrastructure.database import AsyncSessionLocal, Base, Settings, engine, get_session


def test_settings_default_url_uses_asyncpg(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    assert "postgresql+asyncpg" in Settings(_env_file=None).database_url


def test_settings_default_url_targets_localhost(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    assert "localhost" in Settings(_env_file=None).database_url


def test_settings_reads_database_url_from_env(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://u:p@myhost/mydb")
    assert Settings().database_url == "postgresql+asyncpg://u:p@myhost/mydb"


def test_settings_echo_defaults_off(monkeypatch):
    monkeypatch.delenv("DATABASE_ECHO", raising=False)
    assert Settings(_env_file=None).database_echo is False


def test_settings_reads_log_level_from_env(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    assert Settings().log_level == "DEBUG"


def test_base_is_declarative_base():
    assert issubclass(Base, DeclarativeBase)


def test_engine_is_async():
    assert isinstance(engine, AsyncEngine)


def test_session_factory_produces_async_sessions():
    assert isinstance(AsyncSessionLocal, async_sessionmaker)
    assert AsyncSessionLocal.class_ is AsyncSession


def test_session_factory_keeps_attributes_after_commit():
    assert AsyncSessionLocal.kw["expire_on_commit"] is False


def test_get_session_is_async_generator():
    assert hasattr(get_session(), "__anext__")
