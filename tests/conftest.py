"""Test infrastructure: a throwaway SQLite database per test.

aiosqlite stands in for asyncpg so the suite needs no server. The pysqlite
driver's implicit transaction handling is switched off and BEGIN is emitted
explicitly, which SQLAlchemy requires for SAVEPOINT support on SQLite.
"""

from collections.abc import AsyncGenerator

import pytest_asyncio
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from members import Member
from sqla_crud.infrastructure.database import Base


@pytest_asyncio.fixture
async def engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'crud.db'}")

    @event.listens_for(engine.sync_engine, "connect")
    def _disable_driver_transactions(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _emit_begin(conn):
        conn.exec_driver_sql("BEGIN")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def seeded(session_factory) -> list[Member]:
    """Two committed members: {1, "a"} and {2, "b"}."""
    rows = [Member(id=1, name="a", email="a@example.com"), Member(id=2, name="b")]
    async with session_factory() as session:
        async with session.begin():
            session.add_all(rows)
    return rows
