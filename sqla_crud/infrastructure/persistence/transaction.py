"""Scoped transaction blocks for mutating operations."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import SessionTransactionOrigin


@asynccontextmanager
async def transactional(session: AsyncSession) -> AsyncIterator[AsyncSession]:
    """Run the enclosed block in a transaction on session.

    Three cases, decided by who opened the session's current transaction:

    - none open: a new one is begun, committed on clean exit and rolled back
      when the block raises.
    - autobegun by an earlier read: nobody else will commit it, so it is
      committed (or rolled back) at the end of the block like a new one.
    - begun explicitly by the caller (session.begin(), e.g. get_session): the
      block runs in a SAVEPOINT. A failure rolls back only the block's own
      work and the caller stays responsible for the final commit.
    """
    transaction = session.sync_session.get_transaction()
    if transaction is None:
        async with session.begin():
            yield session
    elif transaction.origin is SessionTransactionOrigin.AUTOBEGIN:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
    else:
        async with session.begin_nested():
            yield session
