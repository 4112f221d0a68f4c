"""Session-backed transaction handle for multi-row writes."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from newsroom.application.interfaces import TransactionFactory, TransactionHandle
from newsroom.infrastructure.database.repositories import (
    SQLAlchemyArticleRepository,
    SQLAlchemyThumbnailRepository,
)

logger = logging.getLogger(__name__)


class SQLAlchemyTransaction(TransactionHandle):
    """Owns one AsyncSession for the lifetime of a single transaction.

    The session autobegins on the first write. ``release`` closes the
    session, returning its connection to the pool.
    """

    def __init__(self, session: AsyncSession):
        self._session = session
        self.thumbnails = SQLAlchemyThumbnailRepository(session)
        self.articles = SQLAlchemyArticleRepository(session)

    async def commit(self) -> None:
        await self._session.commit()

    async def rollback(self) -> None:
        logger.warning("Rolling back transaction")
        await self._session.rollback()

    async def release(self) -> None:
        await self._session.close()


def make_transaction_factory(
    session_factory: async_sessionmaker[AsyncSession],
) -> TransactionFactory:
    """Return a factory that opens a fresh transaction per call."""

    def _open() -> SQLAlchemyTransaction:
        return SQLAlchemyTransaction(session_factory())

    return _open
