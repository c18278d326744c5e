"""
SQLAlchemy Session Adapter
==========================

Lets ``@transactional`` drive a SQLAlchemy ``AsyncSession`` the same way it
drives a MongoDB client session.

- ``SqlAlchemySessionSource`` opens one ``AsyncSession`` per transaction
  from an ``async_sessionmaker``.
- ``SqlAlchemyTransactionSession`` maps the transaction calls onto it:
  start → ``begin()``, commit → ``commit()``, abort → ``rollback()``,
  end → ``close()``.

Queries use the wrapped ``AsyncSession`` through the ``session`` attribute.

Example
-------
>>> class UserService:
...     def __init__(self, source: SqlAlchemySessionSource):
...         self.connection = source
...
...     @transactional
...     async def rename(self, user_id, name):
...         await self.update_name(user_id, name)
...
...     @add_session_to_last_arguments
...     async def update_name(self, user_id, name, tx=None):
...         user = await tx.session.get(User, user_id)
...         user.name = name
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

logger = logging.getLogger(__name__)


class SqlAlchemyTransactionSession:
    """Transaction handle around one ``AsyncSession``."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def start_transaction(self) -> None:
        await self.session.begin()

    async def commit_transaction(self) -> None:
        await self.session.commit()

    async def abort_transaction(self) -> None:
        await self.session.rollback()

    async def end_session(self) -> None:
        await self.session.close()


class SqlAlchemySessionSource:
    """
    Session source backed by an ``async_sessionmaker``.

    Parameters
    ----------
    session_factory : async_sessionmaker
        Factory bound to the application's async Engine.
    """

    def __init__(self, session_factory: async_sessionmaker):
        self.session_factory = session_factory

    async def start_session(self) -> SqlAlchemyTransactionSession:
        logger.debug("Opening SQLAlchemy session")
        return SqlAlchemyTransactionSession(self.session_factory())

    async def dispose(self) -> None:
        """Dispose of the Engine behind the session factory."""
        engine = self.session_factory.kw.get("bind")
        if engine is not None:
            await engine.dispose()
