"""
The `adapters` package makes non-MongoDB drivers usable as session sources.

Contents
--------
- sqlalchemy_session
    - `SqlAlchemySessionSource`: opens `AsyncSession` objects per transaction
    - `SqlAlchemyTransactionSession`: begin / commit / rollback / close mapping
"""

from txcontext.adapters.sqlalchemy_session import SqlAlchemySessionSource, SqlAlchemyTransactionSession

__all__ = ["SqlAlchemySessionSource", "SqlAlchemyTransactionSession"]
