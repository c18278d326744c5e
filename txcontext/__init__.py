"""
The `txcontext` package coordinates database transactions across nested
async service calls without passing the session through every signature.

Contents:
    - storages:
        Call-chain-scoped storage of the active session (`session_storage`).

    - helpers:
        `@transactional` opens, commits/aborts and ends at most one
        transaction per call chain; `@add_session_to_last_arguments` hands
        the active session to functions that take it as their last argument.

    - interfaces:
        Protocols for sessions, session sources and loggers.

    - services:
        Logger adapters used to report transaction warnings and errors.

    - module:
        `TransactionalModule.for_root` wiring for the logger.

    - adapters:
        SQLAlchemy async sessions as transaction sessions.

    - config:
        Environment-driven settings and connection factories.
"""

from txcontext.adapters.sqlalchemy_session import SqlAlchemySessionSource, SqlAlchemyTransactionSession
from txcontext.helpers.sessionInjection import add_session_to_last_arguments
from txcontext.helpers.transactionManagement import transactional
from txcontext.interfaces import SessionSource, TransactionalLogger, TransactionSession
from txcontext.module import TransactionalModule, TransactionalModuleOptions
from txcontext.services.logger_service import StdlibTransactionalLogger, TransactionalLoggerService
from txcontext.storages.transactional_session_storage import TransactionalSessionStorage, session_storage

__all__ = [
    "SessionSource",
    "SqlAlchemySessionSource",
    "SqlAlchemyTransactionSession",
    "StdlibTransactionalLogger",
    "TransactionSession",
    "TransactionalLogger",
    "TransactionalLoggerService",
    "TransactionalModule",
    "TransactionalModuleOptions",
    "TransactionalSessionStorage",
    "add_session_to_last_arguments",
    "session_storage",
    "transactional",
]
