"""
The `interfaces` package defines the protocols the transaction helpers
rely on instead of concrete driver classes.

Contents
--------
- session
    - `TransactionSession`: start / commit / abort / end of one transaction
    - `SessionSource`: opens new `TransactionSession` objects
    - `is_transaction_session`, `is_session_source`: class-level capability checks
- logger
    - `TransactionalLogger`: `set_context`, `warn`, `error` sink
    - `is_transactional_logger`: class-level capability check
"""

from txcontext.interfaces.logger import TransactionalLogger, is_transactional_logger
from txcontext.interfaces.session import (
    SessionSource,
    TransactionSession,
    implements,
    is_session_source,
    is_transaction_session,
)

__all__ = [
    "SessionSource",
    "TransactionSession",
    "TransactionalLogger",
    "implements",
    "is_session_source",
    "is_transaction_session",
    "is_transactional_logger",
]
