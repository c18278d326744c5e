"""
Transactional Session Storage
=============================

Holds the transaction session that is active for the current call chain.

The slot is a ``contextvars.ContextVar``, so the value follows the logical
chain of calls rather than the thread or the call stack:

- a coroutine sees the session set by any coroutine that awaited it, even
  after suspending and resuming;
- tasks created with ``asyncio.create_task`` / ``asyncio.gather`` start
  with a snapshot of the parent's value, and their own writes stay local;
- unrelated tasks (e.g. two concurrent requests) never see each other's
  session.

Example
-------
>>> from txcontext import session_storage
>>> session = session_storage.get_session()   # None outside a transaction
"""

import contextvars
from typing import Optional

from txcontext.interfaces.session import TransactionSession

# --------------------------------------------------------------------
# Context variable to store the session of the running transaction.
# --------------------------------------------------------------------
transactional_session_context: contextvars.ContextVar[Optional[TransactionSession]] = contextvars.ContextVar(
    "transactional_session_context", default=None
)
"""Context variable storing the active transaction session."""


class TransactionalSessionStorage:
    """Chain-scoped accessor for the active transaction session."""

    def __init__(self, variable: contextvars.ContextVar = transactional_session_context):
        self._variable = variable

    def get_session(self) -> Optional[TransactionSession]:
        """
        Return the session visible to the current call chain.

        Returns
        -------
        TransactionSession or None
            The active session, or None if no transaction is open.
        """
        return self._variable.get()

    def set_session(self, session: TransactionSession) -> contextvars.Token:
        """
        Make ``session`` the active session for the current call chain and
        everything it calls from now on.

        Returns
        -------
        contextvars.Token
            Token for `reset_session`. Callers that never restore the
            previous value may ignore it.
        """
        return self._variable.set(session)

    def reset_session(self, token: contextvars.Token) -> None:
        """Restore the value the slot had before the matching `set_session`."""
        self._variable.reset(token)


session_storage = TransactionalSessionStorage()
"""Package-wide storage instance shared by the decorators."""
