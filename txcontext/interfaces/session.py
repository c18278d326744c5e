"""
Session Interfaces
==================

Capability protocols for the objects the transaction helpers work with.

- ``TransactionSession``: an open database session that can run one
  transaction. Motor's ``AsyncIOMotorClientSession`` and
  ``SqlAlchemyTransactionSession`` both satisfy it.
- ``SessionSource``: anything that can open a ``TransactionSession``.
  Motor's ``AsyncIOMotorClient`` satisfies it.

Runtime checks go through `is_transaction_session` / `is_session_source`,
which only accept methods defined on the object's class. Motor clients,
databases and collections answer every attribute name through
``__getattr__`` (``client.anything`` is a database), so a plain
``isinstance`` against the protocols would match them.
Methods may return plain values or awaitables; callers await whatever is
awaitable.
"""

import inspect
from typing import Any, Iterable, Protocol, runtime_checkable

TRANSACTION_SESSION_METHODS = ("start_transaction", "commit_transaction", "abort_transaction", "end_session")
SESSION_SOURCE_METHODS = ("start_session",)


@runtime_checkable
class TransactionSession(Protocol):
    """An open session able to start, commit and abort one transaction."""

    def start_transaction(self) -> Any:
        ...

    def commit_transaction(self) -> Any:
        ...

    def abort_transaction(self) -> Any:
        ...

    def end_session(self) -> Any:
        ...


@runtime_checkable
class SessionSource(Protocol):
    """A connection able to open new sessions."""

    def start_session(self) -> Any:
        ...


def implements(value: Any, methods: Iterable[str]) -> bool:
    """
    Check that the class of ``value`` defines every name in ``methods`` as a
    method, ignoring attributes produced by ``__getattr__``.

    Parameters
    ----------
    value : Any
        Object to inspect.
    methods : iterable of str
        Method names that must be present.

    Returns
    -------
    bool
        True if every method is statically defined and callable.
    """
    cls = type(value)
    for name in methods:
        attribute = inspect.getattr_static(cls, name, None)
        if attribute is None:
            return False
        if not (callable(attribute) or isinstance(attribute, (staticmethod, classmethod))):
            return False
    return True


def is_transaction_session(value: Any) -> bool:
    return implements(value, TRANSACTION_SESSION_METHODS)


def is_session_source(value: Any) -> bool:
    return implements(value, SESSION_SOURCE_METHODS)
