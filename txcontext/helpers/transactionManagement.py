"""
Database Transaction Management
===============================

This module provides the ``@transactional`` decorator, which wraps an async
method in a database transaction unless the current call chain already runs
inside one.

The session opened by the outermost decorated call is published through
``session_storage`` (a context variable), so nested calls can reach it
without threading it through arguments. Use ``@add_session_to_last_arguments``
on the methods that need the session as a parameter, or read it with
``session_storage.get_session()``.

Key features
~~~~~~~~~~~~
- One transaction per call chain, however deeply decorated methods nest
- Commit on success, abort on any exception, original exception re-raised
- Session always ended exactly once
- Falls back to plain execution when the receiver has no usable connection

Requirements
~~~~~~~~~~~~
The receiver must hold a session source (e.g. a Motor client) in the
attribute named by ``settings.TRANSACTIONAL_CONNECTION_ATTRIBUTE``
(``connection`` by default), or in the attribute passed as
``connection_attr``. MongoDB only supports transactions on replica sets.

Example
-------
>>> class OrderService:
...     def __init__(self, client):
...         self.connection = client
...
...     @transactional
...     async def place_order(self, order):
...         await self.save_order(order)
...         await self.reserve_stock(order)
...
...     @add_session_to_last_arguments
...     async def save_order(self, order, session=None):
...         await orders.insert_one(order, session=session)
"""

import inspect
import logging
from functools import wraps
from typing import Any, Callable, Optional

from txcontext.config.config import settings
from txcontext.interfaces.logger import TransactionalLogger
from txcontext.interfaces.session import SessionSource, TransactionSession, is_session_source
from txcontext.module import LOGGER_ATTRIBUTE, TransactionalModule
from txcontext.services.logger_service import TransactionalLoggerService
from txcontext.storages.transactional_session_storage import session_storage

logger = logging.getLogger(__name__)


async def _resolve(value: Any) -> Any:
    """Await ``value`` if the driver returned an awaitable."""
    if inspect.isawaitable(value):
        return await value
    return value


def _resolve_logger(receiver: Any, explicit: Optional[TransactionalLogger]) -> Optional[TransactionalLoggerService]:
    candidate = explicit or getattr(receiver, LOGGER_ATTRIBUTE, None) or TransactionalModule.get_global_logger()
    if candidate is None or isinstance(candidate, TransactionalLoggerService):
        return candidate
    return TransactionalLoggerService(candidate)


def _report(receiver: Any, explicit: Optional[TransactionalLogger], level: str, method_name: str, *payload: Any) -> None:
    event_logger = _resolve_logger(receiver, explicit)
    if event_logger is None:
        return
    event_logger.set_context(type(receiver).__name__)
    getattr(event_logger, level)(method_name, *payload)


async def _abort(receiver: Any, explicit: Optional[TransactionalLogger], method_name: str, session: TransactionSession) -> None:
    try:
        await _resolve(session.abort_transaction())
        logger.debug("Aborted transaction for %s.%s", type(receiver).__name__, method_name)
    except BaseException as abort_error:
        # The unit-of-work error is re-raised by the caller
        logger.warning("abort_transaction failed for %s.%s: %r", type(receiver).__name__, method_name, abort_error)
        _report(receiver, explicit, "error", method_name, abort_error, {"phase": "abort_transaction"})


async def _run_in_transaction(
    receiver: Any,
    connection: SessionSource,
    method: Callable,
    args: tuple,
    kwargs: dict,
    explicit: Optional[TransactionalLogger],
) -> Any:
    method_name = method.__name__
    session: TransactionSession = await _resolve(connection.start_session())
    token = session_storage.set_session(session)
    failed = False
    try:
        await _resolve(session.start_transaction())
        logger.debug("Started transaction for %s.%s", type(receiver).__name__, method_name)

        try:
            result = await method(receiver, *args, **kwargs)
        except BaseException as error:
            _report(receiver, explicit, "error", method_name, error, {"args": args, "kwargs": kwargs})
            await _abort(receiver, explicit, method_name, session)
            raise

        try:
            await _resolve(session.commit_transaction())
        except BaseException as commit_error:
            _report(receiver, explicit, "error", method_name, commit_error, {"phase": "commit_transaction"})
            raise
        logger.debug("Committed transaction for %s.%s", type(receiver).__name__, method_name)
        return result
    except BaseException:
        failed = True
        raise
    finally:
        session_storage.reset_session(token)
        try:
            await _resolve(session.end_session())
        except BaseException as end_error:
            if not failed:
                raise
            # An earlier failure is already propagating
            logger.warning("end_session failed for %s.%s: %r", type(receiver).__name__, method_name, end_error)
            _report(receiver, explicit, "error", method_name, end_error, {"phase": "end_session"})


def transactional(
    func: Optional[Callable] = None,
    *,
    connection_attr: Optional[str] = None,
    transactional_logger: Optional[TransactionalLogger] = None,
) -> Callable:
    """
    Decorator to wrap an async method in a managed database transaction.

    Ensures that:
    - If a session is already active for the call chain, the method simply
      runs inside it (the outer call commits or aborts).
    - Otherwise, a new session is started, a transaction is begun, committed
      on success or aborted on failure, and the session is ended.
    - If the receiver has no valid connection, the method runs without a
      transaction and a warning is reported.

    Parameters
    ----------
    func : callable, optional
        The coroutine function to wrap. Omit it to configure the decorator:
        ``@transactional(connection_attr="mongo_client")``.
    connection_attr : str, optional
        Receiver attribute holding the session source. Defaults to
        ``settings.TRANSACTIONAL_CONNECTION_ATTRIBUTE``.
    transactional_logger : TransactionalLogger, optional
        Sink for warnings and errors. Defaults to the receiver's
        ``transactional_logger`` attribute, then the global module logger.

    Returns
    -------
    callable
        The wrapped coroutine function.

    Raises
    ------
    TypeError
        If the decorated function is not a coroutine function.
    """

    def decorator(method: Callable) -> Callable:
        if not inspect.iscoroutinefunction(method):
            raise TypeError(f"@transactional requires an async function, got {method!r}")

        @wraps(method)
        async def wrap_func(self, *args, **kwargs):
            attribute = connection_attr or settings.TRANSACTIONAL_CONNECTION_ATTRIBUTE
            connection = getattr(self, attribute, None)
            if not is_session_source(connection):
                _report(
                    self, transactional_logger, "warn", method.__name__,
                    f"No valid connection in attribute '{attribute}'; running without a transaction",
                )
                return await method(self, *args, **kwargs)

            # Already inside a transaction: the owning call finalizes it
            if session_storage.get_session() is not None:
                return await method(self, *args, **kwargs)

            return await _run_in_transaction(self, connection, method, args, kwargs, transactional_logger)

        return wrap_func

    if func is not None:
        return decorator(func)
    return decorator
