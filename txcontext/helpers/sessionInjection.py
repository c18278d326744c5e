"""
Session Argument Injection
==========================

``@add_session_to_last_arguments`` passes the active transaction session to
a function whose last parameter is the session, so callers don't have to.

- If the caller already passed a session (positionally or by keyword), the
  call is left untouched.
- Otherwise the session from ``session_storage`` is bound to the last
  parameter, if a transaction is active.
- Outside a transaction the function is called as is; it must accept a
  missing session.

The decorator manages no transaction itself and works on sync and async
functions, with or without ``@transactional`` around them.

Example
-------
>>> class OrderRepository:
...     @add_session_to_last_arguments
...     async def insert(self, order, session=None):
...         await self.collection.insert_one(order, session=session)
...
>>> await repository.insert(order)             # session injected if active
>>> await repository.insert(order, my_session) # explicit session wins
"""

import inspect
from functools import wraps
from typing import Any, Callable, Optional

from txcontext.interfaces.session import is_transaction_session
from txcontext.storages.transactional_session_storage import session_storage


def _has_explicit_session(args: tuple, kwargs: dict) -> bool:
    return any(is_transaction_session(value) for value in (*args, *kwargs.values()))


def _last_parameter(signature: inspect.Signature) -> Optional[inspect.Parameter]:
    parameters = [p for p in signature.parameters.values() if p.kind is not inspect.Parameter.VAR_KEYWORD]
    return parameters[-1] if parameters else None


def _fill_positional(signature: inspect.Signature, target: inspect.Parameter, args: tuple, session: Any) -> tuple:
    """Pad omitted positional defaults so ``session`` lands in the ``target`` slot."""
    parameters = list(signature.parameters.values())
    leading = parameters[: parameters.index(target)]
    filled = list(args)
    for parameter in leading[len(args):]:
        if parameter.default is inspect.Parameter.empty:
            # Let the real call raise the missing argument
            return args
        filled.append(parameter.default)
    return (*filled, session)


def _bind_session(signature: inspect.Signature, args: tuple, kwargs: dict) -> tuple:
    """Return ``(args, kwargs)`` with the active session bound to the last parameter."""
    session = session_storage.get_session()
    if session is None:
        return args, kwargs

    target = _last_parameter(signature)
    if target is None:
        return args, kwargs
    if target.kind is inspect.Parameter.VAR_POSITIONAL:
        return (*args, session), kwargs

    try:
        bound = signature.bind_partial(*args, **kwargs)
    except TypeError:
        # Let the real call raise the argument error
        return args, kwargs
    if target.name in bound.arguments:
        return args, kwargs
    if target.kind is inspect.Parameter.POSITIONAL_ONLY:
        return _fill_positional(signature, target, args, session), kwargs
    return args, {**kwargs, target.name: session}


def add_session_to_last_arguments(func: Optional[Callable] = None) -> Callable:
    """
    Decorator that supplies the active session as the last argument.

    Parameters
    ----------
    func : callable, optional
        Function whose last declared parameter receives the session.
        ``@add_session_to_last_arguments()`` is accepted too.

    Returns
    -------
    callable
        The wrapped function, async if ``func`` is async.
    """

    def decorator(method: Callable) -> Callable:
        signature = inspect.signature(method)

        if inspect.iscoroutinefunction(method):
            @wraps(method)
            async def async_wrap_func(*args, **kwargs):
                if not _has_explicit_session(args, kwargs):
                    args, kwargs = _bind_session(signature, args, kwargs)
                return await method(*args, **kwargs)

            return async_wrap_func

        @wraps(method)
        def wrap_func(*args, **kwargs):
            if not _has_explicit_session(args, kwargs):
                args, kwargs = _bind_session(signature, args, kwargs)
            return method(*args, **kwargs)

        return wrap_func

    if func is not None:
        return decorator(func)
    return decorator
