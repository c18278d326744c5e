"""
Logger Interface
================

Protocol for the observability sink that ``@transactional`` reports to.

Methods
-------
- ``set_context(context)``: name of the class the next events belong to
- ``warn(method, message, meta)``: a method ran without a transaction
- ``error(method, error, meta)``: a unit of work or a finalization step failed

`is_transactional_logger` checks the methods on the object's class, the
same way the session checks in `txcontext.interfaces.session` do.
"""

from typing import Any, Mapping, Optional, Protocol, Union, runtime_checkable

from txcontext.interfaces.session import implements

TRANSACTIONAL_LOGGER_METHODS = ("set_context", "warn", "error")


@runtime_checkable
class TransactionalLogger(Protocol):
    """Observability sink for transaction warnings and errors."""

    def set_context(self, context: str) -> None:
        ...

    def warn(
        self,
        method: str,
        message: Union[str, Mapping[str, Any], list],
        meta: Optional[Union[str, Mapping[str, Any]]] = None,
    ) -> None:
        ...

    def error(
        self,
        method: str,
        error: Union[str, BaseException, Any],
        meta: Optional[Union[str, Mapping[str, Any], BaseException]] = None,
    ) -> None:
        ...


def is_transactional_logger(value: Any) -> bool:
    return implements(value, TRANSACTIONAL_LOGGER_METHODS)
