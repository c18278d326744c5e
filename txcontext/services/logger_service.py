"""
Transactional Logger Service
============================

Adapters between the transaction helpers and whatever logger the host
application uses.

- ``StdlibTransactionalLogger``: default sink, writes to a ``logging.Logger``
  and carries the context name and meta in ``extra``.
- ``TransactionalLoggerService``: wraps any ``TransactionalLogger``. Calls are
  fire-and-forget: a failing sink is reported on this module's logger and
  never reaches the code being logged about.
"""

import logging
from typing import Any, Mapping, Optional, Union

from txcontext.config.config import settings
from txcontext.interfaces.logger import TransactionalLogger

logger = logging.getLogger(__name__)


class StdlibTransactionalLogger:
    """`TransactionalLogger` backed by the standard ``logging`` module."""

    def __init__(self, name: Optional[str] = None):
        self._logger = logging.getLogger(name or settings.TRANSACTIONAL_LOGGER_NAME)
        self.context = settings.TRANSACTIONAL_LOGGER_CONTEXT

    def set_context(self, context: str) -> None:
        self.context = context

    def warn(
        self,
        method: str,
        message: Union[str, Mapping[str, Any], list],
        meta: Optional[Union[str, Mapping[str, Any]]] = None,
    ) -> None:
        self._logger.warning(
            "[%s.%s] %s", self.context, method, message,
            extra={"context": self.context, "method": method, "meta": meta},
        )

    def error(
        self,
        method: str,
        error: Union[str, BaseException, Any],
        meta: Optional[Union[str, Mapping[str, Any], BaseException]] = None,
    ) -> None:
        exc_info = error if isinstance(error, BaseException) else None
        self._logger.error(
            "[%s.%s] %s", self.context, method, error,
            exc_info=exc_info,
            extra={"context": self.context, "method": method, "meta": meta},
        )


class TransactionalLoggerService:
    """
    Logger used by `@transactional` to report events.

    Parameters
    ----------
    logger : TransactionalLogger
        The sink supplied by the host application.
    """

    def __init__(self, logger: TransactionalLogger):
        self.logger = logger

    def set_context(self, context: Optional[str] = None) -> None:
        self._call("set_context", context or settings.TRANSACTIONAL_LOGGER_CONTEXT)

    def warn(
        self,
        method: str,
        message: Union[str, Mapping[str, Any], list],
        meta: Optional[Union[str, Mapping[str, Any]]] = None,
    ) -> None:
        self._call("warn", method, message, meta)

    def error(
        self,
        method: str,
        error: Union[str, BaseException, Any],
        meta: Optional[Union[str, Mapping[str, Any], BaseException]] = None,
    ) -> None:
        self._call("error", method, error, meta)

    def _call(self, name: str, *args: Any) -> None:
        try:
            getattr(self.logger, name)(*args)
        except Exception:
            logger.exception("Transactional logger %r failed in %s()", self.logger, name)
