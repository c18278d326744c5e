"""
The `services` package provides injectable helpers used by the decorators.

Contents
--------
- logger_service
    - `StdlibTransactionalLogger`: default sink on top of ``logging``
    - `TransactionalLoggerService`: fire-and-forget wrapper around any sink
"""

from txcontext.services.logger_service import StdlibTransactionalLogger, TransactionalLoggerService

__all__ = ["StdlibTransactionalLogger", "TransactionalLoggerService"]
