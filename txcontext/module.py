"""
Transactional Module
====================

Wires an observability sink into the transaction helpers.

``TransactionalModule.for_root`` builds a ``TransactionalLoggerService``
around the configured logger class. A global module installs it as the
default logger for every ``@transactional`` method; a local module attaches
it only to the instances passed to ``provide``.

Example
-------
>>> TransactionalModule.for_root(
...     TransactionalModuleOptions(inject_logger_class=MyAppLogger)
... )
"""

import logging
from typing import Any, Callable, ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field

from txcontext.config.config import settings
from txcontext.interfaces.logger import TransactionalLogger, is_transactional_logger
from txcontext.services.logger_service import StdlibTransactionalLogger, TransactionalLoggerService

logger = logging.getLogger(__name__)

LOGGER_ATTRIBUTE = "transactional_logger"
"""Receiver attribute consulted by `@transactional` for a per-instance logger."""


class TransactionalModuleOptions(BaseModel):
    """Options accepted by `TransactionalModule.for_root`."""

    model_config = ConfigDict(arbitrary_types_allowed=True, populate_by_name=True)

    global_: bool = Field(
        default_factory=lambda: settings.TRANSACTIONAL_GLOBAL,
        alias="global",
        description="Install the logger for every transactional method.",
    )
    inject_logger_class: Callable[[], TransactionalLogger] = Field(
        StdlibTransactionalLogger,
        description="Zero-argument factory producing the logger sink.",
    )


class TransactionalModule:
    """Holds the logger service built from `TransactionalModuleOptions`."""

    _global_logger: ClassVar[Optional[TransactionalLoggerService]] = None

    def __init__(self, logger_service: TransactionalLoggerService, is_global: bool):
        self.logger = logger_service
        self.is_global = is_global

    @classmethod
    def for_root(cls, options: Optional[TransactionalModuleOptions] = None) -> "TransactionalModule":
        options = options or TransactionalModuleOptions()
        sink = options.inject_logger_class()
        if not is_transactional_logger(sink):
            raise TypeError(f"{type(sink).__name__} does not implement set_context/warn/error")

        module = cls(TransactionalLoggerService(sink), options.global_)
        if module.is_global:
            cls._global_logger = module.logger
            logger.debug("Installed global transactional logger %s", type(sink).__name__)
        return module

    def provide(self, instance: Any) -> Any:
        """Attach this module's logger to ``instance`` and return it."""
        setattr(instance, LOGGER_ATTRIBUTE, self.logger)
        return instance

    @classmethod
    def get_global_logger(cls) -> Optional[TransactionalLoggerService]:
        return cls._global_logger

    @classmethod
    def reset(cls) -> None:
        """Remove the globally installed logger."""
        cls._global_logger = None
