"""Logger service and module wiring tests."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from tests.fakes import RecordingLogger
from txcontext.module import TransactionalModule, TransactionalModuleOptions
from txcontext.services.logger_service import StdlibTransactionalLogger, TransactionalLoggerService


class TestStdlibTransactionalLogger:
    """Default sink on top of ``logging``."""

    def test_warn_includes_context_and_meta(self, caplog: pytest.LogCaptureFixture) -> None:
        sink = StdlibTransactionalLogger("txcontext.test")
        sink.set_context("OrderService")

        with caplog.at_level(logging.WARNING, logger="txcontext.test"):
            sink.warn("place_order", "no connection", {"attribute": "connection"})

        record = caplog.records[0]
        assert record.levelno == logging.WARNING
        assert "[OrderService.place_order] no connection" in record.getMessage()
        assert record.meta == {"attribute": "connection"}

    def test_error_attaches_exception(self, caplog: pytest.LogCaptureFixture) -> None:
        sink = StdlibTransactionalLogger("txcontext.test")
        error = ValueError("boom")

        with caplog.at_level(logging.ERROR, logger="txcontext.test"):
            sink.error("place_order", error)

        record = caplog.records[0]
        assert record.exc_info[1] is error
        assert record.context == "TransactionalLogger"


class TestTransactionalLoggerService:
    """Fire-and-forget wrapper."""

    def test_delegates(self) -> None:
        sink = RecordingLogger()
        service = TransactionalLoggerService(sink)

        service.set_context("Svc")
        service.warn("m", "msg")
        service.error("m", "err", {"k": 1})

        assert sink.contexts == ["Svc"]
        assert sink.warnings == [("m", "msg", None)]
        assert sink.errors == [("m", "err", {"k": 1})]

    def test_default_context(self) -> None:
        sink = RecordingLogger()

        TransactionalLoggerService(sink).set_context()

        assert sink.contexts == ["TransactionalLogger"]

    def test_sink_failure_is_logged_not_raised(self, caplog: pytest.LogCaptureFixture) -> None:
        class Broken(RecordingLogger):
            def error(self, method, error, meta=None):
                raise RuntimeError("sink down")

        with caplog.at_level(logging.ERROR, logger="txcontext.services.logger_service"):
            TransactionalLoggerService(Broken()).error("m", "err")

        assert "failed in error()" in caplog.text


class TestTransactionalModule:
    """for_root wiring."""

    def test_global_module_installs_logger(self) -> None:
        module = TransactionalModule.for_root(TransactionalModuleOptions(inject_logger_class=RecordingLogger))

        assert module.is_global
        assert TransactionalModule.get_global_logger() is module.logger
        assert isinstance(module.logger.logger, RecordingLogger)

    def test_local_module_provides_per_instance(self) -> None:
        module = TransactionalModule.for_root(
            TransactionalModuleOptions(**{"global": False, "inject_logger_class": RecordingLogger})
        )

        class Service:
            pass

        service = module.provide(Service())

        assert TransactionalModule.get_global_logger() is None
        assert service.transactional_logger is module.logger

    def test_default_options_use_stdlib_logger(self) -> None:
        module = TransactionalModule.for_root()

        assert isinstance(module.logger.logger, StdlibTransactionalLogger)

    def test_rejects_logger_without_protocol(self) -> None:
        class NotALogger:
            pass

        with pytest.raises(TypeError):
            TransactionalModule.for_root(TransactionalModuleOptions(inject_logger_class=NotALogger))

    def test_rejects_non_callable_logger_class(self) -> None:
        with pytest.raises(ValidationError):
            TransactionalModuleOptions(inject_logger_class="logger")

    def test_reset(self) -> None:
        TransactionalModule.for_root()

        TransactionalModule.reset()

        assert TransactionalModule.get_global_logger() is None
