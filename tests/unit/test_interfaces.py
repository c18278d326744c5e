"""Capability check tests."""

from __future__ import annotations

import pytest
from motor.motor_asyncio import AsyncIOMotorClient

from tests.fakes import FakeConnection, FakeSession, RecordingLogger
from txcontext.interfaces import (
    is_session_source,
    is_transaction_session,
    is_transactional_logger,
)


class TestFakes:
    def test_fake_session(self) -> None:
        assert is_transaction_session(FakeSession("s1", []))
        assert not is_session_source(FakeSession("s1", []))

    def test_fake_connection(self) -> None:
        assert is_session_source(FakeConnection())
        assert not is_transaction_session(FakeConnection())

    def test_recording_logger(self) -> None:
        assert is_transactional_logger(RecordingLogger())

    def test_plain_values(self) -> None:
        for value in (None, "mongodb://localhost", {"a": 1}, 42):
            assert not is_session_source(value)
            assert not is_transaction_session(value)
            assert not is_transactional_logger(value)

    def test_non_callable_attribute_is_rejected(self) -> None:
        class Pretender:
            start_session = "not a method"

        assert not is_session_source(Pretender())


class TestMotorObjects:
    """Motor answers any attribute name, only real methods count."""

    @pytest.mark.asyncio
    async def test_client_is_a_session_source(self, motor_client: AsyncIOMotorClient) -> None:
        assert is_session_source(motor_client)
        assert not is_transaction_session(motor_client)

    @pytest.mark.asyncio
    async def test_database_is_not_a_session_source(self, motor_client: AsyncIOMotorClient) -> None:
        database = motor_client["db"]

        assert not is_session_source(database)
        assert not is_transaction_session(database)
        assert not is_transactional_logger(database)

    @pytest.mark.asyncio
    async def test_collection_is_not_a_session(self, motor_client: AsyncIOMotorClient) -> None:
        collection = motor_client["db"]["orders"]

        assert not is_transaction_session(collection)
        assert not is_session_source(collection)
