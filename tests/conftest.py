"""Test Configuration and Fixtures."""

from __future__ import annotations

from typing import AsyncIterator, Generator

import pytest
import pytest_asyncio
from motor.motor_asyncio import AsyncIOMotorClient

from tests.fakes import FakeConnection, RecordingLogger
from txcontext.module import TransactionalModule


@pytest.fixture(autouse=True)
def _reset_module() -> Generator[None, None, None]:
    """Remove any globally installed transactional logger."""
    TransactionalModule.reset()
    yield
    TransactionalModule.reset()


@pytest.fixture
def connection() -> FakeConnection:
    return FakeConnection()


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest_asyncio.fixture
async def motor_client() -> AsyncIterator[AsyncIOMotorClient]:
    """Motor client that never opens a connection."""
    client = AsyncIOMotorClient("mongodb://localhost:27017", connect=False, serverSelectionTimeoutMS=100)
    yield client
    client.close()
