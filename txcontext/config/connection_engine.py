"""
Connection Engine (Motor / SQLAlchemy)

Purpose
-------
Builds the session sources that `@transactional` looks for on a receiver:
- `create_mongo_client` creates a Motor client; the client itself exposes
  `start_session()` and can be assigned to a service's `connection` attribute.
- `create_sql_session_source` creates a SQLAlchemy async Engine and wraps its
  session factory in a `SqlAlchemySessionSource`.

Notes
-----
- URLs come from `Settings` so credentials stay environment-driven.
- Engine and client settings (pool size, timeouts, TLS) can be passed through
  as keyword arguments.
- Nothing is created at import time.
"""

from typing import Any, Optional

from motor.motor_asyncio import AsyncIOMotorClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from txcontext.adapters.sqlalchemy_session import SqlAlchemySessionSource
from txcontext.config.config import Settings, settings as default_settings


def create_mongo_client(settings: Optional[Settings] = None, **client_kwargs: Any) -> AsyncIOMotorClient:
    """
    Create a Motor client from ``settings.MONGO_URI``.

    Raises
    ------
    ValueError
        If ``MONGO_URI`` is not configured.
    """
    settings = settings or default_settings
    if not settings.MONGO_URI:
        raise ValueError("MONGO_URI is not configured")
    return AsyncIOMotorClient(settings.MONGO_URI, **client_kwargs)


def create_sql_session_source(settings: Optional[Settings] = None, **engine_kwargs: Any) -> SqlAlchemySessionSource:
    """
    Create a `SqlAlchemySessionSource` bound to a new async Engine built from
    ``settings.DB_URL``.

    Raises
    ------
    ValueError
        If ``DB_URL`` is not configured.
    """
    settings = settings or default_settings
    if not settings.DB_URL:
        raise ValueError("DB_URL is not configured")

    engine = create_async_engine(settings.DB_URL, **engine_kwargs)
    # expire_on_commit=False keeps loaded objects usable after the wrapper commits
    session_factory = async_sessionmaker(bind=engine, expire_on_commit=False)
    return SqlAlchemySessionSource(session_factory)
