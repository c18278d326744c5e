"""
Configuration - Pydantic v2 Settings (env / .env)
=================================================

Purpose
-------
Centralized, strongly-typed configuration for transactional sessions using:
- Pydantic v2 `BaseSettings` for environment-driven values
- `pydantic-settings` v2 for `.env` loading and model config

Load Order & Behavior
---------------------
- Values are read from the environment; if not present, `.env` is used.
- Every field has a default, so importing the package never fails on a
  bare environment. Connection URLs are only validated when a connection
  factory in `connection_engine` is called.
- `extra="ignore"`: unknown env vars are ignored (not an error).

Usage
-----
from txcontext.config.config import settings

# Example
attribute = settings.TRANSACTIONAL_CONNECTION_ATTRIBUTE
mongo_uri = settings.MONGO_URI

Security
--------
- Never commit connection strings with credentials or the `.env` file.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Transactional session settings loaded from environment variables
    or a `.env` file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    MONGO_URI: Optional[str] = Field(None, description="MongoDB connection string (replica set required for transactions).")
    DB_URL: Optional[str] = Field(None, description="SQLAlchemy async database URL (e.g., `postgresql+asyncpg://...`).")
    TRANSACTIONAL_CONNECTION_ATTRIBUTE: str = Field(
        "connection",
        description="Name of the receiver attribute that holds the session source.",
    )
    TRANSACTIONAL_LOGGER_NAME: str = Field("txcontext", description="Name of the stdlib logger used by the default sink.")
    TRANSACTIONAL_LOGGER_CONTEXT: str = Field(
        "TransactionalLogger",
        description="Context name used until a class sets its own.",
    )
    TRANSACTIONAL_GLOBAL: bool = Field(True, description="Whether TransactionalModule installs its logger globally by default.")


# Singleton instance of Settings, ready to be imported across the package
settings = Settings()
"""Settings object built from the environment and the `.env` file."""
