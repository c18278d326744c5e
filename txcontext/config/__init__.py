"""
The `config` package provides two building blocks for reaching the database.

Contents:
    - config: Configuration layer - strongly typed settings loaded from environment variables (with .env support), exposed through a singleton Settings object
    - connection_engine: Connection layer - factories that build a Motor client or a SQLAlchemy async session source from those settings

Together they give services a session source to hand to `@transactional`.
"""
