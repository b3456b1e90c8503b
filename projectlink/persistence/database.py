"""Database connection and session management.

Provides async database engine and session factory for PostgreSQL.
"""

import asyncio

import logfire
from sqlalchemy import text
from sqlalchemy.exc import DBAPIError, OperationalError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from projectlink.config import Settings
from projectlink.util.error import DatabaseUnavailableError


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,  # Log SQL queries in debug mode
        pool_pre_ping=True,  # Verify connections before using
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Args:
        engine: Database engine

    Returns:
        Session factory for creating database sessions
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,  # Don't expire objects after commit
        autoflush=False,  # Manual flushing for better control
        autocommit=False,  # Explicit transaction management
    )


async def connect_with_retry(
    engine: AsyncEngine, retries: int, backoff_seconds: float
) -> None:
    """Wait for the database to accept connections.

    Sleeps ``backoff_seconds * 2**attempt`` between attempts.

    Args:
        engine: Database engine
        retries: Number of attempts before giving up
        backoff_seconds: Base delay between attempts

    Raises:
        DatabaseUnavailableError: If every attempt fails
    """
    attempts = max(retries, 1)
    for attempt in range(attempts):
        try:
            async with engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            logfire.info("Database connection established", attempt=attempt + 1)
            return
        except (OperationalError, DBAPIError, OSError) as e:
            logfire.warn(
                "Database connection failed",
                attempt=attempt + 1,
                attempts=attempts,
                error=str(e),
            )
            if attempt + 1 < attempts:
                await asyncio.sleep(backoff_seconds * 2**attempt)

    raise DatabaseUnavailableError(
        f"Could not connect to the database after {attempts} attempts"
    )
