"""Database connection and session management.

Provides async database engine and session factory for PostgreSQL, and the
translation of driver failures into domain errors.
"""

from contextlib import contextmanager
from typing import Iterator

import logfire
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from banter.config import Settings
from banter.domain.error import ServiceUnavailableError


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


@contextmanager
def store_errors(operation: str) -> Iterator[None]:
    """Surface database failures as ServiceUnavailableError.

    Usage:
        with store_errors("comments.find_by_id"):
            result = await self.session.execute(stmt)

    Args:
        operation: Name of the repository operation, for logging

    Raises:
        ServiceUnavailableError: If the wrapped block fails in the driver
    """
    try:
        yield
    except (SQLAlchemyError, OSError, TimeoutError) as e:
        logfire.error(
            "Database operation failed",
            operation=operation,
            error=str(e),
            error_type=type(e).__name__,
        )
        raise ServiceUnavailableError("Comment store is unavailable") from e
