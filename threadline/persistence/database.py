"""Async engine and sessions for the comments table."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from threadline.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async PostgreSQL engine from ``settings.database``."""
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,  # SQL echo in debug mode
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the session factory used per API request.

    Sessions flush explicitly (repositories call ``flush``) and are committed
    by the DI provider at the end of the request.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
