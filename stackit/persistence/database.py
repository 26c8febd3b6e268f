"""Database engine and session factory for PostgreSQL."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from stackit.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Application settings with database URL and pool sizes

    Returns:
        Configured async engine
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,  # Log SQL in debug mode
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    One session per request; commit/rollback is owned by the DI provider.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
