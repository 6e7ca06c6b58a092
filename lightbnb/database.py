"""
Database engine and session management.
Builds the async SQLAlchemy engine (and its connection pool) from settings and
hands out sessions to the repositories.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.pool import StaticPool
from lightbnb.config import Settings, get_settings
import logging

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """
    Base class for all database models.
    Every table has a store-generated integer primary key.
    """

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    def __repr__(self) -> str:
        """String representation of the model."""
        return f"<{self.__class__.__name__}(id={self.id})>"


def create_engine_from_settings(settings: Optional[Settings] = None) -> AsyncEngine:
    """
    Create the async engine that owns the process-wide connection pool.

    SQLite URLs (used for tests and local runs) get a StaticPool so an
    in-memory database is shared by every session.
    """
    settings = settings or get_settings()

    if settings.is_sqlite:
        engine = create_async_engine(
            settings.database_url,
            echo=settings.debug,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    else:
        engine = create_async_engine(
            settings.database_url,
            echo=settings.debug,
            pool_size=settings.pool_size,
            max_overflow=settings.max_overflow,
            pool_pre_ping=settings.pool_pre_ping,
            pool_recycle=settings.pool_recycle,
            pool_timeout=settings.pool_timeout,
            connect_args={
                "server_settings": {
                    "application_name": "lightbnb",
                }
            },
        )

    logger.info(f"Created database engine for {engine.url.render_as_string(hide_password=True)}")
    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create a session factory bound to the given engine."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@asynccontextmanager
async def session_scope(session_factory: async_sessionmaker[AsyncSession]) -> AsyncIterator[AsyncSession]:
    """
    Yield a session and make sure it is rolled back on error and closed.

    Usage:
        async with session_scope(factory) as session:
            user = await UserRepository(session).get_user_with_id(1)
    """
    async with session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def check_database_connection(engine: AsyncEngine) -> bool:
    """
    Test database connectivity.
    Returns True if connection is successful, False otherwise.
    """
    try:
        async with engine.connect() as conn:
            result = await conn.execute(text("SELECT 1"))
            result.scalar()
            logger.info("Database connection successful")
            return True
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        return False


def get_pool_status(engine: AsyncEngine) -> dict:
    """
    Get connection pool counters for monitoring.
    Pools without counters (e.g. StaticPool) only report their class name.
    """
    pool = engine.pool
    status = {"pool_class": type(pool).__name__}

    for name in ("size", "checkedin", "checkedout", "overflow"):
        counter = getattr(pool, name, None)
        if callable(counter):
            status[name] = counter()

    return status


async def create_tables(engine: AsyncEngine) -> None:
    """
    Create all tables from the model metadata.
    Only used by tests and local setup; the production schema is managed externally.
    """
    # Imported for the side effect of registering every model on Base.metadata
    import lightbnb.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables created successfully")


async def drop_tables(engine: AsyncEngine, settings: Optional[Settings] = None) -> None:
    """
    Drop all tables.
    Refuses to run outside the testing and development environments.
    """
    settings = settings or get_settings()
    if not settings.is_testing and not settings.is_development:
        raise RuntimeError("Cannot drop tables in production environment")

    import lightbnb.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        logger.info("Database tables dropped successfully")


async def close_engine(engine: AsyncEngine) -> None:
    """
    Dispose of the engine's pool.
    This should be called by the owner of the engine during shutdown.
    """
    await engine.dispose()
    logger.info("Database connections closed")
