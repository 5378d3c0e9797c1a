"""Async engine, sessions and transaction handling for PostgreSQL."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from logging import getLogger

from sqlalchemy import event, text
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession as SQLModelAsyncSession

from blogapi.configs import file_logger, settings
from blogapi.errors.database import DatabaseConnectionError

logger = file_logger(getLogger(__name__))

STATEMENT_TIMEOUT_MS = 30000


def _log_pool_events(engine: AsyncEngine) -> None:
    """Log connection pool activity; only wired up in debug mode."""

    @event.listens_for(engine.sync_engine, "connect")
    def on_connect(dbapi_connection: object, connection_record: object) -> None:
        logger.debug("New database connection established")

    @event.listens_for(engine.sync_engine, "checkin")
    def on_checkin(dbapi_connection: object, connection_record: object) -> None:
        logger.debug("Connection returned to pool")


engine: AsyncEngine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DATABASE_ECHO,
    pool_size=settings.POOL_SIZE,
    max_overflow=settings.MAX_OVERFLOW,
    pool_timeout=settings.POOL_TIMEOUT,
    pool_recycle=settings.POOL_RECYCLE,
    pool_pre_ping=True,
    connect_args={
        "command_timeout": STATEMENT_TIMEOUT_MS / 1000,
        "server_settings": {"statement_timeout": str(STATEMENT_TIMEOUT_MS)},
    },
)

if settings.DEBUG:
    _log_pool_events(engine)

async_session_maker: async_sessionmaker[SQLModelAsyncSession] = async_sessionmaker(
    engine,
    class_=SQLModelAsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


@asynccontextmanager
async def transaction() -> AsyncGenerator[AsyncSession]:
    """
    Open a session that commits on success and rolls back on error.

    Yields:
        AsyncSession: Database session within a transaction

    Example:
        ```python
        async with transaction() as session:
            session.add(blog)
        ```
    """
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            logger.exception("Transaction rolled back")
            raise


async def get_session() -> AsyncGenerator[AsyncSession]:
    """
    FastAPI dependency providing one transactional session per request.

    Yields:
        AsyncSession: Database session
    """
    async with transaction() as session:
        yield session


async def init_db() -> None:
    """
    Check connectivity and create any missing tables.

    Alembic owns the schema in deployed environments; `create_all` only
    fills in tables that do not exist yet, which keeps local runs simple.

    Raises:
        DatabaseConnectionError: If the database cannot be reached
    """
    try:
        async with engine.begin() as conn:
            await conn.execute(text("SELECT 1"))
            # Registers the tables on SQLModel.metadata.
            from blogapi.models import BlogDB, UserDB  # noqa: F401, PLC0415

            await conn.run_sync(SQLModel.metadata.create_all)
    except (OperationalError, OSError) as e:
        logger.exception("Database is unreachable")
        raise DatabaseConnectionError from e
    logger.info("Database initialized successfully")


async def close_db() -> None:
    """Dispose of pooled connections on shutdown."""
    await engine.dispose()
    logger.info("Database connections closed")
