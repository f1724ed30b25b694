import asyncio
from collections.abc import AsyncIterator
from typing import Any

from sqlalchemy import event
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import bookstore.models  # noqa: F401  (registers tables on SQLModel.metadata)
from bookstore.logging import logger
from bookstore.settings import app_settings


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """
    Turn on foreign key enforcement for every new SQLite connection.

    SQLite ships with FK checks disabled; without this pragma a product
    could point at a missing author and authors with products could be
    deleted.

    Args:
        engine: Async engine bound to a SQLite database.
    """

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection: Any, connection_record: Any) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def create_db_engine(url: str) -> AsyncEngine:
    """
    Create the async engine for the given database URL.

    PostgreSQL gets the pool settings from app_settings. SQLite gets FK
    enforcement, and in-memory SQLite a single shared connection so all
    sessions see the same database.

    Args:
        url: SQLAlchemy async database URL.

    Returns:
        Configured AsyncEngine.
    """
    if not url.startswith("sqlite"):
        return create_async_engine(
            url,
            echo=False,
            pool_size=app_settings.DB_POOL_SIZE,
            max_overflow=app_settings.DB_MAX_OVERFLOW,
            pool_recycle=app_settings.DB_POOL_RECYCLE,
            pool_pre_ping=app_settings.DB_POOL_PRE_PING,
        )

    kwargs: dict[str, Any] = {"echo": False}
    if ":memory:" in url:
        kwargs["poolclass"] = StaticPool
    engine = create_async_engine(url, **kwargs)
    enable_sqlite_foreign_keys(engine)
    return engine


def create_session_factory(engine: AsyncEngine) -> sessionmaker:
    """Session factory producing sqlmodel AsyncSessions bound to `engine`."""
    return sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)


engine: AsyncEngine = create_db_engine(app_settings.DATABASE_URL)
async_session = create_session_factory(engine)


async def create_db_and_tables(db_engine: AsyncEngine | None = None) -> None:
    """
    Create all tables registered on SQLModel.metadata.

    Production schemas are managed by Alembic; this is for local runs and
    tests.

    Args:
        db_engine: Engine to use. Defaults to the application engine.
    """
    async with (db_engine or engine).begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def wait_and_init_db(
    retry_interval: int | None = None,
    max_retries: int | None = None,
) -> None:
    """
    Wait until the database is available.

    Note: Database schema is managed by Alembic migrations. Tables are only
    created here when DB_CREATE_TABLES is enabled.

    Args:
        retry_interval: Time in seconds between retries.
            Defaults to app_settings.DB_INIT_RETRY_INTERVAL
        max_retries: Maximum number of retries before giving up.
            Defaults to app_settings.DB_INIT_MAX_RETRIES

    Raises:
        RuntimeError: If the database never became reachable.
    """
    if retry_interval is None:
        retry_interval = app_settings.DB_INIT_RETRY_INTERVAL
    if max_retries is None:
        max_retries = app_settings.DB_INIT_MAX_RETRIES

    for attempt in range(max_retries):
        try:
            async with engine.connect() as conn:
                await conn.exec_driver_sql("SELECT 1")
            logger.info("Database is now ready.")
            break
        except OperationalError:
            logger.warning(
                f"Database not ready, retrying in {retry_interval} seconds... (Attempt {attempt + 1}/{max_retries})"
            )
            await asyncio.sleep(retry_interval)
    else:
        logger.error("Failed to connect to the database after multiple attempts.")
        raise RuntimeError("Database connection could not be established.")

    if app_settings.DB_CREATE_TABLES:
        await create_db_and_tables()
        logger.info("Created database tables")


async def get_session() -> AsyncIterator[AsyncSession]:
    """
    Get an asynchronous session from the SQLAlchemy session factory.

    The session is committed when the request handler returns and rolled
    back when it raises.

    Yields:
        AsyncSession: An asynchronous SQLAlchemy session.
    """
    async with async_session() as session:
        try:
            yield session
            await session.commit()
        except IntegrityError as ex:
            await session.rollback()
            logger.error(f"Database integrity error: {ex}")
            raise
        except SQLAlchemyError as ex:
            await session.rollback()
            logger.error(f"Database error: {ex}")
            raise
