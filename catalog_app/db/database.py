"""
==============================================================================
Database Connection Management Module
==============================================================================

Async database access using SQLAlchemy's asyncio extension.

This module implements:
- DatabaseManager: owner of the AsyncEngine and session factory
- Scoped session helpers: one session per logical operation, always
  released, optionally wrapped in a transaction
- Schema migration, health check and pool disposal

SQLAlchemy Architecture:
-----------------------
    ┌─────────────────┐
    │ DatabaseManager │ (one per process, injected)
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │   AsyncEngine   │ (Connection pool)
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │  SessionLocal   │ (async_sessionmaker)
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │  AsyncSession   │ (Operation-scoped)
    └─────────────────┘

Scoped Operations:
-----------------
    run_scoped(op)         acquire → op(session) → release
    run_transactional(op)  acquire → begin → op(session) → commit → release
                           (rollback + release on failure or cancellation)

Nothing here retries or translates errors. Exceptions raised by the
operation, and asyncio.CancelledError, reach the caller after the
session has been released.

==============================================================================
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Awaitable, Callable, Optional, TypeVar

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

from catalog_app.config import Settings, get_settings


# Module logger
logger = logging.getLogger(__name__)

# SQLAlchemy declarative base for all models
Base = declarative_base()

T = TypeVar("T")

UnitOfWork = Callable[[AsyncSession], Awaitable[T]]


def _is_memory_database(database_url: str) -> bool:
    """Check whether a SQLite URL points at an in-memory database."""
    return database_url.rstrip("/").endswith(":memory:") or database_url in (
        "sqlite://",
        "sqlite+aiosqlite://",
    )


class DatabaseManager:
    """
    Owner of the catalog store engine and session factory.

    The engine is created lazily on first use so that a manager can be
    constructed at import or startup time without touching the store.

    Attributes:
        _settings: Application settings (connection string, debug flag)
        _engine: AsyncEngine instance (lazy loaded)
        _session_factory: Factory for AsyncSession objects
        _open_sessions: Sessions acquired and not yet released

    Example:
        >>> db_manager = DatabaseManager(get_settings())
        >>>
        >>> async def count(session):
        ...     return await session.scalar(select(func.count(Product.id)))
        >>>
        >>> total = await db_manager.run_scoped(count)
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        database_url: Optional[str] = None,
    ) -> None:
        """
        Initialize the database manager.

        Args:
            settings: Application settings (global settings if None)
            database_url: Connection string overriding settings.database_url
        """
        self._settings = settings or get_settings()
        self._database_url = database_url or self._settings.database_url
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None
        self._open_sessions = 0

        logger.debug("DatabaseManager initialized")

    # =========================================================================
    # ENGINE MANAGEMENT
    # =========================================================================

    @property
    def database_url(self) -> str:
        """Connection string this manager connects to."""
        return self._database_url

    @property
    def engine(self) -> AsyncEngine:
        """
        Get the AsyncEngine (lazy initialization).

        Returns:
            SQLAlchemy AsyncEngine instance
        """
        if self._engine is None:
            self._engine = self._create_engine()
        return self._engine

    def _create_engine(self) -> AsyncEngine:
        """
        Create the AsyncEngine with configuration for the database type.

        - In-memory SQLite: a single shared connection (StaticPool)
        - File SQLite: driver default pooling
        - Server databases: sized connection pool with pre-ping

        Returns:
            Configured AsyncEngine
        """
        database_url = self._database_url

        if database_url.startswith("sqlite"):
            if _is_memory_database(database_url):
                engine = create_async_engine(
                    database_url,
                    poolclass=StaticPool,
                    echo=self._settings.debug,
                )
            else:
                engine = create_async_engine(
                    database_url,
                    echo=self._settings.debug,
                )

            logger.info(f"Created SQLite engine: {database_url}")

        else:
            engine = create_async_engine(
                database_url,
                pool_size=5,
                max_overflow=10,
                pool_timeout=30,
                pool_recycle=1800,
                pool_pre_ping=True,
                echo=self._settings.debug,
            )

            logger.info(f"Created database engine with pooling: {database_url}")

        return engine

    # =========================================================================
    # SESSION MANAGEMENT
    # =========================================================================

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        """
        Get the session factory (lazy initialization).

        Returns:
            async_sessionmaker bound to the engine
        """
        if self._session_factory is None:
            self._session_factory = async_sessionmaker(
                bind=self.engine,
                autoflush=False,
                expire_on_commit=False,  # Keep objects accessible after commit
            )
        return self._session_factory

    @property
    def open_sessions(self) -> int:
        """Number of sessions currently acquired and not yet released."""
        return self._open_sessions

    @asynccontextmanager
    async def session_scope(self) -> AsyncIterator[AsyncSession]:
        """
        Provide one session for the duration of a single operation.

        The session is closed on every exit path: normal completion,
        exception, or task cancellation. Work that was not committed by
        the caller is discarded when the session closes.

        Yields:
            AsyncSession instance
        """
        session = self.session_factory()
        self._open_sessions += 1
        logger.debug(f"Session acquired (open: {self._open_sessions})")
        try:
            yield session
        finally:
            # The count drops when the close finishes, even if the awaiting
            # task is cancelled again while the shielded close is running
            closing = asyncio.ensure_future(session.close())
            closing.add_done_callback(self._on_session_closed)
            await asyncio.shield(closing)

    def _on_session_closed(self, future: "asyncio.Future[None]") -> None:
        self._open_sessions -= 1
        if not future.cancelled() and future.exception() is not None:
            logger.warning(f"Session close failed: {future.exception()!r}")
        logger.debug(f"Session released (open: {self._open_sessions})")

    @asynccontextmanager
    async def transaction_scope(self) -> AsyncIterator[AsyncSession]:
        """
        Provide a transactional scope around a series of operations.

        - Creates a new session and begins a transaction
        - Commits on successful completion
        - Rolls back on exception or cancellation
        - Always closes the session

        Yields:
            AsyncSession instance inside an open transaction
        """
        async with self.session_scope() as session:
            await session.begin()
            try:
                yield session
                await session.commit()
            except BaseException as e:
                await asyncio.shield(session.rollback())
                logger.warning(
                    f"Transaction rolled back: {type(e).__name__}"
                )
                raise

    async def run_scoped(self, operation: UnitOfWork[T]) -> T:
        """
        Run one unit of work against a freshly acquired session.

        Args:
            operation: Coroutine function taking the session

        Returns:
            Whatever the operation returns (None for procedures)
        """
        async with self.session_scope() as session:
            return await operation(session)

    async def run_transactional(self, operation: UnitOfWork[T]) -> T:
        """
        Run one unit of work inside a transaction.

        Commits when the operation returns normally. On failure or
        cancellation the transaction is rolled back and the session
        released before the exception propagates.

        Args:
            operation: Coroutine function taking the session

        Returns:
            Whatever the operation returns
        """
        async with self.transaction_scope() as session:
            return await operation(session)

    # =========================================================================
    # SCHEMA MANAGEMENT
    # =========================================================================

    @staticmethod
    async def apply_migrations(session: AsyncSession) -> None:
        """
        Bring the schema up to date on the session's connection.

        Creates every table that does not exist yet; existing tables are
        left untouched, so repeated calls are no-ops.

        Args:
            session: Session whose connection runs the DDL
        """
        from catalog_app.db import models  # noqa: F401

        connection = await session.connection()
        await connection.run_sync(Base.metadata.create_all)
        logger.debug("Schema migrations applied")

    async def migrate(self) -> None:
        """Apply pending schema migrations in a transaction of its own."""
        await self.run_transactional(self.apply_migrations)
        logger.info("Database tables created/verified")

    async def drop_tables(self) -> None:
        """
        Drop all tables defined in the models.

        WARNING: This will delete all data! Use only for testing
        or development reset.
        """
        async with self.engine.begin() as connection:
            await connection.run_sync(Base.metadata.drop_all)
        logger.warning("All database tables dropped")

    # =========================================================================
    # CONNECTION MANAGEMENT
    # =========================================================================

    async def verify_connection(self) -> bool:
        """
        Verify database connection is working.

        Returns:
            True if connection successful, False otherwise
        """
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            logger.debug("Database connection verified")
            return True
        except Exception as e:
            logger.error(f"Database connection failed: {e}")
            return False

    async def dispose(self) -> None:
        """
        Dispose of the connection pool.

        Call this on application shutdown to clean up resources.
        """
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None
            logger.info("Database connection pool disposed")

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"DatabaseManager(url={self._database_url!r})"
