"""
Promptopia Backend — Database Connection Management
=====================================================

What:  Process-wide async SQLAlchemy engine, session factory and lifecycle helpers.
Why:   Every request shares one connection pool; it is created on first use
       and released when the process shuts down, never per request.
How:   connect_to_db() lazily builds the engine and verifies connectivity.
       It is idempotent: repeated (or concurrent) calls reuse the same engine.
Who:   Called by the prompt service and the health check before touching the store.
When:  First call establishes the pool; dispose_engine() runs at shutdown.

Connection Pooling Strategy (server databases only):
    pool_size=20:      Persistent connections for normal load
    max_overflow=10:   Temporary connections for traffic spikes
    pool_pre_ping:     Validates connections before use
    pool_recycle=3600: Recycles connections every hour

    SQLite (used by the test suite) manages its own pool; the options above
    are not passed for sqlite URLs.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.config import settings
from app.exceptions import DatabaseError

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Registers every model with a single metadata object, which Alembic
    reads for migrations and the test suite uses for create_all().
    """
    pass


# ── Connector State ───────────────────────────────────────────────────────
# Module-level: one engine per process, shared by all requests
_engine: Optional[AsyncEngine] = None
_session_factory: Optional[async_sessionmaker[AsyncSession]] = None
_connect_lock: Optional[asyncio.Lock] = None


def _get_connect_lock() -> asyncio.Lock:
    # Created on first use and dropped by dispose_engine(), so a fresh event
    # loop (e.g. one per test) never waits on a lock bound to an old loop
    global _connect_lock
    if _connect_lock is None:
        _connect_lock = asyncio.Lock()
    return _connect_lock


def _engine_options(database_url: str) -> Dict[str, Any]:
    """Build create_async_engine() keyword arguments for the given URL."""
    options: Dict[str, Any] = {
        # Echo SQL only when debugging
        "echo": settings.log_level == "DEBUG",
    }
    if database_url.startswith("sqlite"):
        return options

    options.update(
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=settings.db_pool_pre_ping,
        pool_recycle=3600,
    )
    if database_url.startswith("postgresql+asyncpg"):
        options["connect_args"] = {"timeout": settings.db_connect_timeout}
    return options


async def connect_to_db(database_url: Optional[str] = None) -> AsyncEngine:
    """
    Ensure the shared engine exists and can reach the database.

    What:    Idempotent connection setup.
    How:     First call creates the engine, runs SELECT 1, and stores the
             engine and session factory. Subsequent calls return the stored
             engine without touching the database again.
    Concurrency:
        The lock makes concurrent first calls share a single initialization;
        the fast path (already connected) never waits on it.

    Args:
        database_url: Override for settings.database_url (used by tests
                      and migrations).

    Raises:
        DatabaseError: The database could not be reached. The connector is
                       left disconnected so the next call retries.
    """
    global _engine, _session_factory

    if _engine is not None:
        logger.debug("Database is already connected")
        return _engine

    async with _get_connect_lock():
        # Another coroutine may have connected while we waited
        if _engine is not None:
            return _engine

        url = database_url or settings.database_url
        engine = create_async_engine(url, **_engine_options(url))
        try:
            async with engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except Exception as e:
            await engine.dispose()
            logger.error("Database connection failed: %s", str(e))
            raise DatabaseError(
                message="Could not connect to the database.",
                context={"error_type": type(e).__name__},
            ) from e

        _engine = engine
        _session_factory = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        logger.info("Database connected")
        return _engine


def is_connected() -> bool:
    """Whether connect_to_db() has established the shared engine."""
    return _engine is not None


@asynccontextmanager
async def session_scope() -> AsyncGenerator[AsyncSession, None]:
    """
    Provide a session from the shared factory for one unit of work.

    Read-only callers never commit; on error the session is rolled back
    and the exception re-raised. The session is always closed, returning
    its connection to the pool.

    Example:
        await connect_to_db()
        async with session_scope() as session:
            result = await session.execute(select(Prompt))
    """
    if _session_factory is None:
        raise DatabaseError(message="Database is not connected.")

    async with _session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def dispose_engine() -> None:
    """
    What:  Gracefully closes all pooled connections and resets the connector.
    When:  Called during application shutdown (lifespan handler) and by tests.
    """
    global _engine, _session_factory, _connect_lock

    _connect_lock = None
    if _engine is None:
        return
    await _engine.dispose()
    _engine = None
    _session_factory = None
    logger.info("Database connections closed")
