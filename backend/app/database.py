"""
Commerce Backend — Database Session Management
===============================================

What:  Async SQLAlchemy engine, session factory, and FastAPI dependency.
How:   A `Database` object owns the engine (connection pool) and the session
       factory. `create_app()` constructs one and stores it on `app.state`;
       the per-request session dependency reads it from there and
       auto-commits on success, auto-rolls-back on error.
Who:   Used by route dependencies, the health check, Alembic and the seeder.
When:  Engine is created with the app; sessions are created per-request.

Connection Pooling Strategy (PostgreSQL):
    pool_size:         Persistent connections for normal load
    max_overflow:      Temporary connections for traffic spikes
    pool_pre_ping:     Validates connections before use
    pool_recycle=3600: Recycles connections every hour

    SQLite (tests, local runs) uses SQLAlchemy's default pool for the
    dialect; the sizing options do not apply there.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, AsyncIterator, Dict

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.config import Settings


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    All models inherit from this class to register with the shared
    metadata object used by Alembic and `Database.create_all()`.
    """
    pass


# ── Store Client ──────────────────────────────────────────────────────────
class Database:
    """
    Owns the async engine and session factory for one application instance.

    Lifecycle:
        1. Constructed by create_app() (no connection is opened yet)
        2. Sessions handed out per request via session()
        3. dispose() closes every pooled connection on shutdown
    """

    def __init__(self, settings: Settings):
        engine_kwargs: Dict[str, Any] = {
            # SQL echo only in DEBUG; it is very noisy otherwise
            "echo": settings.log_level == "DEBUG",
        }
        if not settings.is_sqlite:
            engine_kwargs.update(
                pool_size=settings.db_pool_size,
                max_overflow=settings.db_max_overflow,
                pool_pre_ping=settings.db_pool_pre_ping,
                pool_recycle=3600,
            )

        self.engine: AsyncEngine = create_async_engine(settings.database_url, **engine_kwargs)

        # expire_on_commit=False: attributes stay readable after commit,
        # response shaping happens after the service returns
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """
        Unit-of-work scope: commit on clean exit, roll back on any error.

        Example:
            async with database.session() as session:
                await OrderService(session).create(data)
        """
        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def ping(self) -> None:
        """Runs SELECT 1; raises if the store is unreachable."""
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def create_all(self) -> None:
        """Creates every mapped table (tests and local SQLite runs)."""
        import app.models  # noqa: F401  (registers all tables on Base.metadata)

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def drop_all(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def dispose(self) -> None:
        """
        What:  Gracefully closes all connections in the pool.
        When:  Called during application shutdown (lifespan handler).
        """
        await self.engine.dispose()


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Looks up the Database built by create_app() on request.app.state
        2. Yields a session for the route's services to use
        3. On success: commits the transaction
        4. On error: rolls back and re-raises to the global error handlers

    Every write made while serving one request (for example the stock
    decrement and the order insert) commits or rolls back together.
    """
    database: Database = request.app.state.database
    async with database.session() as session:
        yield session
