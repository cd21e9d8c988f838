"""
Lazily established, process-wide database connection.

CONNECTION STRATEGY: Single-flight initialization
==================================================

Problem:
  Several requests arrive before the first one has finished connecting.
  If each of them builds its own engine we end up with several pools
  (and several sets of sockets) per process.

Solution:
  `DatabaseConnection.connect()` keeps the in-progress connection attempt as
  an asyncio Task. The first caller starts it under a lock; every caller that
  arrives while it is running awaits the same Task. Once it resolves the
  engine is cached and returned immediately on every later call.

  A failed attempt is cleared, so the next call starts a fresh one instead of
  replaying the same failure for the lifetime of the process.

One instance per process is handed out by `get_database()` and injected into
request handlers through FastAPI dependencies (see eventhub.db.session).
"""

import asyncio
from functools import lru_cache
from typing import Any, Callable, Optional

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from eventhub import models  # noqa: F401 - registers tables on Base.metadata
from eventhub.core.config import Settings, get_settings
from eventhub.core.exceptions import ConfigurationError
from eventhub.core.logging import get_logger
from eventhub.core.metrics import record_connection_attempt
from eventhub.db.base import Base

logger = get_logger(__name__)

EngineFactory = Callable[..., AsyncEngine]


class DatabaseConnection:
    """Owns the async engine and session factory for one database URL."""

    def __init__(
        self,
        url: Optional[str],
        *,
        auto_create_schema: bool = False,
        engine_factory: EngineFactory = create_async_engine,
        **engine_options: Any,
    ):
        self._url = url
        self._auto_create_schema = auto_create_schema
        self._engine_factory = engine_factory
        self._engine_options = engine_options

        self._engine: Optional[AsyncEngine] = None
        self._sessionmaker: Optional[async_sessionmaker[AsyncSession]] = None
        self._pending: Optional[asyncio.Task] = None
        self._lock = asyncio.Lock()

    @property
    def connected(self) -> bool:
        return self._engine is not None

    async def connect(self) -> AsyncEngine:
        """Return the active engine, connecting on first use."""
        if self._engine is not None:
            return self._engine

        if not self._url:
            raise ConfigurationError("DATABASE_URL environment variable is not set")

        async with self._lock:
            if self._engine is not None:
                return self._engine
            if self._pending is None:
                self._pending = asyncio.ensure_future(self._open())
            pending = self._pending

        try:
            # Shielded so one cancelled caller doesn't abort the attempt for the others
            engine = await asyncio.shield(pending)
        except Exception:
            async with self._lock:
                if self._pending is pending:
                    self._pending = None
            raise

        if self._engine is None:
            self._engine = engine
            self._sessionmaker = async_sessionmaker(
                engine, class_=AsyncSession, expire_on_commit=False
            )
            self._pending = None
        return self._engine

    async def sessionmaker(self) -> async_sessionmaker[AsyncSession]:
        await self.connect()
        return self._sessionmaker

    async def close(self) -> None:
        """Dispose the engine; the next connect() starts over."""
        async with self._lock:
            engine = self._engine
            self._engine = None
            self._sessionmaker = None
            self._pending = None

        if engine is not None:
            await engine.dispose()
            logger.info("database_disconnected")

    async def _open(self) -> AsyncEngine:
        safe_url = make_url(self._url).render_as_string(hide_password=True)
        logger.info("database_connecting", url=safe_url)

        engine = self._engine_factory(self._url, **self._engine_options)
        try:
            async with engine.connect() as conn:
                await conn.execute(text("SELECT 1"))

            if self._auto_create_schema:
                async with engine.begin() as conn:
                    await conn.run_sync(Base.metadata.create_all)
        except Exception as e:
            record_connection_attempt(success=False)
            logger.error("database_connection_failed", url=safe_url, error=str(e))
            await engine.dispose()
            raise

        record_connection_attempt(success=True)
        logger.info("database_connected", url=safe_url)
        return engine


def engine_options_from_settings(settings: Settings) -> dict:
    """Pool options for create_async_engine; SQLite gets the driver defaults."""
    options: dict = {"echo": settings.DEBUG}
    url = settings.DATABASE_URL
    if url and not url.startswith("sqlite"):
        options.update(
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_timeout=settings.DB_POOL_TIMEOUT,
            pool_recycle=settings.DB_POOL_RECYCLE,
            pool_pre_ping=True,
        )
    return options


@lru_cache()
def get_database() -> DatabaseConnection:
    """Process-wide connection handle built from settings."""
    settings = get_settings()
    return DatabaseConnection(
        settings.DATABASE_URL,
        auto_create_schema=settings.DB_AUTO_CREATE_SCHEMA,
        **engine_options_from_settings(settings),
    )
