# 📄 File: findeasily/shared/infrastructure/database/connection.py
# 🧭 Purpose (Layman Explanation):
# Opens and manages the connection to the database where users, listings and
# reset tokens are kept, and hands out short-lived "sessions" to each request.
# 🧪 Purpose (Technical Summary):
# SQLAlchemy async engine and session factory management, declarative Base for ORM
# models, schema creation on startup and a health check.
# 🔗 Dependencies:
# - SQLAlchemy 2.x asyncio extension
# - aiosqlite / asyncpg drivers (selected by DATABASE_URL)
# 🔄 Connected Modules / Calls From:
# - findeasily.main (lifespan initialize/close)
# - shared.core.dependencies (per-request sessions)
# - ORM models of every module (Base)

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, AsyncGenerator, Dict, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Declarative base shared by all ORM models."""


class DatabaseManager:
    """
    Owns the async engine and session factory for one application instance.
    """

    def __init__(self, database_url: str, echo: bool = False):
        self.database_url = database_url
        self.echo = echo
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker] = None

    def _engine_params(self) -> Dict[str, Any]:
        params: Dict[str, Any] = {"echo": self.echo}
        if self.database_url.startswith("sqlite"):
            params["connect_args"] = {"check_same_thread": False}
            if ":memory:" in self.database_url or self.database_url.rstrip("/").endswith("sqlite+aiosqlite:"):
                # one shared connection, otherwise every checkout sees an empty database
                params["poolclass"] = StaticPool
        else:
            params.update({
                "pool_pre_ping": True,
                "pool_recycle": 3600,
            })
        return params

    async def initialize(self) -> None:
        """Initialize database engine and session factory."""
        if self._engine is not None:
            logger.warning("Database engine already initialized")
            return

        logger.info("Initializing database engine...")
        self._engine = create_async_engine(self.database_url, **self._engine_params())
        self._session_factory = async_sessionmaker(
            self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def create_all(self) -> None:
        """Create every table registered on Base.metadata."""
        # model modules register their tables on import
        from findeasily.modules.user_management.infrastructure.database import models as _user_models  # noqa: F401
        from findeasily.modules.listing_management.infrastructure.database import models as _listing_models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables created")

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError("Database engine not initialized")
        return self._engine

    @property
    def session_factory(self) -> async_sessionmaker:
        if self._session_factory is None:
            raise RuntimeError("Database engine not initialized")
        return self._session_factory

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Provide a session that is rolled back on error and always closed.

        Repositories commit their own writes.
        """
        async with self.session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    async def health_check(self) -> Dict[str, Any]:
        """
        Perform database health check and return structured status.
        """
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except Exception as e:
            logger.error(f"Database health check failed: {e}")
            return {
                "status": "unhealthy",
                "error": str(e),
                "timestamp": datetime.now(timezone.utc).isoformat(),
            }
        return {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    async def close(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
            logger.info("Database connections closed")
        self._engine = None
        self._session_factory = None
