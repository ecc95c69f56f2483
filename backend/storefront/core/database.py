"""
Database engine and session management.

Async SQLAlchemy engine built from settings. PostgreSQL (asyncpg) in
deployment, SQLite (aiosqlite) for local runs and tests.
"""

from datetime import datetime, timezone
from typing import Any, AsyncGenerator

from loguru import logger
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from storefront.core.config import settings


class Base(DeclarativeBase):
    """Declarative base for all models."""


def _engine_options(url: str) -> dict[str, Any]:
    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite":
        options: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
        if parsed.database in (None, "", ":memory:"):
            # One shared connection keeps an in-memory database alive
            options["poolclass"] = StaticPool
        return options
    return {
        "pool_size": settings.database_pool_size,
        "max_overflow": settings.database_max_overflow,
        "pool_pre_ping": True,
    }


engine = create_async_engine(
    settings.database_url,
    echo=settings.debug,
    **_engine_options(settings.database_url),
)

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency yielding a session per request."""
    async with async_session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def init_db() -> None:
    """Create tables for all registered models."""
    # Register models on Base.metadata
    from storefront.models import shop, user  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info(f"Database ready ({engine.url.get_backend_name()})")


async def close_db() -> None:
    """Dispose of the connection pool."""
    await engine.dispose()


def utcnow() -> datetime:
    """Timezone-aware default for timestamp columns."""
    return datetime.now(timezone.utc)
