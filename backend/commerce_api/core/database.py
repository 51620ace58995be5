"""
Entity store connection (SQLAlchemy async)

The engine and session factory are built from Settings by create_app()
and kept on app.state, so each application instance owns its own pool.
Route handlers get one AsyncSession per request through get_session().

Drivers:
- postgresql+asyncpg://... (production)
- sqlite+aiosqlite:///... (development and tests)
"""
import logging
import time
from datetime import datetime, timezone
from typing import AsyncIterator, Optional

from fastapi import Request
from sqlalchemy import DateTime, text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.types import TypeDecorator

from .config import Settings

logger = logging.getLogger(__name__)

# Base for mapped models
Base = declarative_base()


class UTCDateTime(TypeDecorator):
    """
    Timezone-aware datetime column stored as UTC

    SQLite keeps no offset, so values are converted to UTC on the way in
    and naive values read back are tagged as UTC.
    """
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: Optional[datetime], dialect) -> Optional[datetime]:
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value

    def process_result_value(self, value: Optional[datetime], dialect) -> Optional[datetime]:
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


def build_engine(settings: Settings) -> AsyncEngine:
    """
    Create the async engine for DATABASE_URL

    pool_pre_ping checks connections before handing them out, which
    recovers from connections dropped by the server between requests.
    """
    logger.info(f"Creating database engine for {settings.DATABASE_URL.split('://', 1)[0]}")
    return create_async_engine(
        settings.DATABASE_URL,
        echo=settings.DATABASE_ECHO,
        pool_pre_ping=True,
    )


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory; objects stay readable after commit"""
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


async def init_db(engine: AsyncEngine) -> None:
    """Create all tables that don't exist yet"""
    # Registers the mapped classes on Base.metadata
    from commerce_api import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema ready")


async def check_connection(engine: AsyncEngine) -> Optional[float]:
    """
    Run SELECT 1 against the store

    Returns:
        Round-trip latency in ms

    Raises:
        sqlalchemy.exc.SQLAlchemyError / OSError if the store is unreachable
    """
    start = time.perf_counter()
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))
    return round((time.perf_counter() - start) * 1000, 2)


async def get_session(request: Request) -> AsyncIterator[AsyncSession]:
    """
    FastAPI dependency yielding one SQLAlchemy AsyncSession per request

    Usage:
        @router.get("/items")
        async def read_items(session: AsyncSession = Depends(get_session)):
            ...
    """
    session_factory: async_sessionmaker[AsyncSession] = request.app.state.session_factory
    async with session_factory() as session:
        yield session
