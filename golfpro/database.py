"""Async access to the hosted Supabase Postgres database.

The schema is owned by the Supabase project. This module maps nothing by
itself; it provides the declarative base the models attach to and the
session dependency the routers use.
"""

import logging
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from golfpro.config import Settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Declarative base for the instructor tables."""


def create_engine_for(settings: Settings) -> AsyncEngine:
    """
    Build the async engine for ``settings.database_url``.

    The Supabase pooler runs in transaction mode, which does not support
    prepared statements, so the asyncpg statement cache size is configurable.
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_pool_size * 2,
        connect_args={"statement_cache_size": settings.database_statement_cache_size},
    )


engine = create_engine_for(Settings())

async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Yield a session for one request.

    Services commit their own writes; anything left open when the request
    fails is rolled back.
    """
    async with async_session_maker() as session:
        try:
            yield session
        except Exception:
            logger.warning("Rolling back database session after request error")
            await session.rollback()
            raise
