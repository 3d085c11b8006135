"""Process-wide engine and session factory.

The engine is created lazily on first use and shared by every session.
"""

from __future__ import annotations

import threading
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from infrastructure.database.engines import create_engine_from_settings
from infrastructure.settings import get_database_settings

_engine: AsyncEngine | None = None
_sessionmaker: async_sessionmaker[AsyncSession] | None = None
_engine_lock = threading.Lock()


def get_engine() -> AsyncEngine:
    """Get the shared database engine, creating it on first call."""
    global _engine, _sessionmaker
    if _engine is None:
        with _engine_lock:
            # Double-check after acquiring lock
            if _engine is None:
                _engine = create_engine_from_settings(get_database_settings())
                _sessionmaker = async_sessionmaker(
                    _engine,
                    expire_on_commit=False,
                    class_=AsyncSession,
                )
    return _engine


def get_sessionmaker() -> async_sessionmaker[AsyncSession]:
    """Get the shared session factory."""
    get_engine()
    assert _sessionmaker is not None
    return _sessionmaker


@asynccontextmanager
async def session_scope() -> AsyncIterator[AsyncSession]:
    """Yield a session that is closed afterwards.

    Repositories commit their own writes; anything left uncommitted when
    the caller is done is rolled back on close.
    """
    async with get_sessionmaker()() as session:
        yield session


async def dispose_engine() -> None:
    """Close all pooled connections and forget the engine."""
    global _engine, _sessionmaker
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _sessionmaker = None
