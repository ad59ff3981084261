"""
SQLAlchemy async engine and session management

This module provides:
1. AsyncEngineManager: one engine per running event loop
2. Base: declarative base for every ORM model
3. Database: session factory provider for dependency injection
4. get_async_session: FastAPI dependency used by the Unit of Work
"""

import asyncio
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Optional

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger


class AsyncEngineManager:
    """
    Keeps the async engine bound to the current event loop.

    TestClient and CLI scripts each run their own loop; reusing an engine
    across loops raises "Future attached to a different loop".
    """

    def __init__(self) -> None:
        self._engine: Optional[AsyncEngine] = None
        self._session_maker: Optional[async_sessionmaker[AsyncSession]] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None

    def get_engine(self) -> AsyncEngine:
        try:
            current_loop = asyncio.get_running_loop()
        except RuntimeError:
            current_loop = None

        if self._engine is None or (current_loop is not None and self._loop is not current_loop):
            if self._engine is not None:
                Logger.base.warning('🔄 [DB] Event loop changed, recreating engine')
            Logger.base.info(f'🔗 [DB] Creating engine for event loop {id(current_loop)}')
            self._engine = self._create_engine()
            self._session_maker = None
            self._loop = current_loop

        return self._engine

    def get_session_maker(self) -> async_sessionmaker[AsyncSession]:
        engine = self.get_engine()
        if self._session_maker is None:
            self._session_maker = async_sessionmaker(
                engine,
                class_=AsyncSession,
                expire_on_commit=False,
            )
        return self._session_maker

    async def dispose(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
        self._engine = None
        self._session_maker = None
        self._loop = None

    @staticmethod
    def _create_engine() -> AsyncEngine:
        url = settings.DATABASE_URL_ASYNC
        options: dict[str, Any] = {}
        if make_url(url).get_backend_name() != 'sqlite':
            options = {
                'pool_size': settings.DB_POOL_SIZE,
                'max_overflow': settings.DB_POOL_MAX_OVERFLOW,
                'pool_timeout': settings.DB_POOL_TIMEOUT,
                'pool_recycle': settings.DB_POOL_RECYCLE,
                'pool_pre_ping': settings.DB_POOL_PRE_PING,
            }
        return create_async_engine(url, echo=False, **options)


# Global engine manager
_engine_manager = AsyncEngineManager()


def get_engine() -> AsyncEngine:
    return _engine_manager.get_engine()


def get_session_maker() -> async_sessionmaker[AsyncSession]:
    return _engine_manager.get_session_maker()


async def dispose_engine() -> None:
    await _engine_manager.dispose()


class Base(DeclarativeBase):
    pass


async def create_db_and_tables() -> None:
    """Create database tables if they don't exist"""
    # Registers every model on Base.metadata
    import src.service.auditorium.driven_adapter.model  # noqa: F401

    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all, checkfirst=True)


async def drop_db_and_tables() -> None:
    import src.service.auditorium.driven_adapter.model  # noqa: F401

    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Provide async session for dependency injection

    The session_maker context manager closes the session and rolls back
    anything left uncommitted on exit.
    """
    async with get_session_maker()() as session:
        yield session


class Database:
    """Session factory provider for repositories wired through the DI container"""

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        async with get_session_maker()() as session:
            yield session
