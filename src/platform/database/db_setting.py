"""
SQLAlchemy async engine and session management

This module provides:
1. AsyncEngineManager: keeps one engine per running event loop
2. Base: declarative base for every ORM model of the service
3. Database: session source handed to the unit of work through the DI container
"""

import asyncio
from typing import Any, Optional

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
    Manages the SQLAlchemy async engine with event loop awareness.

    Engines are bound to the loop they were created on; when the current loop
    changes (test clients, worker restarts) a fresh engine is created to avoid
    "Task got Future attached to a different loop" errors.
    """

    def __init__(self) -> None:
        self._engine: Optional[AsyncEngine] = None
        self._session_maker: Optional[async_sessionmaker[AsyncSession]] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None

    def get_engine(self) -> AsyncEngine:
        try:
            current_loop = asyncio.get_running_loop()
        except RuntimeError:
            # No event loop running, create engine without loop tracking
            if self._engine is None:
                self._engine = self._create_engine()
            return self._engine

        if self._loop is not current_loop:
            if self._engine is not None:
                Logger.base.warning('🔄 [DB] Event loop changed, replacing engine...')
            self._engine = self._create_engine()
            self._session_maker = None
            self._loop = current_loop

        return self._engine  # type: ignore[return-value]

    def get_session_maker(self) -> async_sessionmaker[AsyncSession]:
        engine = self.get_engine()
        if self._session_maker is None or self._session_maker.kw.get('bind') is not engine:
            self._session_maker = async_sessionmaker(
                engine,
                class_=AsyncSession,
                expire_on_commit=False,
            )
        return self._session_maker

    @staticmethod
    def _create_engine() -> AsyncEngine:
        engine_kwargs: dict[str, Any] = {'echo': False}
        if not settings.IS_SQLITE:
            engine_kwargs |= {
                'pool_size': settings.DB_POOL_SIZE,
                'max_overflow': settings.DB_POOL_MAX_OVERFLOW,
                'pool_timeout': settings.DB_POOL_TIMEOUT,
                'pool_recycle': settings.DB_POOL_RECYCLE,
                'pool_pre_ping': settings.DB_POOL_PRE_PING,
            }
        return create_async_engine(settings.DATABASE_URL_ASYNC, **engine_kwargs)


_engine_manager = AsyncEngineManager()


def get_engine() -> AsyncEngine:
    return _engine_manager.get_engine()


def get_session_maker() -> async_sessionmaker[AsyncSession]:
    return _engine_manager.get_session_maker()


class Base(DeclarativeBase):
    pass


async def create_db_and_tables() -> None:
    """Create database tables if they don't exist"""
    # Model modules register their tables on Base.metadata when imported
    from src.service.shop.driven_adapter.model import (  # noqa: F401
        cart_line_model,
        product_model,
        user_model,
    )

    try:
        async with get_engine().begin() as conn:
            await conn.run_sync(Base.metadata.create_all, checkfirst=True)
    except Exception as e:
        error_msg = str(e).lower()
        if any(keyword in error_msg for keyword in ['already exists', 'duplicate key']):
            Logger.base.info('Tables already exist, skipping creation')
        else:
            Logger.base.error(f'Error creating tables: {e}')
            raise


class Database:
    """Session source for dependency injection, delegating to AsyncEngineManager"""

    @property
    def session_maker(self) -> async_sessionmaker[AsyncSession]:
        return get_session_maker()

    async def dispose(self) -> None:
        await get_engine().dispose()
