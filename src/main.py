"""
Production FastAPI Application

Catalog, account and cart endpoints over a single relational store.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.db_setting import create_db_and_tables
from src.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Shop Service] Starting up...')

    # Wire dependency injection for all modules
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Shop Service] Dependency injection wired')

    if settings.DB_CREATE_TABLES_ON_STARTUP:
        await create_db_and_tables()
        Logger.base.info('🗄️  [Shop Service] Database tables ensured')

    Logger.base.info('✅ [Shop Service] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Shop Service] Shutting down...')

    await container.database().dispose()
    Logger.base.info('🗄️  [Shop Service] Database engine disposed')

    # Unwire DI
    container.unwire()

    Logger.base.info('👋 [Shop Service] Shutdown complete')


# Create FastAPI app using shared factory
app = create_app(
    lifespan=lifespan,
    description='E-Commerce Shop Service - product catalog, customer accounts and cart reservation',
)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
