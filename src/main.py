"""
Production FastAPI Application
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import create_db_and_tables, dispose_engine, get_engine
from src.platform.logging.loguru_io import Logger
from src.platform.observability.tracing import TracingConfig


SERVICE_NAME = 'auditorium-booking'


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Auditorium] Starting up...')

    tracing = TracingConfig(service_name=SERVICE_NAME)
    tracing.setup()
    Logger.base.info('📊 [Auditorium] OpenTelemetry tracing configured')

    # Wire dependency injection for all modules
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Auditorium] Dependency injection wired')

    # Initialize database
    await create_db_and_tables()
    tracing.instrument_sqlalchemy(engine=get_engine())
    Logger.base.info('🗄️  [Auditorium] Database tables ready + instrumented')

    Logger.base.info('✅ [Auditorium] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Auditorium] Shutting down...')

    await dispose_engine()
    Logger.base.info('🗄️  [Auditorium] Database engine disposed')

    # Shutdown tracing (flush remaining spans)
    tracing.shutdown()

    # Unwire DI
    container.unwire()

    Logger.base.info('👋 [Auditorium] Shutdown complete')


# Create FastAPI app using shared factory
app = create_app(
    lifespan=lifespan,
    description='Auditorium seat booking - shows, bookings, cancellations with refunds',
    service_name=SERVICE_NAME,
)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
