"""
Builds the auditorium FastAPI application.

main.py and the test app both go through create_app, so they only differ in
their lifespan (tracing, DB setup) and title.
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any

from fastapi import APIRouter, FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from src.platform.config.core_setting import settings
from src.platform.constant.route_constant import BOOKING_BASE, SALES_BASE, SHOW_BASE, USER_BASE
from src.platform.database.orm_db_setting import get_engine
from src.platform.exception.exception_handlers import register_exception_handlers
from src.platform.logging.loguru_io import Logger
from src.platform.observability.tracing import TracingConfig
from src.service.auditorium.driving_adapter.http_controller import (
    booking_controller,
    sales_controller,
    show_controller,
    user_controller,
)


# (prefix, tag, router)
ROUTES: list[tuple[str, str, APIRouter]] = [
    (USER_BASE, 'user', user_controller.router),
    (SHOW_BASE, 'show', show_controller.router),
    (BOOKING_BASE, 'booking', booking_controller.router),
    (SALES_BASE, 'sales', sales_controller.router),
]


def create_app(
    *,
    lifespan: Callable[[FastAPI], AbstractAsyncContextManager[Any]],
    title_suffix: str = '',
    description: str = 'Auditorium seat booking',
    service_name: str = 'auditorium-booking',
) -> FastAPI:
    """
    Args:
        lifespan: startup/shutdown context (DB tables, DI wiring, tracing)
        title_suffix: appended to PROJECT_NAME, e.g. ' (Test)'
        service_name: resource name reported to the tracer
    """
    app = FastAPI(
        title=f'{settings.PROJECT_NAME}{title_suffix}',
        description=description,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    # Must run before the routers are mounted
    TracingConfig(service_name=service_name).instrument_fastapi(app=app)

    app.add_middleware(
        CORSMiddleware,  # type: ignore
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )
    register_exception_handlers(app)

    for prefix, tag, router in ROUTES:
        app.include_router(router, prefix=prefix, tags=[tag])

    _register_ops_endpoints(app)
    return app


def _register_ops_endpoints(app: FastAPI) -> None:
    @app.get('/health')
    async def health_check() -> JSONResponse:
        """Liveness plus a round trip to the database."""
        try:
            async with get_engine().connect() as conn:
                await conn.execute(text('SELECT 1'))
        except SQLAlchemyError as e:
            Logger.base.warning(f'🩺 [HEALTH] database unreachable: {type(e).__name__}')
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={'status': 'degraded', 'service': settings.PROJECT_NAME, 'database': 'down'},
            )
        return JSONResponse(
            content={'status': 'healthy', 'service': settings.PROJECT_NAME, 'database': 'up'}
        )

    @app.get('/metrics')
    async def get_metrics() -> PlainTextResponse:
        return PlainTextResponse(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
