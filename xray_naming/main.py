"""
FastAPI Application Entry Point.
Owns: App factory, naming strategy wiring, middleware setup.

Run with:
    uvicorn xray_naming.main:create_app --factory
"""

from typing import Optional

from fastapi import FastAPI

from shared.logging import configure_root_logger
from xray_naming.config import Settings, get_settings
from xray_naming.errors import register_exception_handlers
from xray_naming.middleware import LoggingMiddleware, SegmentNamingMiddleware
from xray_naming.routes import health_router
from xray_naming.strategy import SegmentNamingStrategy, build_strategy


def create_app(
    settings: Optional[Settings] = None,
    strategy: Optional[SegmentNamingStrategy] = None,
) -> FastAPI:
    settings = settings or get_settings()
    configure_root_logger("naming", settings.log_level)

    # Resolved once; every request shares this instance
    if strategy is None:
        strategy = build_strategy(settings)

    app = FastAPI(
        title="xray-naming",
        version="0.1.0",
        docs_url="/docs" if settings.service_env != "prod" else None,
        redoc_url="/redoc" if settings.service_env != "prod" else None,
        openapi_url="/openapi.json" if settings.service_env != "prod" else None,
    )
    app.state.naming_strategy = strategy

    # Middleware (order matters: first added = innermost)
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(SegmentNamingMiddleware, strategy=strategy)

    # Exception handlers
    register_exception_handlers(app)

    # Routers
    app.include_router(health_router)

    return app
