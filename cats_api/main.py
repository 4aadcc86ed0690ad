"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (one per bounded context), all under /api/v1
- The exception translator (handlers plus unhandled-error middleware)
- Security and logging middleware, CORS, rate limiting
- Logging configuration and database schema creation

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cats_api.core.config import settings
from cats_api.infrastructure.db.session import init_db
from cats_api.interfaces.ai.router import router as ai_router
from cats_api.interfaces.auth.router import router as auth_router
from cats_api.interfaces.cats.router import router as cats_router
from cats_api.interfaces.health import root_router
from cats_api.interfaces.health import router as health_router
from cats_api.shared.errors.handlers import ExceptionTranslator, register_error_handlers
from cats_api.shared.logging import configure_logging
from cats_api.shared.middleware import (
    RequestLoggingMiddleware,
    ResponseHeadersMiddleware,
    UnhandledErrorMiddleware,
)
from cats_api.shared.security.rate_limiting import setup_rate_limiting

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: make sure the schema exists before serving."""
    init_db()
    logger.info(
        "%s %s started (environment=%s)",
        settings.project_name,
        settings.version,
        settings.environment,
    )
    yield
    logger.info("%s shutting down", settings.project_name)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and middleware.
    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(
        level=settings.log_level,
        environment=settings.environment,
        log_dir=settings.log_dir,
    )

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    # --- Error Handling ---
    translator = ExceptionTranslator(
        logging.getLogger("cats_api.errors"),
        expose_details=not settings.is_production,
    )
    register_error_handlers(app, translator)

    # --- Rate Limiting ---
    setup_rate_limiting(app, translator)

    # --- Middleware (last added runs first) ---
    app.add_middleware(UnhandledErrorMiddleware, translator=translator)
    app.add_middleware(ResponseHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    # --- Routers ---
    app.include_router(health_router, prefix=API_PREFIX)
    app.include_router(auth_router, prefix=API_PREFIX)
    app.include_router(cats_router, prefix=API_PREFIX)
    app.include_router(ai_router, prefix=API_PREFIX)
    app.include_router(root_router)

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    uvicorn.run("cats_api.main:app", host="0.0.0.0", port=settings.port)
