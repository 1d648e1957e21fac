"""Demo Server API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to {"error": ...} JSON responses
    - CORS only installed when origins are configured
    - Logging configured on startup via lifespan context manager
    - create_app() builds a fresh instance; module-level `app` is what uvicorn serves
    - The Settings an app is built with live on app.state and drive lifespan and routes
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import echo, greeting, health
from app.config import Settings, get_settings
from app.core.messages import startup_message
from app.infrastructure.observability import setup_logging
from app.schemas.responses import ERROR_RESPONSES

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    logger.info(startup_message(settings.port), extra={"port": settings.port})
    yield
    logger.info("Demo server shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the ASGI application with routes and error handlers."""
    settings = settings or get_settings()
    app = FastAPI(title="Demo Server", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # Routes: explicit registration
    for module in (health, greeting, echo):
        app.include_router(module.router, responses=ERROR_RESPONSES)

    register_error_handlers(app)
    return app


app = create_app()
