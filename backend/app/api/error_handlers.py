"""Error Handlers: global exception handlers for the demo server API.

Invariants:
    - DemoServerError → {"error": <public message>} with its http_status
    - Routing 404/405 → {"error": "Rota não encontrada"}, status 404
    - Exception (catch-all) → {"error": "Algo deu errado!"}, status 500, traceback logged only

Design Decisions:
    - Three-layer handler: domain (DemoServerError), routing (HTTPException), catch-all (Exception)
    - Registered from main.create_app() so each app instance gets the same handlers
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.errors import DemoServerError, ErrorSeverity, RouteNotFoundError
from app.core.messages import INTERNAL_ERROR_MESSAGE

logger = logging.getLogger(__name__)

_ROUTING_MISS = (
    status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED,
)

_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_demo_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_demo_error_handler(app: FastAPI) -> None:
    """Register domain error handler."""

    @app.exception_handler(DemoServerError)
    async def demo_error_handler(request: Request, exc: DemoServerError):
        return _demo_error_response(request, exc)


def _register_http_error_handler(app: FastAPI) -> None:
    """Register Starlette HTTPException handler (routing misses)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        """Unmatched method+path pairs all surface as 404."""
        if exc.status_code in _ROUTING_MISS:
            return _demo_error_response(
                request, RouteNotFoundError(request.method, request.url.path),
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.method} {request.url.path}: {exc}",
            exc_info=exc,
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": status.HTTP_500_INTERNAL_SERVER_ERROR,
                "error_code": "INTERNAL_ERROR",
            },
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": INTERNAL_ERROR_MESSAGE},
        )


def _demo_error_response(
    request: Request, exc: DemoServerError,
) -> JSONResponse:
    """Log a domain error and build its public response."""
    logger.log(
        _LOG_LEVELS[exc.severity],
        f"{type(exc).__name__}: {exc.message}",
        extra={
            "error_code": exc.code,
            "category": exc.category.value,
            "method": request.method,
            "path": request.url.path,
            "status_code": exc.http_status,
        },
    )
    return JSONResponse(
        status_code=exc.http_status, content=exc.to_response(),
    )
