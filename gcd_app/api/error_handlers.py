"""Error Handlers — global exception handlers for the GCD service.

Invariants:
    - GcdError → text/html body from user_message(), status from http_status
    - Critical GcdErrors log their ErrorContext (timestamp, debug_info) server-side only
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Two-layer handler: domain (GcdError), catch-all (Exception)
    - HTML bodies instead of JSON envelopes: every page of the app is HTML
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import HTMLResponse

from gcd_app.core.errors import GcdError, INTERNAL_ERROR_MESSAGE

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_gcd_error_handler(app)
    _register_generic_error_handler(app)


def _register_gcd_error_handler(app: FastAPI) -> None:
    """Register GCD domain error handler."""

    @app.exception_handler(GcdError)
    async def gcd_error_handler(request: Request, exc: GcdError):
        """Handle all GCD service errors."""
        extra = {
            "error_code": exc.code,
            "path": request.url.path,
            "field": exc.context.field,
        }
        if exc.recoverable:
            logger.warning(f"GcdError: {exc.message}", extra=extra)
        else:
            extra["error_timestamp"] = exc.context.timestamp.isoformat()
            extra["debug_info"] = exc.context.debug_info
            logger.error(f"GcdError: {exc.message}", extra=extra, exc_info=exc)
        return HTMLResponse(exc.user_message(), status_code=exc.http_status)


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return HTMLResponse(
            INTERNAL_ERROR_MESSAGE,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
