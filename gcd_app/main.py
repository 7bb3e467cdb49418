"""GCD Calculator — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map GcdError → text/html responses
    - Logging configured on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - run() reads host/port from settings; the core never depends on the server
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from gcd_app.api.error_handlers import register_error_handlers
from gcd_app.api.routes import calculator
from gcd_app.config import get_settings
from gcd_app.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"Serving on {settings.base_url}")
    yield
    logger.info("GCD Calculator shutting down")


app = FastAPI(title="GCD Calculator", version="1.0.0", lifespan=lifespan)

app.include_router(calculator.router)
register_error_handlers(app)


def run() -> None:
    """Bind to the configured address and serve until terminated."""
    settings = get_settings()
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
