"""
HeartMap Backend — FastAPI Application Factory
===============================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn heartmap.main:app).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware:   Request ID → Access Logging          │
    │                                                     │
    │  Routes:       POST /api/hearts   GET /api/hearts   │
    │                GET /health                          │
    │                                                     │
    │  Exception Handlers:                                │
    │    ValidationError → 400   DatabaseError → 500      │
    │    Exception       → 500                            │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  logging, configuration check, optional table creation
    Shutdown: close the geocoder HTTP client, dispose the database engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from heartmap import __version__
from heartmap.config import settings
from heartmap.database import create_tables, dispose_engine
from heartmap.exceptions import DatabaseError, HeartMapError, ValidationError
from heartmap.middleware.logging import RequestLoggingMiddleware
from heartmap.middleware.request_id import RequestIDMiddleware, request_id_var
from heartmap.routes import health, hearts
from heartmap.services.nominatim_service import geocoder

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure root logging once, before anything else logs.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Per-request noise from libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    logger.info("HeartMap Backend %s starting up...", __version__)

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        # Keep serving: the defaults work for local development
        logger.warning("%s", str(e))

    if settings.db_create_tables:
        await create_tables()
        logger.info("Database tables ensured")

    logger.info("Geocoder: %s (zoom=%d, lang=%s)",
                settings.geocoder_base_url, settings.geocoder_zoom, settings.geocoder_language)
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    logger.info("HeartMap Backend shutting down...")
    await geocoder.aclose()
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map application exceptions to {"error": message} responses.

    ValidationError → 400 (static message, logged as a client error)
    DatabaseError   → 500 (per-operation generic message; cause logged by the service)
    HeartMapError   → 500
    Exception       → 500 (stack trace logged server-side only)
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning(
            "[%s] Validation error: %s | Missing: %s",
            request_id_var.get(""),
            exc.message,
            ", ".join(exc.fields) or "-",
        )
        return JSONResponse(status_code=400, content={"error": exc.message})

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        logger.error(
            "[%s] Database error: %s | Context: %s",
            request_id_var.get(""),
            exc.message,
            exc.context,
        )
        return JSONResponse(status_code=500, content={"error": exc.message})

    @app.exception_handler(HeartMapError)
    async def handle_app_error(request: Request, exc: HeartMapError):
        logger.error("[%s] Application error: %s", request_id_var.get(""), exc.message)
        return JSONResponse(status_code=500, content={"error": exc.message})

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(
            "[%s] Unexpected error: %s",
            request_id_var.get(""),
            str(exc),
            exc_info=exc,
        )
        return JSONResponse(status_code=500, content={"error": "Internal server error"})


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Tests call this for a fresh instance and override the store and geocoder
    dependencies on it.
    """
    app = FastAPI(
        title="HeartMap API",
        description=(
            "Drop geotagged hearts on a shared map. Each heart is enriched with the "
            "country it landed in and listed newest first."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Last added executes first: RequestID → Logging → route
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(hearts.router)
    app.include_router(health.router)

    return app


app = create_app()
