"""
Commerce Backend — FastAPI Application Factory
===============================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app(settings) returns a configured FastAPI
       instance owning its own Database (engine + pool).
Who:   uvicorn imports `app.main:app`; tests call create_app() directly.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware:  Req ID → Logging → GZip → CORS        │
    │                                                     │
    │  Routes (/api):                                     │
    │    users · products · orders · deliveries · couriers│
    │  Routes:  /health · /docs · /redoc · /openapi.json  │
    │                                                     │
    │  Exception Handlers:                                │
    │    Validation→400  RequestValidation→422            │
    │    NotFound→404    Conflict/Inventory→409           │
    │    Database/Unexpected→500                          │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Validate configuration for production
    3. Log startup complete

    Shutdown (uvicorn has already stopped accepting and drained requests):
    1. Dispose the database engine (close all pooled connections)
    2. Log shutdown complete
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app import __version__
from app.config import Settings, settings as default_settings
from app.database import Database
from app.exceptions import (
    ConflictError,
    DatabaseError,
    InsufficientInventoryError,
    NotFoundError,
    ValidationError,
)
from app.middleware.logging import RequestLoggingMiddleware
from app.middleware.request_id import RequestIDMiddleware, request_id_var
from app.routes import couriers, deliveries, health, orders, products, users

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(log_level: str) -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    When:   Called once during app startup.
    """
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),  # Docker captures stdout
        ],
        force=True,
    )

    # Third-party libraries that log every operation at DEBUG/INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: logging, configuration check.
    Shutdown: close the connection pool.
    """
    app_settings: Settings = app.state.settings

    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging(app_settings.log_level)
    logger.info("=" * 60)
    logger.info("Commerce API starting up (environment=%s)...", app_settings.environment)

    try:
        app_settings.validate_required_for_production()
    except ValueError as e:
        logger.error("Configuration error: %s", str(e))
        logger.error("Fix the configuration and restart the server.")

    logger.info("Server ready at http://%s:%d", app_settings.backend_host, app_settings.backend_port)
    logger.info("API docs: http://%s:%d/docs", app_settings.backend_host, app_settings.backend_port)
    logger.info("=" * 60)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Commerce API shutting down...")
    await app.state.database.dispose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def error_response(status_code: int, message: str, details: Any = None, headers=None) -> JSONResponse:
    """Build the `{success: false, error, request_id}` envelope."""
    content = {
        "success": False,
        "error": message,
        "request_id": request_id_var.get(""),
    }
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes and the error envelope.

    Handler hierarchy:
        ValidationError             → 400 Bad Request
        NotFoundError (+ Product)   → 404 Not Found
        ConflictError               → 409 Conflict
        InsufficientInventoryError  → 409 Conflict (requested/available in details)
        RequestValidationError      → 422 Unprocessable Entity (field errors in details)
        HTTPException (routing)     → its own status (unknown path, wrong method)
        DatabaseError               → 500 Internal Server Error
        Exception (fallback)        → 500 Internal Server Error

    Security: handlers never put stack traces or SQL in the response body.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.message)
        return error_response(400, exc.message, details=exc.context or None)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return error_response(404, exc.message)

    @app.exception_handler(ConflictError)
    async def handle_conflict(request: Request, exc: ConflictError):
        return error_response(409, exc.message)

    @app.exception_handler(InsufficientInventoryError)
    async def handle_insufficient_inventory(request: Request, exc: InsufficientInventoryError):
        return error_response(
            409,
            exc.message,
            details={"requested": exc.requested, "available": exc.available},
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        return error_response(
            422,
            "Request validation failed",
            details=jsonable_encoder(exc.errors()),
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return error_response(500, "An internal error occurred. Please try again later.")

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Catch-all: full traceback in the log, generic message to the client."""
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return error_response(500, "An unexpected error occurred. Please try again or contact support.")


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: Configuration to build against; defaults to the
                      environment-derived `settings`.

    The Database is constructed here (no connection is opened until first
    use) and stored on app.state, where get_db_session finds it.
    """
    app_settings = app_settings or default_settings

    app = FastAPI(
        title="eCommerce API",
        description=(
            "CRUD backend for users, products, orders, deliveries and couriers. "
            "Order placement checks and deducts product stock atomically."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.state.settings = app_settings
    app.state.database = Database(app_settings)

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition (last added runs first)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(users.router)
    app.include_router(products.router)
    app.include_router(orders.router)
    app.include_router(deliveries.router)
    app.include_router(couriers.router)
    app.include_router(health.router)

    return app


# uvicorn app.main:app
app = create_app()
