"""
Bookstore Backend — FastAPI Application Factory
===================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   uvicorn (`uvicorn bookstore.main:app`) and the test suite, which
       builds apps against temporary databases.

Application Architecture:
    ┌──────────────────────────────────────────────────────┐
    │                    FastAPI App                       │
    │                                                      │
    │  app.state: settings, database (store), file_service │
    │                                                      │
    │  Middleware: Request ID → Logging → GZip → CORS      │
    │                                                      │
    │  Routes: / /health /books /api/book /upload /uploads │
    │          /purchase /purchased-books /register /login │
    │          /user /reviews                              │
    │                                                      │
    │  Exception Handlers:                                 │
    │  400 validation │ 401 auth │ 404 │ 409 │ 500         │
    └──────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  logging → upload directory → schema + seed data (once)
    Shutdown: dispose database engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from bookstore import __version__
from bookstore.config import Settings, settings as default_settings
from bookstore.database import Database
from bookstore.exceptions import (
    AuthenticationError,
    BookstoreError,
    ConflictError,
    DatabaseError,
    FileStorageError,
    NotFoundError,
    ValidationError,
)
from bookstore.middleware.logging import RequestLoggingMiddleware
from bookstore.middleware.request_id import RequestIDMiddleware, request_id_var
from bookstore.routes import books, health, purchases, reviews, uploads, users
from bookstore.services.file_service import FileService

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str) -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during startup, before any other initialization.
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup sequence:
        1. Setup logging
        2. Create the upload directory
        3. Create tables and insert seed rows (single-shot)

    Shutdown sequence:
        1. Dispose database engine (close pooled connections)
    """
    config: Settings = app.state.settings
    database: Database = app.state.database
    file_service: FileService = app.state.file_service

    setup_logging(config.log_level)
    logger.info("Bookstore Backend starting up...")

    upload_root = file_service.ensure_root()
    logger.info("Upload directory: %s", upload_root)

    await database.initialize(seed=config.seed_database)
    logger.info("Database ready: %s", config.database_url)
    logger.info("Server ready at http://%s:%d", config.backend_host, config.backend_port)

    yield

    logger.info("Bookstore Backend shutting down...")
    await database.dispose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_response(status_code: int, error: str, message: str, details: Optional[dict] = None):
    content = {
        "error": error,
        "message": message,
        "request_id": request_id_var.get(""),
    }
    if details:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes and response bodies.

    Handler hierarchy:
        ValidationError / RequestValidationError → 400
        FileStorageError                         → 400 (generic message)
        AuthenticationError                      → 401
        NotFoundError                            → 404
        ConflictError                            → 409
        DatabaseError / BookstoreError           → 500
        Exception (fallback)                     → 500

    Internal details (stack traces, SQL, file paths) are logged, never returned.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("Validation error: %s", exc.message)
        return _error_response(400, "validation_error", exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        """Malformed JSON or missing/ill-typed fields: 400 instead of FastAPI's 422."""
        errors = exc.errors()
        fields = [".".join(str(part) for part in err.get("loc", ())) for err in errors]
        logger.warning("Request validation failed: %s", fields)
        return _error_response(
            400,
            "validation_error",
            "Request body or parameters are missing or invalid",
            details={"fields": fields},
        )

    @app.exception_handler(FileStorageError)
    async def handle_file_storage_error(request: Request, exc: FileStorageError):
        logger.error("File storage error: %s | Context: %s", exc.message, exc.context)
        return _error_response(400, "upload_failed", exc.message)

    @app.exception_handler(AuthenticationError)
    async def handle_authentication_error(request: Request, exc: AuthenticationError):
        return _error_response(401, "unauthorized", exc.message)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error_response(404, "not_found", exc.message)

    @app.exception_handler(ConflictError)
    async def handle_conflict(request: Request, exc: ConflictError):
        logger.info("Conflict: %s | Context: %s", exc.message, exc.context)
        return _error_response(409, "conflict", exc.message)

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        logger.error("Database error: %s | Context: %s", exc.message, exc.context)
        return _error_response(
            500, "server_error", "An internal error occurred. Please try again later."
        )

    @app.exception_handler(BookstoreError)
    async def handle_bookstore_error(request: Request, exc: BookstoreError):
        logger.error("Unhandled application error: %s | Context: %s", exc.message, exc.context)
        return _error_response(500, "server_error", exc.message)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error("Unexpected error: %s", str(exc), exc_info=True)
        return _error_response(
            500,
            "internal_server_error",
            "An unexpected error occurred. Please try again or contact support.",
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Configuration to use; defaults to the environment-driven
                  singleton. Tests pass their own to isolate the database
                  and upload directory.

    The store objects are built here and attached to `app.state`; handlers
    reach them through dependencies rather than module globals.
    """
    config = settings or default_settings

    app = FastAPI(
        title="Bookstore API",
        description=(
            "Bookstore backend: catalog, user accounts, purchases, reviews "
            "and image uploads."
        ),
        version=__version__,
        lifespan=lifespan,
    )

    app.state.settings = config
    app.state.database = Database(config.database_url, echo=config.log_level == "DEBUG")
    app.state.file_service = FileService(config.upload_dir)

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added = first to execute
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins_list,
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
    app.include_router(health.router)
    app.include_router(books.router)
    app.include_router(uploads.router)
    app.include_router(purchases.router)
    app.include_router(users.router)
    app.include_router(reviews.router)

    return app


# uvicorn expects `bookstore.main:app` to be importable
app = create_app()
