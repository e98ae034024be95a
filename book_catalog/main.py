"""
FastAPI Application Entry Point

This module creates and configures the FastAPI application.

Key Concepts:
=============

1. Application Factory Pattern
   - create_app() returns a configured app

2. Lifespan Events
   - startup/shutdown logging around the application's lifetime

3. Middleware Stack
   - Rate limiting (slowapi)
   - CORS

4. Exception Handlers
   - Every framework error is converted to a ServiceError and rendered by
     book_catalog.services.envelope.error_response, so clients always get
     the standard envelope
   - Internal errors are logged with their traceback and answered with a
     fixed generic message
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from book_catalog import __version__
from book_catalog.config import get_settings
from book_catalog.errors import (
    internal_error,
    method_not_allowed,
    not_found,
    type_mismatch,
    validation_failed,
)
from book_catalog.routers import books_router
from book_catalog.schemas.envelope import FieldError
from book_catalog.services.envelope import error_response
from book_catalog.services.rate_limiter import limiter, rate_limit_exceeded_handler

# =============================================================================
# Logging Configuration
# =============================================================================
settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Parameters parsed outside the request body; a parse failure there is a
# type mismatch rather than a field validation failure.
PARAMETER_LOCATIONS = {"path", "query", "header", "cookie"}

RESOURCE_NOT_FOUND = "Resource not found."


def _body_field(loc: tuple) -> str | None:
    """("body", "year") → "year"; ("body",) → None."""
    parts = [str(part) for part in loc[1:]]
    return ".".join(parts) or None


# =============================================================================
# Lifespan Events
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Code before yield: Runs on startup
    Code after yield: Runs on shutdown
    """
    logger.info(f"Starting {settings.app_name}...")
    logger.info(f"Environment: {settings.environment}, debug: {settings.debug}")
    logger.info(f"API version: {settings.api_version}")

    yield

    logger.info(f"Shutting down {settings.app_name}...")


# =============================================================================
# Application Factory
# =============================================================================
def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.app_name,
        description="""
## Book Catalog API

A RESTful API for managing a catalog of books.

### Features
- **Books**: list, get, create and delete
- **Lookups**: by exact author, by title substring
- **Pagination**: `page` (from 1) and `size` (at least 5) on every list

Every response uses the same envelope:
`timestamp`, `status`, `message`, and when present `errors`, `data`, `metadata`.
        """,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # -------------------------------------------------------------------------
    # Rate Limiting
    # -------------------------------------------------------------------------
    # The limiter lives on app.state so slowapi's decorators can find it
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # -------------------------------------------------------------------------
    # CORS Middleware
    # -------------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------
    @app.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """
        Handle inputs FastAPI could not parse.

        - Path/query parameters of the wrong type → 400 type mismatch,
          one field error per parameter (name only)
        - Unparseable body fields → 400 validation failure,
          one field error per field (name and message)
        """
        errors = exc.errors()

        mismatched = [
            str(error["loc"][-1])
            for error in errors
            if error["loc"] and error["loc"][0] in PARAMETER_LOCATIONS
        ]
        if mismatched:
            logger.info(f"Invalid parameter type: {mismatched}")
            return error_response(type_mismatch(mismatched))

        field_errors = [
            FieldError(
                field=None if error["type"] == "json_invalid" else _body_field(error["loc"]),
                message=error["msg"],
            )
            for error in errors
        ]
        logger.info(f"Request body could not be parsed: {len(field_errors)} error(s)")
        return error_response(validation_failed(field_errors))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        """Handle routing errors raised by Starlette (unknown path, wrong method)."""
        if exc.status_code == 405:
            return error_response(method_not_allowed(request.method), headers=exc.headers)
        if exc.status_code == 404:
            return error_response(not_found(RESOURCE_NOT_FOUND))

        logger.error(f"Unexpected HTTP error {exc.status_code}: {exc.detail}")
        return error_response(internal_error())

    @app.exception_handler(SQLAlchemyError)
    async def sqlalchemy_exception_handler(
        request: Request,
        exc: SQLAlchemyError,
    ) -> JSONResponse:
        """
        Handle SQLAlchemy database errors.

        Logs the actual error for debugging while hiding details from users.
        """
        logger.error(f"Database error: {exc}", exc_info=True)
        return error_response(internal_error())

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Catch-all exception handler. The client only sees a generic message."""
        logger.error(f"Unhandled error: {exc}", exc_info=True)
        return error_response(internal_error())

    # -------------------------------------------------------------------------
    # Register Routers
    # -------------------------------------------------------------------------
    # prefix="/api/v1" creates versioned URLs: /api/v1/books
    app.include_router(books_router, prefix=settings.api_prefix)

    # -------------------------------------------------------------------------
    # Health Check Endpoint
    # -------------------------------------------------------------------------
    @app.get(
        "/health",
        tags=["Health"],
        summary="Health check",
        description="Check if the API is running and healthy.",
    )
    async def health_check() -> dict:
        """Used by load balancers, container health checks and monitoring."""
        return {
            "status": "healthy",
            "app": settings.app_name,
            "version": __version__,
            "api_version": settings.api_version,
            "rate_limiting": {
                "enabled": settings.rate_limit_enabled,
                "default_limit": settings.rate_limit_default,
                "write_limit": settings.rate_limit_write,
            },
        }

    @app.get(
        "/",
        tags=["Root"],
        summary="API root",
        description="Welcome message and API information.",
    )
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "message": f"Welcome to {settings.app_name}",
            "version": __version__,
            "books": f"{settings.api_prefix}/books",
            "docs": "/docs",
            "health": "/health",
        }

    return app


# =============================================================================
# Application Instance
# =============================================================================
# This is what uvicorn imports: uvicorn book_catalog.main:app
app = create_app()


# =============================================================================
# Development Server
# =============================================================================
# python -m book_catalog.main
# In production: uvicorn book_catalog.main:app --host 0.0.0.0 --port 8080

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "book_catalog.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
