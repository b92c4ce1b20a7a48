"""
FastAPI Application Entry Point

This module creates and configures the FastAPI application.

Key Concepts:
=============

1. Application Factory Pattern
   - create_app(settings) returns a configured app
   - The app owns its Settings and Database handle (app.state), so tests
     can build isolated instances with their own configuration

2. Lifespan Events
   - startup: optionally create missing tables
   - shutdown: close pooled connections

3. Exception Handlers
   - Domain errors become {"message": ...} responses with their status
   - Request validation failures become 400 responses
   - Database and unexpected errors are logged and answered with 500

Run with:
    uvicorn bookshop.main:create_app --factory
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from bookshop import __version__
from bookshop.config import Settings, get_settings
from bookshop.database import Database
from bookshop.exceptions import BookshopError, InternalError
from bookshop.routers import books_router, reviews_router, users_router

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


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
    settings: Settings = app.state.settings
    database: Database = app.state.database

    # ----- STARTUP -----
    logger.info(f"Starting {settings.app_name}...")
    logger.info(f"Environment: {settings.environment}, debug: {settings.debug}")

    if settings.create_tables_on_startup:
        database.create_tables()
        logger.info("Database tables ready")

    if not settings.require_auth_for_reviews:
        logger.warning("Review writes are open: REQUIRE_AUTH_FOR_REVIEWS is off")

    yield  # Application runs here

    # ----- SHUTDOWN -----
    logger.info(f"Shutting down {settings.app_name}...")
    database.dispose()


# =============================================================================
# Exception Handlers
# =============================================================================
def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    def render_error(exc: BookshopError) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.message},
            headers=exc.headers,
        )

    @app.exception_handler(BookshopError)
    async def bookshop_error_handler(
        request: Request,
        exc: BookshopError,
    ) -> JSONResponse:
        """Render a domain error as {"message": ...} with its status code."""
        return render_error(exc)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """
        Reject malformed input with 400 before any store access.

        The individual field errors are included so clients can see which
        fields were missing or of the wrong type.
        """
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "message": "Validation error",
                "errors": jsonable_encoder(exc.errors()),
            },
        )

    @app.exception_handler(SQLAlchemyError)
    async def sqlalchemy_exception_handler(
        request: Request,
        exc: SQLAlchemyError,
    ) -> JSONResponse:
        """
        Handle SQLAlchemy database errors.

        Logs the actual error while hiding details from users.
        """
        logger.error(f"Database error on {request.method} {request.url.path}: {exc}")
        return render_error(InternalError("A database error occurred"))

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Catch-all exception handler.

        In debug mode the error text is returned; otherwise it is hidden.
        """
        logger.error(f"Unhandled error: {exc}", exc_info=True)

        message = str(exc) if settings.debug else "An internal error occurred"
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": message},
        )


# =============================================================================
# Application Factory
# =============================================================================
def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Configuration to use; read from the environment if omitted

    Returns:
        Configured FastAPI application instance
    """
    if settings is None:
        settings = get_settings()

    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        description="""
## Bookshop API

Browse the book catalog, read and write book reviews, and register or
log in to obtain a bearer token.
        """,
        version=__version__,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.database = Database(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app, settings)

    app.include_router(books_router)
    app.include_router(reviews_router)
    app.include_router(users_router)

    @app.get(
        "/health",
        tags=["Health"],
        summary="Health check",
        description="Check if the API is running and healthy.",
    )
    async def health_check() -> dict:
        return {
            "status": "healthy",
            "app": settings.app_name,
            "version": settings.api_version,
            "environment": settings.environment,
            "review_auth_required": settings.require_auth_for_reviews,
        }

    return app


# =============================================================================
# Development Server
# =============================================================================
# This allows running the app directly with: python -m bookshop.main

if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run(
        "bookshop.main:create_app",
        factory=True,
        host=_settings.host,
        port=_settings.port,
        reload=_settings.debug,
    )
