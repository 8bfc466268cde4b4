"""FastAPI application factory and configuration.

This module provides the application factory function for creating
and configuring the FastAPI application with all middleware, routes,
exception handlers and lifecycle handlers.
"""

import uuid
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from gatekeeper.core.config import Settings, get_settings
from gatekeeper.core.exceptions import GatekeeperError, StoreError
from gatekeeper.core.logging import (
    bind_correlation_id,
    clear_context,
    configure_logging,
    get_logger,
)
from gatekeeper.infrastructure.auth import PasswordHasher, TokenIssuer
from gatekeeper.infrastructure.persistence.database import (
    close_database,
    configure_database,
    get_db_manager,
    init_database,
)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Handles startup and shutdown events for the application.

    Args:
        app: FastAPI application instance.

    Yields:
        None: Control is yielded to the application during its lifetime.
    """
    settings: Settings = app.state.settings

    logger.info(
        "Starting Gatekeeper",
        app_name=settings.app_name,
        version=settings.app_version,
        environment=settings.environment,
    )

    try:
        await init_database(configure_database(settings))
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error("Failed to initialize database", error=str(e))
        raise

    yield

    logger.info("Shutting down Gatekeeper")
    await close_database()
    logger.info("Database connection closed")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    The password hasher and token issuer are built here, once per process,
    so a missing signing key stops the service before it serves a request.

    Args:
        settings: Optional settings instance. Defaults to the cached settings.

    Returns:
        FastAPI: Configured FastAPI application instance.

    Raises:
        SigningError: If no token signing key is configured.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Account registration, sign-in and session token service",
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        openapi_url="/openapi.json" if settings.is_development else None,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.password_hasher = PasswordHasher.from_settings(settings)
    app.state.token_issuer = TokenIssuer.from_settings(settings)

    register_health_check(app)
    register_routes(app)
    register_exception_handlers(app)
    register_middleware(app)

    return app


def register_health_check(app: FastAPI) -> None:
    """Register health check endpoints.

    Args:
        app: FastAPI application instance.
    """

    @app.get("/health", tags=["health"])
    async def health_check():
        """Basic health check endpoint.

        Returns 200 if the service is running. Does not check
        database connectivity.
        """
        settings = app.state.settings
        return {
            "status": "healthy",
            "service": settings.app_name,
            "version": settings.app_version,
        }

    @app.get("/ready", tags=["health"])
    async def readiness_check():
        """Readiness check endpoint, including database connectivity."""
        settings = app.state.settings
        db_healthy = await get_db_manager().check_connection()

        if db_healthy:
            return {
                "status": "ready",
                "service": settings.app_name,
                "version": settings.app_version,
                "database": "connected",
            }
        return JSONResponse(
            status_code=503,
            content={
                "status": "not_ready",
                "service": settings.app_name,
                "database": "disconnected",
            },
        )

    @app.get("/live", tags=["health"])
    async def liveness_check():
        """Liveness check endpoint."""
        settings = app.state.settings
        return {
            "status": "alive",
            "service": settings.app_name,
            "version": settings.app_version,
        }


def register_routes(app: FastAPI) -> None:
    """Register API routes.

    Args:
        app: FastAPI application instance.
    """
    from gatekeeper.infrastructure.api.routes import accounts_router

    settings = app.state.settings
    app.include_router(accounts_router, prefix=settings.api_prefix, tags=["accounts"])

    @app.get("/", tags=["root"])
    async def root():
        """Service root endpoint."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "api_version": "v1",
        }


def error_response(status_code: int, message: str, err: object) -> JSONResponse:
    """Build the failure envelope shared by every endpoint."""
    return JSONResponse(
        status_code=status_code,
        content={"data": {}, "success": False, "message": message, "err": err},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers.

    Args:
        app: FastAPI application instance.
    """

    @app.exception_handler(GatekeeperError)
    async def gatekeeper_error_handler(request: Request, exc: GatekeeperError):
        """Map typed failures to their status code."""
        logger.info(
            "Request failed",
            path=str(request.url.path),
            kind=exc.kind,
            status_code=exc.status_code,
        )
        return error_response(exc.status_code, exc.message, exc.explanation or {})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        """Report malformed request fields as a 400."""
        fields = [".".join(str(part) for part in e["loc"]) for e in exc.errors()]
        logger.info("Request validation failed", path=str(request.url.path), fields=fields)
        return error_response(
            400,
            "Something went wrong",
            f"Invalid value for: {', '.join(fields)}",
        )

    @app.exception_handler(SQLAlchemyError)
    async def store_error_handler(request: Request, exc: SQLAlchemyError):
        """Map unexpected database failures to a store error."""
        logger.error(
            "Account store failure",
            path=str(request.url.path),
            exc_type=type(exc).__name__,
        )
        error = StoreError()
        return error_response(error.status_code, error.message, error.kind)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle uncaught exceptions."""
        logger.error(
            "Unhandled exception",
            path=str(request.url.path),
            method=request.method,
            error=str(exc),
            exc_type=type(exc).__name__,
        )
        debug = app.state.settings.debug
        return error_response(
            500,
            "Internal server error",
            str(exc) if debug else "An unexpected error occurred",
        )


def register_middleware(app: FastAPI) -> None:
    """Register custom middleware.

    Args:
        app: FastAPI application instance.
    """

    @app.middleware("http")
    async def logging_middleware(request: Request, call_next):
        """Log all requests and propagate a correlation ID."""
        correlation_id = request.headers.get("X-Correlation-ID", f"cid_{uuid.uuid4().hex[:12]}")
        bind_correlation_id(correlation_id)

        logger.info(
            "Request started",
            method=request.method,
            path=str(request.url.path),
        )

        try:
            response = await call_next(request)
            logger.info(
                "Request completed",
                method=request.method,
                path=str(request.url.path),
                status_code=response.status_code,
            )
            response.headers["X-Correlation-ID"] = correlation_id
            return response
        finally:
            clear_context()
