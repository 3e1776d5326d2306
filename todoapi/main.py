"""
FastAPI application entry point for the Todo Items service.

This module:
- Builds the FastAPI application with middleware and routers
- Sets up structured logging with structlog
- Creates the process-local todo store and hands it to the routers
- Implements global exception handlers for consistent error responses
- Manages application lifecycle (startup/shutdown hooks)

Design decisions:
- Application factory so every app (and every test) owns its own store
- Structured logging (JSON in prod, console in dev)
- Request timing middleware
- OpenAPI docs served in development only
"""

import logging
import time
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.httpsredirect import HTTPSRedirectMiddleware
from fastapi.responses import JSONResponse

from todoapi import __version__
from todoapi.api.routes import todo
from todoapi.config import Settings, settings as default_settings
from todoapi.core.exceptions import ErrorCode, TodoNotFoundError
from todoapi.models.database import Database

SERVICE_NAME = "Todo Items API"

logger = structlog.get_logger()


def configure_logging(settings: Settings) -> None:
    """
    Configure structlog and the stdlib root logger.

    Repositories log through the stdlib ``logging`` module; request and
    lifecycle events go through structlog.
    """
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        level=settings.log_level.upper(),
        force=True,  # every app built in this process applies its own level
    )
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),  # ISO 8601 timestamps
            structlog.stdlib.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer() if settings.log_format == "json"
            else structlog.dev.ConsoleRenderer(),
        ]
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build a FastAPI application with a fresh, empty todo store.

    Args:
        settings: Configuration to use; defaults to the environment settings.
    """
    settings = settings or default_settings
    configure_logging(settings)

    database = Database(settings.database_url)
    database.create_tables()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # ===== Startup =====
        logger.info(
            "application_starting",
            service=SERVICE_NAME,
            version=__version__,
            environment=settings.app_env,
            log_level=settings.log_level,
            database_url=settings.database_url,
        )

        yield  # Application is running

        # ===== Shutdown =====
        logger.info("application_shutting_down")
        database.dispose()
        logger.info("shutdown_complete")

    docs_enabled = settings.docs_enabled
    app = FastAPI(
        title=SERVICE_NAME,
        description="CRUD operations over todo items held in a process-local store",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )
    app.state.settings = settings
    app.state.database = database

    # ===== Middleware Configuration =====

    if settings.https_redirect:
        app.add_middleware(HTTPSRedirectMiddleware)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log every request with its status code and processing time."""
        start_time = time.time()

        logger.info(
            "request_started",
            method=request.method,
            path=request.url.path,
            client_ip=request.client.host if request.client else "unknown",
        )

        response = await call_next(request)

        process_time = time.time() - start_time

        logger.info(
            "request_completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            process_time_ms=round(process_time * 1000, 2)
        )

        response.headers["X-Process-Time"] = str(round(process_time, 3))
        return response

    # ===== Global Exception Handlers =====

    @app.exception_handler(TodoNotFoundError)
    async def todo_not_found_handler(request: Request, exc: TodoNotFoundError):
        """A missing todo item is answered with a bare 404."""
        logger.info(
            "todo_not_found",
            method=request.method,
            path=request.url.path,
            **exc.to_dict()
        )
        return Response(status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        """
        Handle Pydantic validation errors (malformed JSON, wrong field
        types, non-integer ids) with a structured 422 response.
        """
        logger.warning(
            "validation_error",
            errors=exc.errors(),
            body=str(exc.body)[:500],  # Truncate to keep secrets out of the logs
            path=request.url.path
        )

        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={
                "error": "VALIDATION_ERROR",
                "error_code": ErrorCode.VALIDATION_ERROR.value,
                "message": "Invalid request data",
                "details": jsonable_errors(exc),
            }
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all handler so internal errors never leak implementation details."""
        logger.exception(
            "unexpected_error",
            error_type=type(exc).__name__,
            error_message=str(exc),
            path=request.url.path
        )

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "INTERNAL_ERROR",
                "error_code": ErrorCode.INTERNAL_ERROR.value,
                "message": "An unexpected error occurred. Please try again later.",
                "reference_id": f"err_{int(time.time())}"
            }
        )

    # ===== Router Registration =====

    app.include_router(todo.router)

    # ===== Core Endpoints =====

    @app.get("/", include_in_schema=False)
    async def root():
        """Service information and the available endpoints."""
        return {
            "service": SERVICE_NAME,
            "version": __version__,
            "status": "operational",
            "environment": settings.app_env,
            "documentation": "/docs" if docs_enabled else None,
            "endpoints": {
                "health": "/health",
                "todoitems": "/todoitems",
            }
        }

    @app.get("/health", include_in_schema=False)
    async def health():
        """Health check endpoint for load balancers and monitoring."""
        return {
            "status": "healthy",
            "environment": settings.app_env,
            "version": __version__,
            "timestamp": int(time.time())
        }

    return app


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    # ctx may hold exception instances, which JSONResponse cannot encode
    return jsonable_encoder([
        {key: value for key, value in error.items() if key != "ctx"}
        for error in exc.errors()
    ])
