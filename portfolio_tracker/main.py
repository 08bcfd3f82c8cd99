"""Main FastAPI application with async support and middleware.
"""
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi import Request
from fastapi import status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from portfolio_tracker.api import health
from portfolio_tracker.api import portfolio
from portfolio_tracker.api import stocks
from portfolio_tracker.core.config import Settings
from portfolio_tracker.core.config import get_settings
from portfolio_tracker.core.docs import API_DESCRIPTION
from portfolio_tracker.core.docs import API_TITLE
from portfolio_tracker.core.docs import API_VERSION
from portfolio_tracker.core.docs import OPENAPI_TAGS
from portfolio_tracker.core.exceptions import NotFoundError
from portfolio_tracker.core.exceptions import StockValidationError
from portfolio_tracker.core.exceptions import StorageError
from portfolio_tracker.core.rate_limit import limiter
from portfolio_tracker.storage import DatabaseStorage
from portfolio_tracker.storage import Storage
from portfolio_tracker.storage import create_storage
from portfolio_tracker.utils.structured_logging import configure_structured_logging
from portfolio_tracker.utils.structured_logging import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan management.

    Prepares the database schema when the database backend is selected and
    releases storage resources on shutdown.
    """
    settings = get_settings()
    storage: Storage = app.state.storage

    logger.info(
        "Starting Portfolio Tracker API",
        environment=settings.environment,
        storage_backend=type(storage).__name__,
    )

    try:
        if isinstance(storage, DatabaseStorage):
            from portfolio_tracker.core.database import init_db

            await init_db()
            if settings.seed_demo_data:
                await storage.seed()

        yield

    finally:
        logger.info("Shutting down Portfolio Tracker API")
        await storage.close()
        if isinstance(storage, DatabaseStorage):
            from portfolio_tracker.core.database import close_db

            await close_db()
        logger.info("Application shutdown complete")


def _field_errors_from_request(exc: RequestValidationError) -> list[dict[str, str]]:
    errors = []
    for error in exc.errors():
        # loc is ("path" | "body" | "query", name, ...); JSON decode errors
        # carry a character offset instead of a name.
        loc = error.get("loc") or ("body",)
        field = loc[1] if len(loc) > 1 and isinstance(loc[1], str) else loc[0]
        errors.append(
            {
                "field": str(field),
                "message": error.get("msg", "Invalid value"),
                "code": error.get("type", "invalid"),
            }
        )
    return errors


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """Map domain exceptions to ``{"message": ..., "errors": ...}`` responses."""

    @app.exception_handler(StockValidationError)
    async def stock_validation_handler(request: Request, exc: StockValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": exc.message, "errors": exc.errors},
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Invalid request", "errors": _field_errors_from_request(exc)},
        )

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"message": exc.message},
        )

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
        # Route handlers re-raise with a generic message; internal detail
        # stays on the chained cause and in the logs.
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": str(exc)},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        content = {"message": exc.detail} if isinstance(exc.detail, str) else exc.detail
        return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Global exception handler for unhandled exceptions."""
        logger.error(
            "Unhandled exception occurred",
            exc_info=exc,
            path=str(request.url),
            method=request.method,
        )

        content = {"message": "Internal server error"}
        if settings.is_development and settings.debug:
            content["detail"] = str(exc)
            content["type"] = type(exc).__name__
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content)


def create_app(storage: Storage | None = None, settings: Settings | None = None) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        storage: Storage backend to serve; built from settings when omitted
        settings: Settings to use instead of the cached environment settings

    Returns:
        FastAPI: Configured application instance
    """
    settings = settings or get_settings()
    configure_structured_logging(
        log_level=settings.log_level, json_logs=not settings.is_development
    )

    app = FastAPI(
        title=API_TITLE,
        description=API_DESCRIPTION,
        version=API_VERSION,
        openapi_tags=OPENAPI_TAGS,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        openapi_url="/openapi.json" if settings.is_development else None,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.state.storage = storage if storage is not None else create_storage(settings)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    # Add rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    register_exception_handlers(app, settings)

    # Include routers
    app.include_router(health.router, prefix=settings.api_prefix, tags=["health"])
    app.include_router(stocks.router, prefix=f"{settings.api_prefix}/stocks", tags=["stocks"])
    app.include_router(portfolio.router, prefix=settings.api_prefix, tags=["portfolio"])

    return app


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "portfolio_tracker.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=8000,
        reload=settings.is_development,
        log_level=settings.log_level.lower(),
    )
