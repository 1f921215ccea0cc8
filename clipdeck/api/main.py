"""ClipDeck API - Main FastAPI Application.

This module provides the main FastAPI application for ClipDeck.
It includes:
- CORS middleware configuration
- Health check endpoint
- The TikTok search proxy route
- Uniform ``{"error": ...}`` error bodies

Usage:
    # Run with uvicorn
    uvicorn clipdeck.api.main:app --reload

    # Or run directly
    python -m clipdeck.api.main
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from clipdeck import __version__
from clipdeck.api.dependencies import get_search_adapter, reset_dependencies
from clipdeck.api.models import INTERNAL_ERROR_MESSAGE, ErrorResponse
from clipdeck.api.routes.health import router as health_router, set_server_start_time
from clipdeck.api.routes.search import router as search_router
from clipdeck.config.settings import Settings, get_settings
from clipdeck.core.logging import configure_logging

logger = structlog.get_logger(__name__)

API_TITLE = "ClipDeck API"
API_DESCRIPTION = """
## TikTok search proxy for the ClipDeck dashboard

Search TikTok by keyword through a single proxy route. Results are normalized
to a stable video shape and paginated with an opaque cursor.

### Endpoints

- `GET /api/tiktok/search?keywords=...&count=...&cursor=...`
- `GET /health`
"""


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    - Startup: record start time, build the upstream adapter
    - Shutdown: close the adapter's HTTP client
    """
    logger.info("application_starting")
    set_server_start_time()
    get_search_adapter()
    logger.info("application_started")

    yield

    logger.info("application_stopping")
    await reset_dependencies()
    logger.info("application_stopped")


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render request validation errors as a 400 with a single error message."""
    messages = []
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error["loc"] if loc != "query")
        messages.append(f"{field}: {error['msg']}" if field else error["msg"])

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(error="; ".join(messages)).model_dump(),
    )


async def generic_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.error(
        "unhandled_exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        error_type=type(exc).__name__,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(error=INTERNAL_ERROR_MESSAGE).model_dump(),
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=API_TITLE,
        description=API_DESCRIPTION,
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        openapi_tags=[
            {
                "name": "Health",
                "description": "System health and status endpoints",
            },
            {
                "name": "Search",
                "description": "TikTok keyword search proxy",
            },
        ],
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Content-Type", "Accept"],
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "name": API_TITLE,
            "version": __version__,
            "docs": "/docs" if settings.is_development else None,
            "health": "/health",
            "search": "/api/tiktok/search",
        }

    app.include_router(health_router)
    app.include_router(search_router)

    return app


# Create app instance
app = create_app()


def serve(settings: Settings | None = None) -> None:
    """Run the API with uvicorn."""
    import uvicorn

    settings = settings or get_settings()
    configure_logging(settings)

    logger.info(
        "starting_server",
        host=settings.api_host,
        port=settings.api_port,
    )

    uvicorn.run(
        "clipdeck.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.is_development,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    serve()
