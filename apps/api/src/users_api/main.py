"""Main FastAPI application."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import HTTPException
from fastapi.responses import JSONResponse, Response

from users_api.config import get_settings
from users_api.middleware import get_cors_headers, setup_middleware
from users_api.routes import api_router
from users_common.exceptions import (
    MalformedRequestError,
    NotAcceptableError,
    NotFoundError,
    UsersApiError,
    ValidationFailure,
)

# Initialize settings
settings = get_settings()

# Configure logging
logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Handle application lifespan events."""
    # Startup
    logger.info(f"{settings.app_name} v{settings.app_version} started")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Log level: {settings.log_level}")

    yield

    # Shutdown
    logger.info(f"{settings.app_name} shutting down")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="Users resource - FastAPI backend service",
    version=settings.app_version,
    lifespan=lifespan,
    redirect_slashes=False,
)

# Setup middleware (must be before exception handlers)
setup_middleware(app, ui_url=settings.ui_url, environment=settings.environment)


@app.exception_handler(UsersApiError)
async def users_api_exception_handler(request: Request, exc: UsersApiError) -> Response:
    """Map domain errors to their HTTP responses."""
    logger.info("%s %s -> %d: %s", request.method, request.url.path, exc.status_code, exc.message)

    if isinstance(exc, ValidationFailure):
        return JSONResponse(status_code=exc.status_code, content=exc.errors)
    if isinstance(exc, MalformedRequestError):
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})
    if isinstance(exc, (NotFoundError, NotAcceptableError)):
        return Response(status_code=exc.status_code)

    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


# Exception handler to ensure CORS headers are present on all error responses
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Global exception handler to ensure CORS headers are present on all errors."""
    # Let FastAPI handle HTTPException normally (CORS middleware handles it)
    if isinstance(exc, HTTPException):
        raise exc

    logger.error("Unhandled exception: %s", exc, exc_info=True)

    origin = request.headers.get("origin")
    cors_headers = get_cors_headers(origin, ui_url=settings.ui_url, environment=settings.environment)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": str(exc)},
        headers=cors_headers,
    )


# Include routers
app.include_router(api_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "users_api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True,
        log_level=settings.log_level.lower(),
    )
