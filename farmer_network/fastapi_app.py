"""
FastAPI Application Factory.
Creates and configures the FastAPI application with all routers, middleware, and DI.

Endpoints:
- conversations + messages, auth, users, posts, comments, resources,
  weather, assistant, health, /uploads static files
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka

from farmer_network.config.logging_config import setup_logging, correlation_id_var
from farmer_network.config.settings import Config
from farmer_network.setup.ioc.container import create_container
from farmer_network.presentation.api import (
    conversations_router,
    auth_router,
    users_router,
    posts_router,
    comments_router,
    resources_router,
    weather_router,
    assistant_router,
)

logger = logging.getLogger(__name__)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware to extract and set correlation ID from request headers."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get("X-Correlation-ID", "NO Correlation ID")

        # Set in contextvars (propagates to async tasks and logging)
        correlation_id_var.set(correlation_id)

        response = await call_next(request)
        response.headers["X-Correlation-ID"] = correlation_id
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan context manager.

    - Startup: container already created and attached by setup_dishka
    - Shutdown: close DI container (disconnects Prisma, closes httpx client)
    """
    logger.info("FastAPI application started. DI container initialized.")
    yield
    await app.state.dishka_container.close()
    logger.info("FastAPI application shutdown. DI container closed.")


def create_fastapi_app(container: Optional[AsyncContainer] = None) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        container: DI container to use. Defaults to the Prisma-backed one.

    Returns:
        FastAPI application instance
    """
    setup_logging(Config.LOG_LEVEL, Config.LOG_PATH)

    app = FastAPI(
        title="Farmer Network API",
        description="REST backend for the farmer social network",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Setup Dishka BEFORE app starts (must add middleware before startup)
    setup_dishka(container or create_container(), app)

    # Correlation ID middleware (must be added before CORS)
    app.add_middleware(CorrelationIdMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=Config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Validation error handler - shows detailed Pydantic errors
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = jsonable_encoder(exc.errors())
        logger.warning(f"[VALIDATION ERROR] {request.method} {request.url.path}: {errors}")
        return JSONResponse(
            status_code=400,
            content={"error": "Validation error", "details": errors},
        )

    # HTTP exception handler - catch all HTTPException including 400s
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        log = logger.warning if exc.status_code < 500 else logger.error
        log(f"[HTTP ERROR {exc.status_code}] {request.method} {request.url.path}: {exc.detail}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(f"[GLOBAL ERROR] {type(exc).__name__}: {exc}")
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error"},
        )

    # Health check routes
    @app.get("/", tags=["health"])
    async def root():
        return {"message": "Farmer Network API is running."}

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy"}

    # Register routers
    app.include_router(auth_router)  # /api/auth
    app.include_router(users_router)  # /api/users
    app.include_router(conversations_router)  # /api/conversations
    app.include_router(posts_router)  # /api/posts
    app.include_router(comments_router)  # /api/comments
    app.include_router(resources_router)  # /api/resources
    app.include_router(weather_router)  # /api/weather
    app.include_router(assistant_router)  # /api/assistant

    # Uploaded post images
    Path(Config.UPLOAD_BASE).mkdir(parents=True, exist_ok=True)
    app.mount(
        Config.UPLOAD_URL_PREFIX,
        StaticFiles(directory=Config.UPLOAD_BASE, check_dir=False),
        name="uploads",
    )

    return app
