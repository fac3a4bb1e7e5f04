"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
import time
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from shared.config import get_settings
from shared.log_config import configure_logging
from modules.auth.routes import router as auth_router
from modules.notifications.routes import router as notifications_router
from modules.posts.routes import router as posts_router
from modules.uploads.routes import router as upload_router

from .dependencies import get_container
from .errors import register_exception_handlers
from .models.errors import COMMON_RESPONSES, PROTECTED_RESPONSES
from .routes import health, users

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Opens the process-wide resources on startup and releases them on
    shutdown.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    container = get_container()
    container.startup()
    logger.info(f"Starting {settings.app_name} on {settings.host}:{settings.port}")
    yield
    logger.info(f"Shutting down {settings.app_name}")
    container.shutdown()


async def log_requests(request: Request, call_next):
    """Log one line per request with its status and duration."""
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f}ms)"
    )
    return response


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()
    prefix = settings.api_prefix

    app = FastAPI(
        title=settings.app_name,
        description="User accounts, posts, image uploads and notifications",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url=f"{prefix}/docs" if settings.debug else None,
        redoc_url=f"{prefix}/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )
    app.middleware("http")(log_requests)

    register_exception_handlers(app)

    # Register routes
    app.include_router(health.router, prefix=prefix, tags=["health"])
    app.include_router(
        auth_router, prefix=f"{prefix}/auth", tags=["auth"], responses=COMMON_RESPONSES
    )
    app.include_router(
        users.router, prefix=f"{prefix}/users", tags=["users"], responses=PROTECTED_RESPONSES
    )
    app.include_router(
        posts_router, prefix=f"{prefix}/posts", tags=["posts"], responses=PROTECTED_RESPONSES
    )
    app.include_router(
        upload_router, prefix=f"{prefix}/upload", tags=["upload"], responses=PROTECTED_RESPONSES
    )
    app.include_router(
        notifications_router,
        prefix=f"{prefix}/notifications",
        tags=["notifications"],
        responses=PROTECTED_RESPONSES,
    )

    return app


# Application instance for uvicorn
app = create_app()
