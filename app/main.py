"""
Application entry point.

Creates the FastAPI application and wires together:
- The in-memory user store and the service built on it
- Routers (one per bounded context)
- Error handlers (centralized error-to-HTTP mapping)
- Middleware (request correlation, access log, CORS, security headers)
- Rate limiting, as an app-wide dependency
- Logging configuration

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded

from app.application.users.user_service import UserService
from app.core.config import Settings, settings as default_settings
from app.domain.users.ports import UserRepository
from app.infrastructure.users.seed_data import seed_users
from app.infrastructure.users.user_repository import InMemoryUserRepository
from app.interfaces.health import router as health_router
from app.interfaces.users.router import router as users_router
from app.shared.errors.handlers import register_error_handlers
from app.shared.logging import configure_logging
from app.shared.middleware.access_log import AccessLogMiddleware
from app.shared.middleware.request_id import REQUEST_ID_HEADER, RequestIdMiddleware
from app.shared.security.headers import SecurityHeadersMiddleware
from app.shared.security.rate_limiting import (
    build_limiter,
    enforce_rate_limit,
    rate_limit_exceeded_handler,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: log startup and shutdown."""
    app_settings: Settings = app.state.settings
    logger.info(
        "%s v%s started: environment=%s, users=%d",
        app_settings.project_name,
        app_settings.version,
        app_settings.environment,
        app.state.user_repository.count(),
    )
    yield
    logger.info("%s shutting down", app_settings.project_name)


def build_repository(app_settings: Settings) -> UserRepository:
    """Create the process-wide user store, seeded if configured."""
    initial = seed_users() if app_settings.seed_demo_data else []
    return InMemoryUserRepository(initial)


def create_app(
    app_settings: Optional[Settings] = None,
    repository: Optional[UserRepository] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the application. Every call builds
    its own store, so separate apps never share state.

    Args:
        app_settings: Settings to use. Defaults to the environment-loaded settings.
        repository: Store to serve from. Defaults to a fresh in-memory store.

    Returns:
        A fully configured FastAPI application instance.
    """
    app_settings = app_settings or default_settings
    configure_logging(
        level="DEBUG" if app_settings.debug else app_settings.log_level,
        log_file=app_settings.effective_log_file(),
    )

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.version,
        docs_url="/docs" if app_settings.docs_enabled else None,
        openapi_url="/docs.json" if app_settings.docs_enabled else None,
        redoc_url=None,
        lifespan=lifespan,
        dependencies=[Depends(enforce_rate_limit)],
    )

    # --- State ---
    repository = repository if repository is not None else build_repository(app_settings)
    app.state.settings = app_settings
    app.state.user_repository = repository
    app.state.user_service = UserService(repository)

    # --- Rate Limiting ---
    app.state.limiter = build_limiter(
        app_settings.rate_limit_default, enabled=app_settings.rate_limit_enabled
    )
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # --- Middleware (last added runs first) ---
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins(),
        allow_methods=["GET", "POST", "PATCH", "DELETE"],
        allow_headers=["Content-Type", REQUEST_ID_HEADER],
        expose_headers=[REQUEST_ID_HEADER],
    )
    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(RequestIdMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(users_router)

    return app


app = create_app()
