"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

API Versioning:
    All API endpoints are versioned under /api/v1/ prefix.
    The health check endpoint remains unversioned at /health.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from pathlib import Path
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from profilehub.infrastructure.persistence.factory import create_repository_factory
from profilehub.presentation.api.exception_handlers import setup_exception_handlers
from profilehub.presentation.api.routers import (
    admin_router,
    auth_router,
    exports_router,
    files_router,
    profile_router,
    settings_router,
)
from profilehub.presentation.api.schemas.common import HealthResponse
from profilehub.presentation.container import ServiceContainer
from profilehub_config import Settings, get_settings


@lru_cache(maxsize=1)
def configure_logging(log_level_str: str = "INFO") -> None:
    """Configure application logging.

    Sets up console logging with timestamps and module names, applies the
    configured level to the profilehub packages and keeps noisy
    third-party libraries at WARNING.
    """
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,
    )

    for name in ("profilehub", "profilehub_auth", "profilehub_config"):
        logging.getLogger(name).setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("multipart").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

# API version info
API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"
UPLOADS_PATH = "/uploads"

# OpenAPI tags metadata for documentation
OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """Registration, login and the current account.

- Passwords are hashed with bcrypt
- JWT bearer tokens for stateless authentication
""",
    },
    {
        "name": "Profile",
        "description": """The complete user view and profile updates.

`GET /profile` returns account, profile, settings, files, storage
statistics and an overall completeness score in one response.
""",
    },
    {
        "name": "Settings",
        "description": """Preferences addressed by dotted paths.

Every change is recorded in an append-only history, e.g.
`PATCH /settings/appearance.theme` with `{"value": "dark"}`.
""",
    },
    {
        "name": "Files",
        "description": "Uploads, versions, downloads and sharing of files.",
    },
    {
        "name": "Exports",
        "description": "JSON or CSV snapshots of everything stored about you.",
    },
    {
        "name": "Admin",
        "description": """Administration (admin role required).

Account deletion cascades to profile, settings and files and is best
effort: failed steps are listed in the response.
""",
    },
]


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all endpoint routers."""
    v1_router = APIRouter()

    v1_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    v1_router.include_router(profile_router, prefix="/profile", tags=["Profile"])
    v1_router.include_router(settings_router, prefix="/settings", tags=["Settings"])
    v1_router.include_router(files_router, prefix="/files", tags=["Files"])
    v1_router.include_router(exports_router, prefix="/exports", tags=["Exports"])
    v1_router.include_router(admin_router, prefix="/admin", tags=["Admin"])

    return v1_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    settings: Settings = app.state.settings
    logger.info("Starting %s API v%s...", settings.app_name, API_VERSION)

    Path(settings.upload_dir).mkdir(parents=True, exist_ok=True)
    factory, engine = await create_repository_factory(settings)
    services = ServiceContainer.build(factory, settings)
    app.state.services = services

    await _ensure_initial_admin(services, settings)
    yield

    logger.info("Shutting down %s API...", settings.app_name)
    if engine is not None:
        await engine.dispose()
        logger.info("Database connections closed")


async def _ensure_initial_admin(services: ServiceContainer, settings: Settings) -> None:
    if settings.initial_admin_password is None:
        logger.info("No initial admin password configured, skipping admin setup")
        return

    created = await services.accounts.ensure_initial_admin(
        email=settings.initial_admin_email,
        name=settings.initial_admin_name,
        password=settings.initial_admin_password.get_secret_value(),
    )
    if created is not None:
        logger.info("Initial admin created: %s", created.email)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    # Configure logging on first app creation (not on module import)
    configure_logging(settings.log_level)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description=(
            "Accounts, profiles, settings and files of users, "
            "with an aggregated view, exports and cascade deletion."
        ),
        version=API_VERSION,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    # Uploaded blobs; the directory is created at startup
    app.mount(
        UPLOADS_PATH,
        StaticFiles(directory=settings.upload_dir, check_dir=False),
        name="uploads",
    )

    @app.get("/health", tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint, unversioned for load balancers."""
        return HealthResponse(
            status="healthy",
            version=API_VERSION,
            storage_backend=settings.storage_backend,
        )

    @app.get("/", tags=["Info"])
    async def root() -> dict:
        """API root endpoint with version information."""
        return {
            "name": f"{settings.app_name} API",
            "version": API_VERSION,
            "docs": "/docs" if settings.debug else None,
            "api_base": API_V1_PREFIX,
            "endpoints": {
                "health": "/health",
                "auth": f"{API_V1_PREFIX}/auth",
                "profile": f"{API_V1_PREFIX}/profile",
                "settings": f"{API_V1_PREFIX}/settings",
                "files": f"{API_V1_PREFIX}/files",
                "exports": f"{API_V1_PREFIX}/exports",
                "admin": f"{API_V1_PREFIX}/admin",
            },
        }

    return app
