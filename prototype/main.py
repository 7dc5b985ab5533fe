"""Versioned Prototype — FastAPI application factory."""


import logging
import sys

from fastapi import FastAPI

from prototype.core.config import settings
from prototype.core.exceptions import register_exception_handlers
from prototype.middleware.redirects import RedirectRewriterMiddleware
from prototype.routers.questions import router as questions_router
from prototype.schemas.common import HealthResponse

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Set up structured logging for the application."""
    level = logging.DEBUG if settings.app_env == "development" else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    # Quiet noisy libraries
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


def create_version_app(version: str) -> FastAPI:
    """Build the sub-application mounted at ``/<version>``.

    The same question routes are included for every version; only the
    mount point differs.
    """
    sub_app = FastAPI(
        title=f"{settings.app_name} ({version})",
        docs_url="/docs" if settings.app_env == "development" else None,
        redoc_url=None,
    )

    # --- Redirect rewriter (must live on the mounted app) ---
    sub_app.add_middleware(RedirectRewriterMiddleware)

    register_exception_handlers(sub_app)

    sub_app.include_router(questions_router)

    return sub_app


def create_app() -> FastAPI:
    _configure_logging()

    app = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        docs_url="/docs" if settings.app_env == "development" else None,
        redoc_url="/redoc" if settings.app_env == "development" else None,
    )

    # --- Global exception handlers ---
    register_exception_handlers(app)

    # --- Health check ---
    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health():
        return HealthResponse(
            app=settings.app_name, env=settings.app_env, versions=settings.versions,
        )

    # --- Version apps (/v1/*, /v2/*, ...) ---
    for version, path in zip(settings.versions, settings.mount_paths):
        app.mount(path, create_version_app(version))
        logger.info("Mounted %s at %s", version, path)

    return app


app = create_app()
