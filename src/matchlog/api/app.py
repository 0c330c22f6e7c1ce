"""FastAPI application factory.

The storage backend is chosen once here and handed to routes through the
get_store dependency; routes never look at configuration themselves.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from matchlog import __version__
from matchlog.config import Settings, load_settings
from matchlog.errors import NotFoundError, StorageError, ValidationError
from matchlog.models.types import HealthStatus
from matchlog.storage import MatchStore, build_store

logger = logging.getLogger(__name__)

INTERNAL_ERROR = "Internal server error"


def get_store(request: Request) -> MatchStore:
    """Dependency returning the process-wide storage backend."""
    return request.app.state.store


def _install_error_handlers(app: FastAPI) -> None:
    """Map the error taxonomy to status codes and {error} bodies."""

    @app.exception_handler(ValidationError)
    def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"error": str(exc)})

    @app.exception_handler(RequestValidationError)
    def handle_bad_body(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"error": "Invalid request body"})

    @app.exception_handler(NotFoundError)
    def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"error": str(exc)})

    @app.exception_handler(StorageError)
    def handle_storage_error(request: Request, exc: StorageError) -> JSONResponse:
        logger.error("Storage failure on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR})

    # Anything the handlers above do not map ends here, logged once
    @app.middleware("http")
    async def catch_unexpected(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR})


def create_app(settings: Settings | None = None, store: MatchStore | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        settings: Process settings. Defaults to load_settings().
        store: Storage backend. Defaults to build_store(settings).

    Returns:
        Configured FastAPI application with an initialized store.

    Raises:
        StorageError: If the backend cannot be prepared.
    """
    if settings is None:
        settings = load_settings()
    if store is None:
        store = build_store(settings)

    store.init()
    logger.info("Using %s storage", store.describe())

    app = FastAPI(
        title="Matchlog API",
        description="Personal match history with daily win ratios",
        version=__version__,
    )
    app.state.settings = settings
    app.state.store = store

    _install_error_handlers(app)

    # Include routes
    from matchlog.api.routes import backup, matches, summary

    app.include_router(matches.router, prefix="/api")
    app.include_router(backup.router, prefix="/api")
    app.include_router(summary.router, prefix="/api")

    # Health check endpoint
    @app.get("/health", response_model=HealthStatus)
    def health_check(request: Request) -> HealthStatus:
        """Health check endpoint."""
        return HealthStatus(storage=get_store(request).describe())

    # Bundled front-end, mounted last so API routes take precedence
    if settings.public_dir.is_dir():
        app.mount("/", StaticFiles(directory=str(settings.public_dir), html=True), name="public")

    return app
