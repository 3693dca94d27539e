"""
Main application initialization and configuration.
"""

import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from music_service.api.routes import auth, playlists, tracks
from music_service.core.config import Settings, get_settings
from music_service.core.exceptions import (
    AlreadyExistsError,
    InvalidCredentialsError,
    InvalidTokenError,
    MusicServiceError,
    NotFoundError,
    PermissionDeniedError,
    StorageError,
    UpstreamError,
    UpstreamNotFoundError,
)
from music_service.core.logging import configure_logging
from music_service.db.session import (
    create_engine_from_settings,
    create_session_factory,
    init_db,
)
from music_service.services.catalog import CatalogClient
from music_service.services.spotify.client import SpotifyCatalogClient

# Most specific classes first; the first match wins
ERROR_STATUS_CODES = (
    (UpstreamNotFoundError, 404),
    (NotFoundError, 404),
    (AlreadyExistsError, 409),
    (PermissionDeniedError, 403),
    (InvalidCredentialsError, 400),
    (InvalidTokenError, 401),
    (StorageError, 500),
    (UpstreamError, 502),
)


def status_code_for(exc: MusicServiceError) -> int:
    """Map a domain error to its HTTP status code."""
    for error_class, status_code in ERROR_STATUS_CODES:
        if isinstance(exc, error_class):
            return status_code
    return 500


def create_app(
    settings: Optional[Settings] = None,
    catalog: Optional[CatalogClient] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Application settings, read from the environment if omitted
        catalog: Catalog client, a Spotify client built from settings if omitted

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()
    logger = configure_logging(settings)

    engine = create_engine_from_settings(settings)
    if catalog is None:
        catalog = SpotifyCatalogClient(
            settings.spotify_client_id,
            settings.spotify_client_secret,
            timeout=settings.catalog_timeout,
            logger=logger.getChild("catalog"),
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        init_db(engine)
        logger.info("Database initialised")
        yield
        await catalog.close()
        engine.dispose()
        logger.info("Shut down")

    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.state.settings = settings
    app.state.logger = logger
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    app.state.catalog = catalog

    # Configure CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    request_logger = logger.getChild("http")

    @app.middleware("http")
    async def log_request(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        client = request.client.host if request.client else "-"
        request_logger.info(
            f"{request.method} {request.url.path} {client} "
            f"{response.status_code} {elapsed_ms:.1f}ms"
        )
        return response

    @app.exception_handler(MusicServiceError)
    async def handle_domain_error(request: Request, exc: MusicServiceError):
        status_code = status_code_for(exc)
        log = logger.error if status_code >= 500 else logger.warning
        log(f"{request.method} {request.url.path} failed: {exc}")
        return JSONResponse(status_code=status_code, content={"error": exc.message})

    # Include routers
    app.include_router(auth.router)
    app.include_router(playlists.router)
    app.include_router(tracks.router)

    @app.get("/health")
    def health_check():
        """Health check endpoint to verify the API and database are up."""
        try:
            with engine.connect() as connection:
                connection.execute(text("SELECT 1"))
            database = "online"
        except SQLAlchemyError as exc:
            logger.error(f"Database health check failed: {exc}")
            database = "offline"

        return {
            "status": "healthy" if database == "online" else "degraded",
            "services": {"api": "online", "database": database},
        }

    return app


def build_app() -> FastAPI:
    """Application factory for ``uvicorn --factory``."""
    return create_app()


def run() -> None:
    """Serve the API with uvicorn."""
    import uvicorn

    uvicorn.run("music_service.main:build_app", factory=True, host="0.0.0.0", port=8082)
