"""
Consultancy Intake API - Main Application.

FastAPI application with CORS enabled for the marketing site frontend.

``create_app`` is the composition root: it builds the two submission stores
once and hands them to the routers through ``app.state``. The stores live as
long as the app; nothing is persisted.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse

from api import __version__
from api.config import Settings, load_settings
from api.logging_config import setup_logging
from api.models import HealthResponse, PingResponse
from api.routers import bookings, contact
from domain.schemas import BOOKING_KIND, CONTACT_KIND
from repositories.submission_repository import SubmissionStore

logger = logging.getLogger(__name__)

_API_PREFIXES = ("api/", "health")
_FALLBACK_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]


def _spa_file(dist_dir: Path, path: str) -> Optional[Path]:
    """
    Resolve a request path to a file in the frontend build.

    Paths that do not name an existing file inside ``dist_dir`` fall back to
    ``index.html`` so the frontend router can handle them.
    """

    root = dist_dir.resolve()
    candidate = (root / path).resolve()
    if path and candidate.is_file() and root in candidate.parents:
        return candidate
    index = root / "index.html"
    return index if index.is_file() else None


def create_app(
    settings: Optional[Settings] = None,
    *,
    contact_store: Optional[SubmissionStore] = None,
    booking_store: Optional[SubmissionStore] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Stores may be injected (tests use a fixed clock); otherwise fresh empty
    stores are created.
    """

    settings = settings or load_settings()
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title="Consultancy Intake API",
        description="Contact form and consultation booking intake for the firm's website",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.settings = settings
    app.state.contact_store = contact_store if contact_store is not None else SubmissionStore(CONTACT_KIND)
    app.state.booking_store = booking_store if booking_store is not None else SubmissionStore(BOOKING_KIND)

    @app.get("/health", tags=["Health"], response_model=HealthResponse)
    async def health_check():
        """
        Health check endpoint.

        Returns the API status and version.
        """
        return HealthResponse(
            status="healthy",
            version=__version__,
            service=settings.service_name,
            checked_at=datetime.now(timezone.utc),
        )

    @app.get("/api/ping", tags=["Health"], response_model=PingResponse)
    async def ping():
        """Liveness check with a fixed acknowledgment."""
        return PingResponse(message="pong")

    app.include_router(contact.router, prefix="/api", tags=["Contact"])
    app.include_router(bookings.router, prefix="/api", tags=["Bookings"])

    # Registered last so every API route wins over the frontend fallback.
    @app.api_route("/{full_path:path}", methods=_FALLBACK_METHODS, include_in_schema=False)
    async def frontend_fallback(full_path: str, request: Request):
        if full_path == "api" or full_path.startswith(_API_PREFIXES):
            return JSONResponse(status_code=404, content={"error": "API endpoint not found"})
        if request.method != "GET" or settings.spa_dist_dir is None:
            return JSONResponse(status_code=404, content={"error": "Not found"})
        target = _spa_file(settings.spa_dist_dir, full_path)
        if target is None:
            logger.warning("Frontend build not found in %s", settings.spa_dist_dir)
            return JSONResponse(status_code=404, content={"error": "Not found"})
        return FileResponse(target)

    logger.info(
        "Consultancy intake API %s ready (frontend: %s)",
        __version__,
        settings.spa_dist_dir or "not configured",
    )
    return app


# Module-level instance for ASGI servers, e.g. ``uvicorn api.main:app``.
app = create_app()
