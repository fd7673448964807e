"""
formrelay/main.py

FastAPI application entry point.

Responsibilities:
  - Load settings before anything else, so a missing SMTP variable stops
    the process before a listener is bound
  - Create the FastAPI app with metadata from config (``uvicorn --factory
    formrelay.main:create_app``)
  - Build the long-lived collaborators once, in the lifespan
  - Register all API routers and the error translator
  - Expose a /health endpoint for liveness probes
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from formrelay.api.application_controller import router as application_router
from formrelay.api.contact_controller import router as contact_router
from formrelay.api.errors import register_exception_handlers
from formrelay.core.config import Settings, load_settings
from formrelay.core.logger import configure_logging, get_logger
from formrelay.services.mail_dispatcher import MailDispatcher
from formrelay.services.upload_handler import UploadHandler

logger = get_logger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Pre-built settings (tests).  Loaded from the environment
                  when omitted; raises ConfigurationError if incomplete.
    """
    settings = settings or load_settings()
    configure_logging(settings.debug)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        Path(settings.upload_dir).mkdir(parents=True, exist_ok=True)
        app.state.mail_dispatcher = MailDispatcher.from_settings(settings)
        app.state.upload_handler = UploadHandler(settings.upload_dir)
        logger.info(
            "Relaying submissions to %s via %s:%d",
            settings.recipient_email,
            settings.smtp_host,
            settings.smtp_port,
        )
        yield

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description=(
            "Receives job applications and contact messages from the web "
            "site and relays them by email to the recruitment inbox."
        ),
        lifespan=lifespan,
    )
    app.state.settings = settings

    # ── Middleware ─────────────────────────────────────────────────────────────

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Routers ────────────────────────────────────────────────────────────────

    app.include_router(application_router)
    app.include_router(contact_router)

    # ── Error translator ───────────────────────────────────────────────────────

    register_exception_handlers(app)

    # ── Health endpoint ────────────────────────────────────────────────────────

    @app.get("/health", tags=["Health"], summary="Liveness probe")
    async def health() -> dict:
        """Returns 200 OK when the service is running."""
        return {"status": "ok", "version": settings.app_version}

    return app
