# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from datetime import timedelta

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from admin_console import __version__
from admin_console.config import get_settings
from admin_console.datasources import build_data_sources
from admin_console.notifications.center import NotificationCenter
from admin_console.schemas.common import HealthResponse
from admin_console.services.session_service import SessionStore

logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown events."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    source = settings.api_base_url or "in-memory data sources"
    logger.info(f"Starting admin console against {source}")

    data_sources = build_data_sources(settings)
    notifications = NotificationCenter.get_instance()
    app.state.sessions = SessionStore(
        data_sources, notifications, ttl=timedelta(seconds=settings.session_ttl)
    )

    yield

    logger.info("Shutting down admin console...")
    app.state.sessions.close_all()
    notifications.cancel_timers()
    for data_source in data_sources.values():
        await data_source.close()


app = FastAPI(
    title="Admin Console",
    description="Company, group and user account management",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in settings.allowed_origins.split(",") if o.strip()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="healthy")


from admin_console.api.v1.router import api_router  # noqa: E402

app.include_router(api_router, prefix="/api/v1")
