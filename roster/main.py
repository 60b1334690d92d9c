"""Roster API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - One store and one RosterService per process, built in the lifespan and
      released on shutdown
    - Every request passes through the request observer middleware
    - Unhandled exceptions become a 500 inside CORSMiddleware, so even that
      response carries the CORS headers
    - Cross-origin requests allowed per settings (default: any origin)

Design Decisions:
    - Lifespan over @app.on_event: single place for startup and cleanup
    - Error handlers registered from api/error_handlers.py
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from roster.api.error_handlers import (
    catch_unhandled_errors, register_error_handlers,
)
from roster.api.request_logging import log_requests
from roster.api.routes import health, roster
from roster.config import get_settings
from roster.infrastructure.observability import setup_logging
from roster.infrastructure.store_factory import build_store
from roster.services.roster_service import RosterService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    store = await build_store(settings)
    app.state.store = store
    app.state.roster_service = RosterService(store, settings.not_found_policy)
    logger.info("Roster API started")
    try:
        yield
    finally:
        logger.info("Roster API shutting down")
        await store.close()


app = FastAPI(title="Roster API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
# Last added is outermost: log_requests -> CORS -> catch_unhandled_errors
app.middleware("http")(catch_unhandled_errors)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.middleware("http")(log_requests)

app.include_router(health.router)
app.include_router(roster.router)

register_error_handlers(app)

# Frontend build, if present; mounted AFTER API routes so /roster wins
if os.path.isdir("static"):
    app.mount("/", StaticFiles(directory="static", html=True), name="static")
