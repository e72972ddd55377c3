"""FastAPI application for the SCV item registry.

Provides REST API endpoints wrapping the SCV Python package for:
- Registry lifecycle (one-time initialization)
- Item creation, lookup, diagnostics and revocation
- Owner-only reset of every item
"""

from __future__ import annotations

from fastapi import FastAPI

from scv import __version__
from scv.log import setup_logging
from web.backend.app.middleware.auth import get_settings
from web.backend.app.routers import items

setup_logging(get_settings().log_level)

app = FastAPI(
    title="SCV API",
    description=(
        "REST API for the SCV item registry. "
        "Identifiers are unsigned 128-bit integers sent as decimal strings."
    ),
    version=__version__,
)

# ---------------------------------------------------------------------------
# Include routers
# ---------------------------------------------------------------------------
app.include_router(items.router)


# ---------------------------------------------------------------------------
# Root and health-check endpoints
# ---------------------------------------------------------------------------


@app.get("/", tags=["meta"])
async def root():
    """Return basic API information."""
    return {
        "name": "SCV API",
        "version": __version__,
        "description": "SCV item registry REST API",
        "docs": "/docs",
        "openapi": "/openapi.json",
    }


@app.get("/health", tags=["meta"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
