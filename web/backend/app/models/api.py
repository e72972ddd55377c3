"""Pydantic models for API request/response serialization.

These models mirror the SCV dataclasses and provide JSON serialization
for the FastAPI endpoints. Identifiers travel as decimal strings.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Item models
# ---------------------------------------------------------------------------


class CreateItemRequest(BaseModel):
    """Body of ``POST /api/items``."""

    id: str = Field(..., description="Unsigned 128-bit identifier, decimal")
    title: str
    score: int = Field(..., ge=0, le=65535)
    content: str


class ItemResponse(BaseModel):
    """Mirrors scv.registry.models.Item, plus its identifier."""

    id: str
    title: str
    score: int
    content: str


class ItemInfoResponse(BaseModel):
    """Diagnostic text for one identifier."""

    message: str
