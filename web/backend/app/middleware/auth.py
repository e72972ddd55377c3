"""Auth middleware -- FastAPI dependencies for caller and owner identity.

The immediate caller is taken from the ``X-Caller-Id`` header, which the
fronting gateway sets after authenticating the request. The owner is the
service's own identity from settings.
"""

from __future__ import annotations

from typing import Optional

from fastapi import Depends, Header, HTTPException, status

from scv.config import Settings, load_settings

# Shared settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the singleton Settings instance."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


async def get_caller_id(
    x_caller_id: Optional[str] = Header(None, alias="X-Caller-Id"),
) -> str:
    """FastAPI dependency returning the identity of the immediate caller.

    Raises ``401 Unauthorized`` if the header is missing or blank.
    """
    if x_caller_id and x_caller_id.strip():
        return x_caller_id.strip()
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Not authenticated",
    )


async def get_owner_id(settings: Settings = Depends(get_settings)) -> str:
    """FastAPI dependency returning the service owner identity."""
    return settings.owner
