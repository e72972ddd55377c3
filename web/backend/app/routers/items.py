"""Items router -- create, lookup, delete and owner reset for items."""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager

from fastapi import APIRouter, Depends, HTTPException, Response, status

from scv.config import Settings
from scv.registry.errors import (
    AlreadyInitialized,
    DuplicateIdentifier,
    InvalidArgument,
    NotAuthorized,
    NotFound,
    NotInitialized,
    RegistryError,
)
from scv.registry.ids import format_id, parse_id
from scv.registry.item_registry import ItemRegistry
from scv.registry.store import JsonFileStore

from web.backend.app.middleware.auth import get_caller_id, get_owner_id, get_settings
from web.backend.app.models.api import (
    CreateItemRequest,
    ItemInfoResponse,
    ItemResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/items", tags=["items"])

# Requests run on a thread pool; every registry call holds this lock.
_lock = threading.Lock()

_STATUS_FOR_ERROR = {
    AlreadyInitialized: status.HTTP_409_CONFLICT,
    DuplicateIdentifier: status.HTTP_409_CONFLICT,
    NotFound: status.HTTP_404_NOT_FOUND,
    NotAuthorized: status.HTTP_403_FORBIDDEN,
    InvalidArgument: 422,
    NotInitialized: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def _get_registry(settings: Settings = Depends(get_settings)) -> ItemRegistry:
    """Return an ItemRegistry over the configured state file."""
    return ItemRegistry(JsonFileStore(settings.state_path))


@contextmanager
def _registry_call():
    """Serialize one registry operation and map its errors to HTTP."""
    with _lock:
        try:
            yield
        except RegistryError as exc:
            code = _STATUS_FOR_ERROR.get(
                type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR
            )
            if code >= 500:
                logger.warning("Registry call failed: %s", exc.message)
            raise HTTPException(status_code=code, detail=exc.message)


@router.post(
    "/init",
    status_code=status.HTTP_201_CREATED,
    summary="Initialize the registry",
)
def initialize_registry(settings: Settings = Depends(get_settings)):
    """Create an empty registry. Fails with 409 if one already exists."""
    with _registry_call():
        ItemRegistry.initialize(JsonFileStore(settings.state_path))
    return {"status": "initialized"}


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create an item",
)
def create_item(
    body: CreateItemRequest,
    registry: ItemRegistry = Depends(_get_registry),
):
    """Store a new item. Fails with 409 if the identifier is taken."""
    with _registry_call():
        item_id = parse_id(body.id)
        registry.create_item(item_id, body.title, body.score, body.content)
    return {"id": format_id(item_id)}


@router.post(
    "/reset",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove every item (owner only)",
)
def reset_all(
    caller: str = Depends(get_caller_id),
    owner: str = Depends(get_owner_id),
    registry: ItemRegistry = Depends(_get_registry),
):
    """Empty the registry. Only the service owner may call this."""
    with _registry_call():
        registry.reset_all(caller=caller, owner=owner)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/{item_id}",
    response_model=ItemResponse,
    summary="Get an item",
)
def get_item(item_id: str, registry: ItemRegistry = Depends(_get_registry)):
    """Retrieve one item by its decimal identifier."""
    with _registry_call():
        parsed = parse_id(item_id)
        item = registry.get_item(parsed)
    if item is None:
        raise HTTPException(status_code=404, detail=f"Item '{item_id}' not found")
    return ItemResponse(
        id=format_id(parsed),
        title=item.title,
        score=item.score,
        content=item.content,
    )


@router.get(
    "/{item_id}/info",
    response_model=ItemInfoResponse,
    summary="Describe an item",
)
def get_item_info(item_id: str, registry: ItemRegistry = Depends(_get_registry)):
    """Return diagnostic text for an item. A missing item is not an error."""
    with _registry_call():
        message = registry.get_item_info(parse_id(item_id))
    return ItemInfoResponse(message=message)


@router.delete(
    "/{item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Revoke an item",
)
def revoke_item(item_id: str, registry: ItemRegistry = Depends(_get_registry)):
    """Delete an item. Fails with 404 if it does not exist."""
    with _registry_call():
        registry.revoke_item(parse_id(item_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
