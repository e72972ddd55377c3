"""Item registry — the authoritative state of one service instance.

Each operation loads the current mapping, checks its precondition and then
saves the whole new mapping in a single store write. A failed check raises
before anything is written, so no call leaves a partial mutation behind.

The registry does no locking. Hosts that serve calls concurrently must
serialize whole operations around it.
"""

from __future__ import annotations

import logging

from scv.registry.errors import (
    AlreadyInitialized,
    DuplicateIdentifier,
    NotAuthorized,
    NotFound,
    NotInitialized,
)
from scv.registry.ids import check_id, check_score, check_text
from scv.registry.models import Item
from scv.registry.store import StateStore

logger = logging.getLogger(__name__)

ITEM_NOT_FOUND = "Item not found"
ALL_REVOKED = "All the items have been revoked."


class ItemRegistry:
    """Durable mapping from u128 identifiers to items."""

    def __init__(self, store: StateStore):
        self.store = store

    @classmethod
    def initialize(cls, store: StateStore) -> ItemRegistry:
        """Create an empty registry in ``store``.

        Raises ``AlreadyInitialized`` if the store already holds state.
        """
        if store.exists():
            raise AlreadyInitialized()
        store.save({})
        logger.debug("Initialized empty registry")
        return cls(store)

    @classmethod
    def open(cls, store: StateStore) -> ItemRegistry:
        """Attach to a store that was initialized earlier."""
        registry = cls(store)
        registry._items()
        return registry

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_item(self, item_id: int) -> Item | None:
        return self._items().get(check_id(item_id))

    def get_item_info(self, item_id: int) -> str:
        """Log a readable summary of the item, or that it is missing.

        Never fails on a missing identifier. The logged text is also
        returned so hosts can echo it.
        """
        item = self.get_item(item_id)
        if item is None:
            message = ITEM_NOT_FOUND
        else:
            message = (
                f"\ntitle: {item.title}\n score: {item.score}\n content: {item.content}"
            )
        logger.info(message)
        return message

    def __len__(self) -> int:
        return len(self._items())

    def __contains__(self, item_id: int) -> bool:
        return check_id(item_id) in self._items()

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def create_item(self, item_id: int, title: str, score: int, content: str) -> None:
        """Store a new item. Raises ``DuplicateIdentifier`` if the id is taken."""
        check_id(item_id)
        check_score(score)
        check_text(title, "title")
        check_text(content, "content")
        items = self._items()
        if item_id in items:
            raise DuplicateIdentifier()
        items[item_id] = Item(title=title, score=score, content=content)
        self.store.save(items)
        logger.debug("Created item %d", item_id)

    def revoke_item(self, item_id: int) -> None:
        """Remove an item. Raises ``NotFound`` if there is none."""
        check_id(item_id)
        items = self._items()
        if item_id not in items:
            raise NotFound()
        del items[item_id]
        self.store.save(items)
        logger.debug("Revoked item %d", item_id)

    def reset_all(self, caller: str, owner: str) -> None:
        """Remove every item. Only the owner may call this.

        ``caller`` is the immediate caller of this operation, not whoever
        originated the request upstream.
        """
        if caller != owner:
            raise NotAuthorized()
        if not self.store.exists():
            raise NotInitialized()
        self.store.save({})
        logger.info(ALL_REVOKED)

    def _items(self) -> dict[int, Item]:
        if not self.store.exists():
            raise NotInitialized()
        return self.store.load()
