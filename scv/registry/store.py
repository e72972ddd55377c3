"""Backing stores for registry state.

A store persists the whole item mapping as one unit. ``exists()`` tells
whether any state has ever been saved, which is how the registry detects
a second initialization.
"""

from __future__ import annotations

import json
import os
import stat
import tempfile
from pathlib import Path
from typing import Optional

from scv.registry.errors import InvalidArgument, StoreError
from scv.registry.ids import format_id, parse_id
from scv.registry.models import Item

STORAGE_PREFIX = "scv-chain"


class StateStore:
    """Interface for the registry's persistent map."""

    def exists(self) -> bool:
        raise NotImplementedError

    def load(self) -> dict[int, Item]:
        raise NotImplementedError

    def save(self, items: dict[int, Item]) -> None:
        raise NotImplementedError


class MemoryStore(StateStore):
    """In-process store, for tests and embedding."""

    def __init__(self) -> None:
        self._items: Optional[dict[int, Item]] = None

    def exists(self) -> bool:
        return self._items is not None

    def load(self) -> dict[int, Item]:
        if self._items is None:
            raise StoreError("No registry state saved")
        return dict(self._items)

    def save(self, items: dict[int, Item]) -> None:
        self._items = dict(items)


class JsonFileStore(StateStore):
    """File-based store. Keeps the whole registry in one JSON document.

    Saves keep the permissions of an existing state file. A new state file
    is created readable by its owner only (mode 0600).

    Layout::

        {"prefix": "scv-chain", "items": {"1001": {"title": ..., "score": ..., "content": ...}}}
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> dict[int, Item]:
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as exc:
            raise StoreError(f"No registry state at {self.path}") from exc
        except (json.JSONDecodeError, OSError) as exc:
            raise StoreError(f"Cannot read registry state at {self.path}: {exc}") from exc

        if not isinstance(data, dict) or not isinstance(data.get("items"), dict):
            raise StoreError(f"Malformed registry state at {self.path}")

        try:
            return {
                parse_id(key): Item.from_dict(value)
                for key, value in data["items"].items()
            }
        except (InvalidArgument, KeyError, TypeError, ValueError) as exc:
            raise StoreError(f"Malformed item in {self.path}: {exc}") from exc

    def save(self, items: dict[int, Item]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = {
            "prefix": STORAGE_PREFIX,
            "items": {format_id(k): v.to_dict() for k, v in items.items()},
        }
        # Write beside the target, then rename into place.
        fd, tmp_path = tempfile.mkstemp(
            dir=self.path.parent, prefix=".scv_", suffix=".json"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2)
            if self.path.exists():
                os.chmod(tmp_path, stat.S_IMODE(self.path.stat().st_mode))
            os.replace(tmp_path, self.path)
        except BaseException:
            Path(tmp_path).unlink(missing_ok=True)
            raise
