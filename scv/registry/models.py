"""Registry data models."""

from __future__ import annotations

from dataclasses import asdict, dataclass

from scv.registry.ids import check_score, check_text


@dataclass(frozen=True)
class Item:
    """A single stored record. Immutable once stored."""

    title: str
    score: int  # 0 - 65535
    content: str  # inline text or an external reference

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> Item:
        """Build an item from its stored shape, rejecting bad field values."""
        return cls(
            title=check_text(data["title"], "title"),
            score=check_score(data["score"]),
            content=check_text(data["content"], "content"),
        )
