"""Tests for SCV data models."""

import dataclasses

import pytest

from scv.registry.errors import InvalidArgument
from scv.registry.models import Item


def test_item_equality_is_structural():
    assert Item("t", 1, "c") == Item(title="t", score=1, content="c")
    assert Item("t", 1, "c") != Item("t", 2, "c")
    assert Item("t", 1, "c") != Item("t", 1, "other")


def test_item_is_immutable():
    item = Item("t", 1, "c")
    with pytest.raises(dataclasses.FrozenInstanceError):
        item.score = 2


def test_item_dict_shape():
    item = Item(title="Who am I", score=5, content="link file cv")
    assert item.to_dict() == {
        "title": "Who am I",
        "score": 5,
        "content": "link file cv",
    }
    assert Item.from_dict(item.to_dict()) == item


def test_item_from_dict_rejects_bad_values():
    with pytest.raises(InvalidArgument):
        Item.from_dict({"title": "t", "score": 99999, "content": "c"})
    with pytest.raises(InvalidArgument):
        Item.from_dict({"title": 5, "score": 1, "content": "c"})
    with pytest.raises(InvalidArgument):
        Item.from_dict({"title": "t", "score": 1, "content": None})
