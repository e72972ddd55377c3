"""Tests for identifier and score boundary encoding."""

import pytest

from scv.registry.errors import InvalidArgument
from scv.registry.ids import MAX_ID, check_score, format_id, parse_id


def test_parse_decimal_string():
    assert parse_id("1001") == 1001
    assert parse_id(" 42 ") == 42
    assert parse_id("0") == 0


def test_parse_full_width_id_exactly():
    text = "340282366920938463463374607431768211455"
    assert parse_id(text) == MAX_ID
    assert format_id(MAX_ID) == text


def test_parse_accepts_int():
    assert parse_id(7) == 7


@pytest.mark.parametrize(
    "value",
    ["", "abc", "-1", "1.5", "1e3", "340282366920938463463374607431768211456", -1, True],
)
def test_parse_rejects_bad_ids(value):
    with pytest.raises(InvalidArgument):
        parse_id(value)


def test_check_score_bounds():
    assert check_score(0) == 0
    assert check_score(65535) == 65535
    for bad in (-1, 65536, 1.0, "5", False):
        with pytest.raises(InvalidArgument):
            check_score(bad)
