"""Boundary encoding for identifiers and scores.

Identifiers are unsigned 128-bit integers internally. They cross JSON and
HTTP boundaries as decimal strings, since many transports cannot carry
128-bit numbers exactly.
"""

from __future__ import annotations

from scv.registry.errors import InvalidArgument

MAX_ID = 2**128 - 1
MAX_SCORE = 2**16 - 1


def check_id(value: int) -> int:
    """Return ``value`` if it is a valid u128 identifier."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"Identifier must be an integer, got {value!r}")
    if value < 0 or value > MAX_ID:
        raise InvalidArgument(f"Identifier out of range: {value}")
    return value


def parse_id(value: str | int) -> int:
    """Parse a decimal-string (or int) identifier."""
    if isinstance(value, str):
        text = value.strip()
        if not (text.isascii() and text.isdigit()):
            raise InvalidArgument(f"Identifier must be a decimal string, got {value!r}")
        value = int(text)
    return check_id(value)


def format_id(value: int) -> str:
    return str(check_id(value))


def check_score(value: int) -> int:
    """Return ``value`` if it fits an unsigned 16-bit score."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"Score must be an integer, got {value!r}")
    if value < 0 or value > MAX_SCORE:
        raise InvalidArgument(f"Score out of range [0, {MAX_SCORE}]: {value}")
    return value


def check_text(value: str, name: str) -> str:
    """Return ``value`` if it is a string."""
    if not isinstance(value, str):
        raise InvalidArgument(f"{name.capitalize()} must be text, got {value!r}")
    return value
