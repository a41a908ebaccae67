"""
Generic parsing helpers for loosely-typed provider payloads.
"""

from __future__ import annotations

from typing import Any


def parse_int(value: Any) -> int | None:
    """Parse a value to an integer, handling common edge cases.

    Accepts strings, ints, floats, or None. Returns None for empty strings,
    "-", booleans and anything that does not parse.
    """
    if value in (None, "", "-") or isinstance(value, bool):
        return None
    try:
        return int(float(value))
    except (ValueError, TypeError, OverflowError):
        return None


def lower_text(value: Any) -> str:
    """Lower-cased string form of a provider field; None becomes ""."""
    if value is None:
        return ""
    return str(value).lower()
