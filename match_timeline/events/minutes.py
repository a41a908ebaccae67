"""Minute labels: formatting provider times and ordering display strings."""

from __future__ import annotations

import math
import re
from typing import Any

from ..utils.parsing import parse_int
from .constants import STOPPAGE_DIVISOR

_NON_MINUTE_CHARS = re.compile(r"[^0-9+]")
# Curly and mis-decoded apostrophes seen in hand-edited match files
_APOSTROPHES = ("’", "â€™")


def format_minute(elapsed: Any, extra: Any = None) -> str:
    """Turn provider elapsed/extra into "25'" or "45'+2".

    Returns "" when elapsed is missing or not numeric; a non-numeric
    extra is ignored.
    """
    base = parse_int(elapsed)
    if base is None:
        return ""

    stoppage = parse_int(extra)
    if stoppage is None:
        return f"{base}'"
    return f"{base}'+{stoppage}"


def parse_minute(label: str | None) -> tuple[int, int] | None:
    """Parse a display minute into (base, extra); None when unparsable."""
    if not label:
        return None

    s = str(label).strip()
    for apostrophe in _APOSTROPHES:
        s = s.replace(apostrophe, "'")
    s = _NON_MINUTE_CHARS.sub("", s)
    if not s:
        return None

    base_str, _, extra_str = s.partition("+")
    if not base_str.isdigit():
        return None
    extra = int(extra_str) if extra_str.isdigit() else 0
    return int(base_str), extra


def minute_sort_key(label: str | None) -> float:
    """Numeric ordering key: base + extra/100, +inf for unparsable labels.

    45'+2 sorts after 45' and before 46'.
    """
    parsed = parse_minute(label)
    if parsed is None:
        return math.inf
    base, extra = parsed
    return base + extra / STOPPAGE_DIVISOR
