"""Event classification, side resolution and timeline assembly."""

from .classifier import Classification, classify
from .minutes import format_minute, minute_sort_key, parse_minute
from .sides import is_known_side, resolve_side
from .timeline import (
    assemble,
    build_canonical_event,
    compress_second_yellows,
    event_identity,
    sort_events,
)
from .visibility import is_noise, is_visible_in_mode, visible_events

__all__ = [
    "Classification",
    "assemble",
    "build_canonical_event",
    "classify",
    "compress_second_yellows",
    "event_identity",
    "format_minute",
    "is_known_side",
    "is_noise",
    "is_visible_in_mode",
    "minute_sort_key",
    "parse_minute",
    "resolve_side",
    "sort_events",
    "visible_events",
]
