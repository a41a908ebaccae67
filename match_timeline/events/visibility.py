"""Display-mode filtering for canonical timelines."""

from __future__ import annotations

from collections.abc import Iterable

from ..config import settings
from ..models import CanonicalEvent, DisplayMode
from .constants import COMPACT_KINDS, NOISE_KINDS


def is_visible_in_mode(event: CanonicalEvent, mode: DisplayMode | str) -> bool:
    """Compact mode shows goals, own goals and reds; full mode shows everything."""
    if DisplayMode(mode) is DisplayMode.FULL:
        return True
    return event.kind in COMPACT_KINDS


def is_noise(event: CanonicalEvent) -> bool:
    return event.kind in NOISE_KINDS


def visible_events(
    events: Iterable[CanonicalEvent],
    mode: DisplayMode | str | None = None,
    *,
    include_noise: bool | None = None,
) -> list[CanonicalEvent]:
    """Filter a timeline for display.

    ``mode`` and ``include_noise`` default to the configured timeline
    settings when not given.
    """
    cfg = settings.timeline_config
    resolved_mode = DisplayMode(mode if mode is not None else cfg.default_display_mode)
    show_noise = cfg.show_var_penalty_confirmed if include_noise is None else include_noise

    return [
        event
        for event in events
        if is_visible_in_mode(event, resolved_mode) and (show_noise or not is_noise(event))
    ]
