"""Tests for events/visibility.py module."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from match_timeline.config import TimelineConfig
from match_timeline.events.visibility import is_noise, is_visible_in_mode, visible_events
from match_timeline.models import CanonicalEvent, DisplayMode, EventKind, Side


def _event(kind: EventKind, **extra) -> CanonicalEvent:
    return CanonicalEvent(id=f"1-{kind.value}", minute="10'", team=Side.HOME, kind=kind, **extra)


def _all_kinds() -> list[CanonicalEvent]:
    events = []
    for kind in EventKind:
        if kind is EventKind.SUB:
            events.append(_event(kind, in_player="A", out_player="B"))
        else:
            events.append(_event(kind))
    return events


class TestIsVisibleInMode:
    @pytest.mark.parametrize("kind", [EventKind.GOAL, EventKind.OWN_GOAL, EventKind.RED])
    def test_compact_shows_decisive_events(self, kind):
        assert is_visible_in_mode(_event(kind), DisplayMode.COMPACT)

    @pytest.mark.parametrize(
        "kind",
        [EventKind.YELLOW, EventKind.PENALTY_MISS, EventKind.VAR_GOAL_CANCELLED, EventKind.OTHER],
    )
    def test_compact_hides_the_rest(self, kind):
        assert not is_visible_in_mode(_event(kind), "compact")

    def test_full_shows_everything(self):
        assert all(is_visible_in_mode(e, "full") for e in _all_kinds())

    def test_unknown_mode_raises(self):
        with pytest.raises(ValueError):
            is_visible_in_mode(_event(EventKind.GOAL), "minimal")


class TestVisibleEvents:
    def test_penalty_confirmed_hidden_by_default(self):
        events = visible_events(_all_kinds(), DisplayMode.FULL, include_noise=False)
        assert EventKind.VAR_PEN_CONFIRMED not in {e.kind for e in events}
        assert len(events) == len(EventKind) - 1

    def test_noise_included_on_request(self):
        events = visible_events(_all_kinds(), DisplayMode.FULL, include_noise=True)
        assert len(events) == len(EventKind)

    def test_compact_filter(self):
        events = visible_events(_all_kinds(), DisplayMode.COMPACT, include_noise=True)
        assert {e.kind for e in events} == {EventKind.GOAL, EventKind.OWN_GOAL, EventKind.RED}

    def test_defaults_come_from_settings(self):
        cfg = TimelineConfig(default_display_mode="compact", show_var_penalty_confirmed=False)
        with patch("match_timeline.events.visibility.settings") as mock_settings:
            mock_settings.timeline_config = cfg
            events = visible_events(_all_kinds())
        assert len(events) == 3

    def test_is_noise(self):
        assert is_noise(_event(EventKind.VAR_PEN_CONFIRMED))
        assert not is_noise(_event(EventKind.VAR_PEN_CANCELLED))
