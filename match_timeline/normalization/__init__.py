"""Fixture normalization: provider fixture payload -> canonical match record.

Team slugs come from an optional override map keyed by provider team id,
falling back to a slug of the team name.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from ..config import settings
from ..events import assemble
from ..models import MatchRecord, MatchScore, MatchStatus
from ..utils.parsing import parse_int

_SLUG_SEPARATORS = re.compile(r"[^a-z0-9]+")
_TRAILING_ROUND_NUMBER = re.compile(r"(\d+)\s*$")

# Status codes passed through as-is; live codes are replaced by the elapsed minute
_TERMINAL_STATES = {"FT", "HT"}


class FixturePayloadError(ValueError):
    """Raised when a provider fixture lacks the ids needed to build a match."""


def slug_team_name(name: str | None) -> str:
    """'Brighton & Hove Albion' -> 'brighton-and-hove-albion'."""
    if not name:
        return ""
    s = str(name).lower().replace("&", "and")
    return _SLUG_SEPARATORS.sub("-", s).strip("-")


def team_slug(team: Mapping[str, Any] | None, overrides: Mapping[int, str] | None = None) -> str:
    if not team:
        return ""
    overrides = settings.timeline_config.team_slug_overrides if overrides is None else overrides
    team_id = parse_int(team.get("id"))
    if team_id is not None and team_id in overrides:
        return overrides[team_id]
    return slug_team_name(team.get("name"))


def parse_round_number(round_label: str | None) -> int | None:
    """'Regular Season - 18' -> 18."""
    if not round_label:
        return None
    match = _TRAILING_ROUND_NUMBER.search(str(round_label))
    return int(match.group(1)) if match else None


def status_state(status: Mapping[str, Any] | None) -> str:
    status = status or {}
    short = status.get("short") or ""
    if short in _TERMINAL_STATES:
        return short
    elapsed = status.get("elapsed")
    if isinstance(elapsed, int) and not isinstance(elapsed, bool):
        return f"{elapsed}'"
    return short


def half_time_score(score: Mapping[str, Any] | None) -> str:
    halftime = (score or {}).get("halftime") or {}
    home = halftime.get("home")
    away = halftime.get("away")
    if home is None or away is None:
        return ""
    return f"{home}–{away}"


def build_match_record(
    fixture_payload: Mapping[str, Any],
    raw_events: Any = None,
    *,
    slug_overrides: Mapping[int, str] | None = None,
) -> MatchRecord:
    """Map one API-Football fixture plus its events into a MatchRecord.

    ``raw_events`` defaults to the ``events`` list embedded in the fixture
    payload, which the provider includes on single-fixture lookups.

    Raises:
        FixturePayloadError: if the fixture id or either team id is missing
    """
    fixture = fixture_payload.get("fixture") or {}
    teams = fixture_payload.get("teams") or {}
    home = teams.get("home") or {}
    away = teams.get("away") or {}

    fixture_id = fixture.get("id")
    if fixture_id is None:
        raise FixturePayloadError("fixture payload has no fixture.id")
    if home.get("id") is None or away.get("id") is None:
        raise FixturePayloadError(f"fixture {fixture_id} is missing a home or away team id")

    if raw_events is None:
        raw_events = fixture_payload.get("events", [])

    league = fixture_payload.get("league") or {}
    goals = fixture_payload.get("goals") or {}
    venue = fixture.get("venue") or {}

    return MatchRecord(
        id=str(fixture_id),
        league=league.get("name") or "",
        venue=venue.get("name") or "",
        attendance=None,  # not provided by the fixtures endpoint
        kickoff=fixture.get("date"),
        round=parse_round_number(league.get("round")),
        home_team_id=team_slug(home, slug_overrides),
        away_team_id=team_slug(away, slug_overrides),
        score=MatchScore(
            home=parse_int(goals.get("home")) or 0,
            away=parse_int(goals.get("away")) or 0,
        ),
        status=MatchStatus(
            state=status_state(fixture.get("status")),
            half_time_score=half_time_score(fixture_payload.get("score")),
        ),
        events=assemble(raw_events, home.get("id"), away.get("id"), fixture_id),
    )


__all__ = [
    "FixturePayloadError",
    "build_match_record",
    "half_time_score",
    "parse_round_number",
    "slug_team_name",
    "status_state",
    "team_slug",
]
