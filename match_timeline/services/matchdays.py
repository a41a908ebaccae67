"""Matchday building from league-wide provider dumps.

Groups a flat provider event list by fixture, builds one match record per
fixture and buckets them by round number.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from ..logging import logger
from ..models import EventKind, Matchday, MatchdayStats
from ..normalization import FixturePayloadError, build_match_record, parse_round_number
from ..utils.parsing import lower_text

# Fetch scripts have attached the fixture id under several names over time
_FIXTURE_ID_KEYS = ("fixtureId", "fixture_id", "_fixtureId")


def _event_fixture_id(event: Mapping[str, Any]) -> Any:
    fixture = event.get("fixture")
    if isinstance(fixture, Mapping) and fixture.get("id") is not None:
        return fixture["id"]
    for key in _FIXTURE_ID_KEYS:
        if event.get(key) is not None:
            return event[key]
    return None


def group_events_by_fixture(events: Iterable[Any]) -> dict[str, list[dict[str, Any]]]:
    """Group provider events by fixture id (as a string), keeping input order."""
    by_fixture: dict[str, list[dict[str, Any]]] = {}
    skipped = 0

    for event in events or ():
        if not isinstance(event, Mapping):
            skipped += 1
            continue
        fixture_id = _event_fixture_id(event)
        if fixture_id is None:
            skipped += 1
            continue
        by_fixture.setdefault(str(fixture_id), []).append(dict(event))

    if skipped:
        logger.warning("matchdays_events_without_fixture", skipped=skipped)
    return by_fixture


def build_matchdays(
    fixtures: Iterable[Any],
    events: Iterable[Any],
    *,
    season: int | None = None,
) -> dict[int, Matchday]:
    """Build every matchday present in a fixtures dump.

    Fixtures whose round label has no trailing number, or whose payload is
    unusable, are skipped with a warning. Matches within a round are
    ordered by kickoff.
    """
    events_by_fixture = group_events_by_fixture(events)
    rounds: dict[int, list] = {}

    for position, fixture_payload in enumerate(fixtures or ()):
        if not isinstance(fixture_payload, Mapping):
            logger.warning(
                "matchdays_invalid_fixture",
                position=position,
                error=f"fixture entry is {type(fixture_payload).__name__}, not an object",
            )
            continue

        fixture_id = str((fixture_payload.get("fixture") or {}).get("id"))
        round_label = (fixture_payload.get("league") or {}).get("round")
        round_number = parse_round_number(round_label)
        if round_number is None:
            logger.warning("matchdays_unparsed_round", fixture_id=fixture_id, round=round_label)
            continue

        try:
            match = build_match_record(fixture_payload, events_by_fixture.get(fixture_id, []))
        except FixturePayloadError as exc:
            logger.warning("matchdays_invalid_fixture", fixture_id=fixture_id, error=str(exc))
            continue

        rounds.setdefault(round_number, []).append(match)

    matchdays: dict[int, Matchday] = {}
    for round_number in sorted(rounds):
        matches = sorted(rounds[round_number], key=lambda m: m.kickoff or "")
        matchdays[round_number] = Matchday(season=season, round=round_number, matches=matches)
        logger.info("matchday_built", round=round_number, match_count=len(matches))

    return matchdays


def matchday_stats(matchday: Matchday) -> MatchdayStats:
    """Count goals, own goals, cards and VAR reviews across a matchday.

    VAR events are counted first and excluded from everything else; own
    goals also count as goals.
    """
    stats = MatchdayStats()

    for match in matchday.matches:
        for event in match.events:
            raw_type = lower_text(event.raw_type)
            raw_detail = lower_text(event.raw_detail)

            if raw_type == "var" or event.kind.is_var:
                stats.var += 1
                continue

            if event.kind in (EventKind.GOAL, EventKind.OWN_GOAL) or raw_type == "goal":
                stats.goals += 1
                if event.kind is EventKind.OWN_GOAL or raw_detail == "own goal":
                    stats.own_goals += 1
                continue

            if event.kind is EventKind.YELLOW:
                stats.yellows += 1
            elif event.kind is EventKind.RED:
                stats.reds += 1

    return stats


def matchday_status(matchday: Matchday) -> str:
    """'not-started', 'completed' or 'in-progress' from the match states."""
    states = [m.status.state.strip().upper() for m in matchday.matches if m.status.state.strip()]
    if not states:
        return "not-started"
    if all(s == "FT" for s in states):
        return "completed"
    if all(s == "NS" for s in states):
        return "not-started"
    return "in-progress"
