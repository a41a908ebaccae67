"""Home/away resolution for provider team identifiers."""

from __future__ import annotations

from typing import Any

from ..models import Side


def resolve_side(event_team_id: Any, home_team_id: Any, away_team_id: Any) -> Side:
    """Return AWAY only when the event's team id equals the away id.

    Everything else, including None and ids that match neither side,
    resolves to HOME. Callers that need strict validation should check
    ``is_known_side`` first.
    """
    if event_team_id == away_team_id:
        return Side.AWAY
    return Side.HOME


def is_known_side(event_team_id: Any, home_team_id: Any, away_team_id: Any) -> bool:
    return event_team_id is not None and event_team_id in (home_team_id, away_team_id)
