"""Shared pytest fixtures and configuration."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

# Ensure the package is importable without installation
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

# Set environment variables before any imports
os.environ.setdefault("ENVIRONMENT", "development")

HOME_ID = 42
AWAY_ID = 50
FIXTURE_ID = 1035037


def make_raw_event(
    event_type: str = "Goal",
    detail: str = "Normal Goal",
    elapsed: int | None = 10,
    extra: int | None = None,
    team_id: int | None = HOME_ID,
    player: str | None = "Player",
    assist: str | None = None,
    comments: str | None = None,
) -> dict:
    """Build an API-Football style event payload."""
    return {
        "time": {"elapsed": elapsed, "extra": extra},
        "team": {"id": team_id, "name": "Team"},
        "player": {"id": 1, "name": player},
        "assist": {"id": None, "name": assist},
        "type": event_type,
        "detail": detail,
        "comments": comments,
    }


@pytest.fixture
def sample_raw_events():
    """A small but realistic event list, in provider order."""
    return [
        make_raw_event("Goal", "Normal Goal", 12, team_id=HOME_ID, player="B. Saka", assist="M. Odegaard"),
        make_raw_event("Card", "Yellow Card", 34, team_id=AWAY_ID, player="R. Dias", comments="Foul"),
        make_raw_event("subst", "Substitution 1", 46, team_id=AWAY_ID, player="K. Walker", assist="J. Stones"),
        make_raw_event("Goal", "Penalty", 45, extra=2, team_id=AWAY_ID, player="E. Haaland"),
        make_raw_event("Var", "Goal Disallowed - offside", 70, team_id=HOME_ID, player="G. Jesus"),
    ]


@pytest.fixture
def sample_fixture_payload(sample_raw_events):
    """A single API-Football fixture with embedded events."""
    return {
        "fixture": {
            "id": FIXTURE_ID,
            "date": "2025-08-16T16:30:00+00:00",
            "venue": {"id": 494, "name": "Emirates Stadium"},
            "status": {"long": "Match Finished", "short": "FT", "elapsed": 90},
        },
        "league": {"id": 39, "name": "Premier League", "season": 2025, "round": "Regular Season - 1"},
        "teams": {
            "home": {"id": HOME_ID, "name": "Arsenal"},
            "away": {"id": AWAY_ID, "name": "Manchester City"},
        },
        "goals": {"home": 1, "away": 1},
        "score": {"halftime": {"home": 1, "away": 1}},
        "events": sample_raw_events,
    }
