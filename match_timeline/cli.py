"""Build matchday JSON files from provider fixture and event dumps.

Usage:
    build-matchdays --fixtures data/fixtures.raw.json --events data/events.raw.json \
        --out data/matchdays [--season 2025]

Both inputs are API-Football envelopes ({"response": [...]}). When
--events is omitted, events embedded in each fixture payload are used.
"""

from __future__ import annotations

import argparse
import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from .logging import get_logger
from .services import build_matchdays, matchday_stats


def _load_response(path: Path) -> list[Any]:
    payload = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(payload, dict):
        return payload.get("response") or []
    return payload if isinstance(payload, list) else []


def _embedded_events(fixtures: list[Any]) -> list[dict[str, Any]]:
    events: list[dict[str, Any]] = []
    for fixture_payload in fixtures:
        if not isinstance(fixture_payload, Mapping):
            continue
        fixture_id = (fixture_payload.get("fixture") or {}).get("id")
        for event in fixture_payload.get("events") or []:
            if isinstance(event, dict):
                events.append({"fixtureId": fixture_id, **event})
    return events


def _default_season(fixtures: list[Any]) -> int | None:
    for fixture_payload in fixtures:
        if isinstance(fixture_payload, Mapping):
            return (fixture_payload.get("league") or {}).get("season")
    return None


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Build canonical matchday timelines.")
    parser.add_argument("--fixtures", type=Path, required=True, help="Provider fixtures JSON")
    parser.add_argument("--events", type=Path, default=None, help="Provider events JSON")
    parser.add_argument("--out", type=Path, required=True, help="Output directory for {round}.json files")
    parser.add_argument("--season", type=int, default=None)
    args = parser.parse_args(argv)

    fixtures = _load_response(args.fixtures)
    events = _load_response(args.events) if args.events else _embedded_events(fixtures)
    season = args.season if args.season is not None else _default_season(fixtures)

    log = get_logger(command="build-matchdays", season=season)
    log.info("build_matchdays_start", fixtures=len(fixtures), events=len(events))

    matchdays = build_matchdays(fixtures, events, season=season)

    args.out.mkdir(parents=True, exist_ok=True)
    for round_number, matchday in matchdays.items():
        out_path = args.out / f"{round_number}.json"
        out_path.write_text(json.dumps(matchday.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")
        log.info(
            "build_matchdays_wrote",
            round=round_number,
            path=str(out_path),
            matches=len(matchday.matches),
            stats=matchday_stats(matchday).to_dict(),
        )

    log.info("build_matchdays_done", rounds=len(matchdays))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
