"""Timeline assembly for a single fixture.

Converts raw API-Football events into canonical events, orders them by
match minute and folds yellow+red pairs into a single dismissal.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from ..config import settings
from ..logging import logger
from ..models import CanonicalEvent, EventKind, RawEvent
from ..models.schemas import text_keys
from .classifier import classify
from .minutes import format_minute, minute_sort_key
from .sides import is_known_side, resolve_side


def build_canonical_event(
    raw: RawEvent,
    event_id: str,
    home_team_id: Any,
    away_team_id: Any,
) -> CanonicalEvent:
    """Build one canonical event from a validated raw event."""
    kind, detail = classify(raw.type, raw.detail)

    player_name = raw.player.name or ""
    assist_name = raw.assist.name or ""

    fields: dict[str, Any] = {}
    if kind is EventKind.SUB:
        # Provider convention: player leaves the pitch, assist comes on
        fields["out_player"] = player_name
        fields["in_player"] = assist_name
    elif not kind.is_card and assist_name:
        fields["assist"] = assist_name

    return CanonicalEvent(
        id=event_id,
        minute=format_minute(raw.time.elapsed, raw.time.extra),
        team=resolve_side(raw.team.id, home_team_id, away_team_id),
        kind=kind,
        detail=detail or None,
        player=player_name,
        raw_type=raw.type or "",
        raw_detail=raw.detail or "",
        comments=raw.comments,
        **fields,
    )


def sort_events(events: Sequence[CanonicalEvent]) -> list[CanonicalEvent]:
    """Stable ascending sort by minute; unparsable minutes go last."""
    return sorted(events, key=lambda e: minute_sort_key(e.minute))


def compress_second_yellows(events: Sequence[CanonicalEvent]) -> list[CanonicalEvent]:
    """Fold a yellow immediately followed by a red for the same player into one event.

    The merged entry is the red card with ``second_yellow`` set; it takes
    the yellow's slot in the output.
    """
    compressed: list[CanonicalEvent] = []

    for event in events:
        prev = compressed[-1] if compressed else None
        if (
            event.kind is EventKind.RED
            and prev is not None
            and prev.kind is EventKind.YELLOW
            and prev.player == event.player
            and prev.team == event.team
            and prev.minute == event.minute
        ):
            compressed[-1] = event.model_copy(update={"second_yellow": True})
        else:
            compressed.append(event)

    return compressed


def assemble(
    raw_events: Any,
    home_team_id: Any,
    away_team_id: Any,
    fixture_id: Any,
) -> list[CanonicalEvent]:
    """Build the ordered canonical timeline for one fixture.

    Ids are "{fixture_id}-{index}" over the input position, so repeated
    runs on the same payload produce identical output. A payload that is
    not a sequence yields an empty timeline. Entries that are not mappings
    are skipped; every other entry becomes one event, with badly typed
    fields degraded to empty values.
    """
    if not isinstance(raw_events, Sequence) or isinstance(raw_events, (str, bytes)):
        if raw_events is not None:
            logger.warning(
                "timeline_malformed_events",
                fixture_id=fixture_id,
                payload_type=type(raw_events).__name__,
            )
        return []

    warn_unknown_team = settings.timeline_config.unknown_team_warning
    events: list[CanonicalEvent] = []

    for index, item in enumerate(raw_events):
        if not isinstance(item, Mapping):
            logger.warning(
                "timeline_skipped_non_mapping_event",
                fixture_id=fixture_id,
                index=index,
                item_type=type(item).__name__,
            )
            continue

        raw = RawEvent.model_validate(text_keys(item))
        event = build_canonical_event(raw, f"{fixture_id}-{index}", home_team_id, away_team_id)

        if warn_unknown_team and not is_known_side(raw.team.id, home_team_id, away_team_id):
            logger.warning(
                "timeline_unknown_team_id",
                fixture_id=fixture_id,
                index=index,
                team_id=raw.team.id,
                home_team_id=home_team_id,
                away_team_id=away_team_id,
            )

        if event.kind is EventKind.OTHER:
            logger.debug(
                "timeline_unclassified_event",
                fixture_id=fixture_id,
                index=index,
                raw_type=event.raw_type,
                raw_detail=event.raw_detail,
            )

        events.append(event)

    timeline = compress_second_yellows(sort_events(events))

    logger.debug(
        "timeline_assembled",
        fixture_id=fixture_id,
        raw_count=len(raw_events),
        event_count=len(timeline),
    )
    return timeline


def event_identity(fixture_id: Any, event: CanonicalEvent) -> tuple[str, str, str, str]:
    """Content-based key for matching events across re-fetches.

    Unlike the positional id, this survives the provider reordering events.
    """
    return (str(fixture_id), event.minute, event.kind.value, event.player)
