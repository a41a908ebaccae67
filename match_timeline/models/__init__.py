"""Typed models shared across the timeline builder."""

from .schemas import (
    CARD_KINDS,
    CanonicalEvent,
    DisplayMode,
    EventKind,
    EventTime,
    MatchRecord,
    MatchScore,
    MatchStatus,
    Matchday,
    MatchdayStats,
    ProviderRef,
    RawEvent,
    Side,
)

__all__ = [
    "CARD_KINDS",
    "CanonicalEvent",
    "DisplayMode",
    "EventKind",
    "EventTime",
    "MatchRecord",
    "MatchScore",
    "MatchStatus",
    "Matchday",
    "MatchdayStats",
    "ProviderRef",
    "RawEvent",
    "Side",
]
