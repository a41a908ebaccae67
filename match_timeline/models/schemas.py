"""Pydantic models for provider payloads and the canonical match timeline."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class EventKind(str, Enum):
    """Closed vocabulary of canonical event kinds."""

    GOAL = "goal"
    OWN_GOAL = "own-goal"
    PENALTY_MISS = "penalty-miss"
    YELLOW = "yellow"
    SECOND_YELLOW = "second-yellow"
    RED = "red"
    SUB = "sub"
    VAR_GOAL_CANCELLED = "var-goal-cancelled"
    VAR_GOAL_DISALLOWED_OFFSIDE = "var-goal-disallowed-offside"
    VAR_GOAL_DISALLOWED = "var-goal-disallowed"
    VAR_GOAL_CONFIRMED = "var-goal-confirmed"
    VAR_PEN_CANCELLED = "var-pen-cancelled"
    VAR_PEN_CONFIRMED = "var-pen-confirmed"
    VAR_CARD_UPGRADE = "var-card-upgrade"
    OTHER = "other"

    @property
    def is_var(self) -> bool:
        return self.value.startswith("var-")

    @property
    def is_card(self) -> bool:
        return self in CARD_KINDS


CARD_KINDS = frozenset({EventKind.YELLOW, EventKind.SECOND_YELLOW, EventKind.RED})


class Side(str, Enum):
    HOME = "home"
    AWAY = "away"


class DisplayMode(str, Enum):
    COMPACT = "compact"
    FULL = "full"


# ---------------------------------------------------------------------------
# Provider (API-Football) input
# ---------------------------------------------------------------------------


def text_keys(mapping: Mapping[Any, Any]) -> dict[str, Any]:
    """Copy a provider mapping, dropping keys that are not strings."""
    return {key: value for key, value in mapping.items() if isinstance(key, str)}


def _scalar_text(value: Any) -> str | None:
    """Render a provider scalar as text; containers and None become None."""
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return None


class ProviderRef(BaseModel):
    """A provider team or player reference ({id, name})."""

    model_config = ConfigDict(extra="allow")

    # Compared by equality only, so any scalar the provider sends is kept
    id: Any = None
    name: str | None = None

    @field_validator("name", mode="before")
    @classmethod
    def name_to_text(cls, value: Any) -> str | None:
        return _scalar_text(value)


class EventTime(BaseModel):
    model_config = ConfigDict(extra="allow")

    # Left untyped: the provider occasionally sends strings here
    elapsed: Any = None
    extra: Any = None


class RawEvent(BaseModel):
    """Single event from the provider's fixtures/events endpoint."""

    model_config = ConfigDict(extra="allow")

    type: str | None = None
    detail: str | None = None
    time: EventTime = Field(default_factory=EventTime)
    team: ProviderRef = Field(default_factory=ProviderRef)
    player: ProviderRef = Field(default_factory=ProviderRef)
    assist: ProviderRef = Field(default_factory=ProviderRef)
    comments: str | None = None

    @field_validator("time", "team", "player", "assist", mode="before")
    @classmethod
    def non_mapping_to_empty(cls, value: Any) -> Any:
        if isinstance(value, BaseModel):
            return value
        return text_keys(value) if isinstance(value, Mapping) else {}

    @field_validator("type", "detail", "comments", mode="before")
    @classmethod
    def scalar_to_text(cls, value: Any) -> str | None:
        return _scalar_text(value)


# ---------------------------------------------------------------------------
# Canonical output
# ---------------------------------------------------------------------------


class CanonicalModel(BaseModel):
    """Base for output models: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class CanonicalEvent(CanonicalModel):
    """Normalized, presentation-agnostic match event.

    Kind-specific fields are checked at construction:
    substitutions carry in/out players and never an assist, cards never
    carry an assist, and only red cards may be flagged as second yellows.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    minute: str
    team: Side
    kind: EventKind
    detail: str | None = None
    player: str = ""
    assist: str | None = None
    in_player: str | None = None
    out_player: str | None = None
    second_yellow: bool | None = None
    raw_type: str = ""
    raw_detail: str = ""
    comments: str | None = None

    @model_validator(mode="after")
    def check_kind_fields(self) -> CanonicalEvent:
        if self.kind is EventKind.SUB:
            if self.in_player is None or self.out_player is None:
                raise ValueError("substitution requires in_player and out_player")
            if self.assist is not None:
                raise ValueError("substitution must not carry an assist")
        elif self.in_player is not None or self.out_player is not None:
            raise ValueError(f"in_player/out_player are only valid on substitutions, got {self.kind.value}")

        if self.kind.is_card and self.assist is not None:
            raise ValueError("cards must not carry an assist")

        if self.second_yellow is not None:
            if self.second_yellow is not True:
                raise ValueError("second_yellow is either true or absent")
            if self.kind is not EventKind.RED:
                raise ValueError("second_yellow is only valid on red cards")
        return self


class MatchScore(CanonicalModel):
    home: int = 0
    away: int = 0


class MatchStatus(CanonicalModel):
    state: str = ""  # "FT", "HT", "67'", "NS"...
    half_time_score: str = ""


class MatchRecord(CanonicalModel):
    """Canonical match: fixture fields plus the ordered event timeline."""

    id: str
    league: str = ""
    venue: str = ""
    attendance: int | None = None
    kickoff: str | None = None
    round: int | None = None
    home_team_id: str
    away_team_id: str
    score: MatchScore = Field(default_factory=MatchScore)
    status: MatchStatus = Field(default_factory=MatchStatus)
    events: list[CanonicalEvent] = Field(default_factory=list)


class MatchdayStats(CanonicalModel):
    goals: int = 0
    own_goals: int = 0
    yellows: int = 0
    reds: int = 0
    var: int = 0


class Matchday(CanonicalModel):
    season: int | None = None
    round: int
    matches: list[MatchRecord] = Field(default_factory=list)
