"""Constants for API-Football event processing.

Contains the classification table and display-mode vocabularies.
"""

from __future__ import annotations

from ..models import EventKind

# Ordered classification rules per lower-cased provider type.
# Each rule: (substrings that must all appear in the lower-cased detail, kind, detail out).
# First match wins; an empty substring tuple always matches.
EVENT_CLASSIFICATION_RULES: dict[str, tuple[tuple[tuple[str, ...], EventKind, str], ...]] = {
    "goal": (
        (("own",), EventKind.OWN_GOAL, "og"),
        (("penalty", "missed"), EventKind.PENALTY_MISS, "missed pen"),
        (("penalty",), EventKind.GOAL, "pen"),
        ((), EventKind.GOAL, ""),
    ),
    "card": (
        (("second", "yellow"), EventKind.SECOND_YELLOW, ""),
        (("yellow",), EventKind.YELLOW, ""),
        (("red",), EventKind.RED, ""),
    ),
    "subst": (
        ((), EventKind.SUB, ""),
    ),
    "var": (
        (("goal cancelled",), EventKind.VAR_GOAL_CANCELLED, ""),
        (("goal disallowed", "offside"), EventKind.VAR_GOAL_DISALLOWED_OFFSIDE, ""),
        (("goal disallowed",), EventKind.VAR_GOAL_DISALLOWED, ""),
        (("goal confirmed",), EventKind.VAR_GOAL_CONFIRMED, ""),
        (("penalty cancelled",), EventKind.VAR_PEN_CANCELLED, ""),
        (("penalty confirmed",), EventKind.VAR_PEN_CONFIRMED, ""),
        (("card upgrade",), EventKind.VAR_CARD_UPGRADE, ""),
    ),
}

# Kinds shown in compact mode; full mode shows everything
COMPACT_KINDS = frozenset({EventKind.GOAL, EventKind.OWN_GOAL, EventKind.RED})

# Kinds hidden from every mode unless noise is requested explicitly
NOISE_KINDS = frozenset({EventKind.VAR_PEN_CONFIRMED})

# Stoppage minutes are encoded as hundredths of the base minute
STOPPAGE_DIVISOR = 100
