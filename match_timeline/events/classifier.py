"""Provider (type, detail) classification into canonical event kinds."""

from __future__ import annotations

from typing import NamedTuple

from ..models import EventKind
from ..utils.parsing import lower_text
from .constants import EVENT_CLASSIFICATION_RULES


class Classification(NamedTuple):
    kind: EventKind
    detail: str


def classify(event_type: str | None, detail: str | None) -> Classification:
    """Map an API-Football (type, detail) pair to a canonical kind + detail.

    Matching is case-insensitive on substrings of the provider vocabulary
    and the first matching rule wins. Anything the table does not cover
    (including card/VAR notes with an unknown detail) becomes ``other``
    with the lower-cased raw detail, so no event is ever dropped here.
    """
    t = lower_text(event_type).strip()
    d = lower_text(detail)

    for needles, kind, detail_out in EVENT_CLASSIFICATION_RULES.get(t, ()):
        if all(needle in d for needle in needles):
            return Classification(kind, detail_out)

    return Classification(EventKind.OTHER, d)
