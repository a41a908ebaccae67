"""League-level services built on the per-fixture timeline transform."""

from .matchdays import build_matchdays, group_events_by_fixture, matchday_stats, matchday_status

__all__ = [
    "build_matchdays",
    "group_events_by_fixture",
    "matchday_stats",
    "matchday_status",
]
