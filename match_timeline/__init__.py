"""Canonical match timelines from API-Football play-by-play events."""

__version__ = "0.1.0"
