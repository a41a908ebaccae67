"""Fail-fast environment validation for the timeline builder.

Only checks values that are actually set; nothing is strictly required
because the transform itself has no external dependencies.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache

ALLOWED_ENVIRONMENTS = {"development", "staging", "production"}


def optional_env(name: str) -> str | None:
    """Fetch an environment variable, treating blank values as unset."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def validate_environment_value(environment: str) -> None:
    """Ensure ENVIRONMENT is one of the allowed values."""
    if environment not in ALLOWED_ENVIRONMENTS:
        allowed = ", ".join(sorted(ALLOWED_ENVIRONMENTS))
        raise RuntimeError(f"ENVIRONMENT must be one of: {allowed}.")


def validate_log_level(level: str) -> None:
    """Ensure LOG_LEVEL names a standard logging level."""
    if level.upper() not in logging.getLevelNamesMapping():
        raise RuntimeError(f"LOG_LEVEL {level!r} is not a known logging level.")


@lru_cache(maxsize=1)
def validate_env() -> None:
    """Validate environment variables before settings are loaded."""
    environment = optional_env("ENVIRONMENT")
    if environment is not None:
        validate_environment_value(environment)

    log_level = optional_env("LOG_LEVEL")
    if log_level is not None:
        validate_log_level(log_level)
