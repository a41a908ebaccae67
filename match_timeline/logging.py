"""
structlog setup for the match timeline builder.

Every record is one JSON line on stdout. Matchday files are written to
disk by the CLI, so stdout carries nothing but logs and a build run can
be piped straight into jq.

Event names are snake_case and prefixed by the area that emits them
(``timeline_*``, ``matchdays_*``, ``build_matchdays_*``); fields are
passed as keyword arguments, never formatted into the message.
"""

from __future__ import annotations

import logging
from typing import Any

import structlog

from .config import settings

SERVICE_NAME = "match-timeline"


def _normalize_log_level(level: str | None, environment: str) -> int:
    """Resolve LOG_LEVEL to a numeric level.

    Without an explicit level, development runs log at DEBUG so that
    unclassified provider events show up; production stays at INFO.
    """
    if not level:
        return logging.INFO if environment.lower() == "production" else logging.DEBUG
    return logging.getLevelNamesMapping().get(level.strip().upper(), logging.INFO)


def configure_logging() -> None:
    resolved_level = _normalize_log_level(settings.log_level, settings.environment)
    logging.basicConfig(level=resolved_level)
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.EventRenamer("message"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(resolved_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
    )


def get_logger(**context: Any) -> Any:
    """Module logger with extra fields bound, e.g. the season of a build run."""
    return logger.bind(**context)


configure_logging()

logger = structlog.get_logger().bind(
    logger=SERVICE_NAME,
    service=SERVICE_NAME,
    environment=settings.environment,
)
