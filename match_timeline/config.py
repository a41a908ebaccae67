"""
Typed settings for the match timeline builder.

Uses Pydantic Settings to load configuration from environment variables
with validation and type safety. A root .env file is read when present.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .validate_env import validate_env


class TimelineConfig(BaseModel):
    # Mode used when a caller does not pick one explicitly
    default_display_mode: Literal["compact", "full"] = "full"
    # VAR "penalty confirmed" notes duplicate the penalty itself, hidden by default
    show_var_penalty_confirmed: bool = False
    # Provider team id -> site slug; unmapped teams fall back to a slug of the name
    team_slug_overrides: dict[int, str] = Field(default_factory=dict)
    # Log when an event's team id matches neither side of the fixture
    unknown_team_warning: bool = True


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    For local development, loads from the repository root .env file if it
    exists. All settings are validated by Pydantic.
    """
    model_config = SettingsConfigDict(
        env_file=Path(__file__).resolve().parents[1] / ".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="allow",
    )

    environment: str = Field("development", alias="ENVIRONMENT")
    log_level: str | None = Field(None, alias="LOG_LEVEL")
    timeline_config: TimelineConfig = Field(default_factory=TimelineConfig)
    timeline_display_mode_override: Literal["compact", "full"] | None = Field(
        None, alias="TIMELINE_DISPLAY_MODE"
    )
    timeline_show_var_pen_confirmed_override: bool | None = Field(
        None, alias="TIMELINE_SHOW_VAR_PEN_CONFIRMED"
    )

    @model_validator(mode="after")
    def _apply_timeline_overrides(self) -> Settings:
        """
        Allow top-level env vars (TIMELINE_DISPLAY_MODE / TIMELINE_SHOW_VAR_PEN_CONFIRMED)
        to override the nested timeline config without double-underscore syntax.
        """
        if self.timeline_display_mode_override:
            self.timeline_config.default_display_mode = self.timeline_display_mode_override
        if self.timeline_show_var_pen_confirmed_override is not None:
            self.timeline_config.show_var_penalty_confirmed = bool(
                self.timeline_show_var_pen_confirmed_override
            )
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Return cached settings instance.

    Settings are cached to avoid re-parsing environment variables
    on every access.
    """
    validate_env()
    return Settings()


settings = get_settings()
