"""Centralised configuration using pydantic-settings.

All environment variables are read through the Settings class.
Consumers call ``get_settings()`` to obtain a cached, validated instance.
Tests construct ``Settings(_env_file=None, ...)`` directly for isolation.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, PositiveFloat, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

# src/cuemarkup/config.py  ->  parent x3  ->  project root
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

_LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


# ---------------------------------------------------------------------------
# Sub-models (one per configuration domain)
# ---------------------------------------------------------------------------
class RenderConfig(BaseModel):
    """Cue rendering defaults."""

    display_density: PositiveFloat = 1.0
    page_title: str = "Subtitles"


class LoggingConfig(BaseModel):
    """Log level and optional rotating log file location."""

    level: str = "INFO"
    log_dir: Path | None = None

    @field_validator("level")
    @classmethod
    def known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            msg = f"LOGGING__LEVEL must be one of {sorted(_LOG_LEVELS)}, got {value!r}"
            raise ValueError(msg)
        return level


# ---------------------------------------------------------------------------
# Root settings
# ---------------------------------------------------------------------------
class Settings(BaseSettings):
    """Settings with automatic .env loading and type validation.

    Environment variables use double-underscore delimiter for nesting:
    ``RENDER__DISPLAY_DENSITY``, ``LOGGING__LEVEL``, etc.
    """

    model_config = SettingsConfigDict(
        env_file=_PROJECT_ROOT / ".env",
        env_nested_delimiter="__",
        extra="ignore",
    )

    render: RenderConfig = RenderConfig()
    logging: LoggingConfig = LoggingConfig()


# ---------------------------------------------------------------------------
# Singleton access
# ---------------------------------------------------------------------------
@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance.

    Call ``get_settings.cache_clear()`` in tests to reset.
    """
    settings = Settings()

    env_file = settings.model_config.get("env_file")
    if env_file is not None and Path(str(env_file)).is_file():
        logger.info("Settings loaded .env from: %s", env_file)
    else:
        logger.info("Settings: no .env file found, using env vars and defaults")

    return settings
