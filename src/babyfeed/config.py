"""Application configuration."""

import logging
import os
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")
_logger = logging.getLogger(__name__)

DEFAULT_TIMEZONE = "UTC"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    data_path: str = "babyfeed.json"
    timezone: str = DEFAULT_TIMEZONE
    max_insights: int = 8
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="BABYFEED_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_timezone(raw: str | None) -> ZoneInfo:
    """Resolve a configured zone name, falling back to UTC."""
    if raw is None or not raw.strip():
        return ZoneInfo(DEFAULT_TIMEZONE)
    try:
        return ZoneInfo(raw.strip())
    except (ZoneInfoNotFoundError, ValueError):
        _logger.warning("Unknown timezone %r, using %s", raw, DEFAULT_TIMEZONE)
        return ZoneInfo(DEFAULT_TIMEZONE)
