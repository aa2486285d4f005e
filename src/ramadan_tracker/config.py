"""Application configuration."""

import os
from datetime import date

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from ramadan_tracker.errors import ConfigurationMissingError

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    ramadan_start: date
    cycle_length: int = 30
    participants_table: str = "participants"
    readings_table: str = "readings"
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def load_settings(**overrides: object) -> Settings:
    """Load settings, failing fast when required values are missing."""
    try:
        return Settings(**overrides)
    except ValidationError as exc:
        fields = sorted(
            {".".join(str(part) for part in error["loc"]) for error in exc.errors()}
        )
        raise ConfigurationMissingError(
            f"Missing or invalid configuration: {', '.join(fields)}"
        ) from exc
