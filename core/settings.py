"""
Centralized Settings Configuration

Uses Pydantic Settings to load configuration from environment variables
with validation and type coercion.
"""

import pytz
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database (hosted Postgres)
    database_url: str
    db_max_connections: int = 20
    db_stale_timeout: int = 300

    # Tournament
    tournament_name: str = "UPA Summer Championship"
    display_timezone: str = "US/Central"

    # Match status
    live_match_window_hours: int = 4  # unscored matches that tipped off within this window show as live

    # Listings
    recent_matches_limit: int = 5
    players_page_size: int = 25
    match_history_limit: int = 10

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"  # "json" or "console"
    service_name: str = "upa-tournament-dashboard"

    # CORS
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:8000",
    ]

    # Development mode
    development_mode: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid Python logging level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_v = v.upper()
        if upper_v not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return upper_v

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format is either json or console."""
        lower_v = v.lower()
        if lower_v not in {"json", "console"}:
            raise ValueError("log_format must be 'json' or 'console'")
        return lower_v

    @field_validator("display_timezone")
    @classmethod
    def validate_display_timezone(cls, v: str) -> str:
        """Validate the timezone is known to pytz."""
        if v not in pytz.all_timezones_set:
            raise ValueError(f"Unknown timezone: {v}")
        return v


def get_settings() -> Settings:
    """
    Get application settings.

    This function creates a new Settings instance each time,
    allowing for testing with different configurations.
    """
    return Settings()


# Default settings instance for convenience
# Import this for quick access: from core.settings import settings
settings = Settings()
