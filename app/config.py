"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    secret_key: str = Field(
        description="Secret key for signing access tokens", min_length=1
    )
    refresh_secret_key: str | None = Field(
        default=None,
        description="Secret key for signing refresh tokens (defaults to SECRET_KEY)",
    )
    access_token_expire_minutes: int = Field(
        default=1440,
        description="Number of minutes before access tokens expire",
        gt=0,
    )
    refresh_token_expire_minutes: int = Field(
        default=10080,
        description="Number of minutes before refresh tokens expire",
        gt=0,
    )
    token_issuer: str = Field(default="pme360-api", min_length=1)
    token_audience: str = Field(default="pme360-frontend", min_length=1)
    password_hash_rounds: int = Field(
        default=310_000,
        description="pbkdf2_sha256 rounds used when hashing passwords",
        ge=1000,
    )
    api_prefix: str = Field(default="/api/v1")
    realtime_enabled: bool = Field(
        default=True,
        description="Push notifications over the websocket gateway when enabled",
    )
    websocket_path: str = Field(default="/ws/notifications")
    websocket_ping_interval_seconds: float = Field(default=20.0, gt=0)
    websocket_ping_timeout_seconds: float = Field(default=20.0, gt=0)
    notification_retention_days: int = Field(
        default=30,
        description="Age after which read notifications are purged",
        gt=0,
    )
    event_reminder_window_hours: int = Field(default=24, gt=0)
    cors_origins: str = Field(
        default="",
        description="Comma separated list of origins allowed by CORS",
    )
    log_level: str = Field(default="INFO")

    @model_validator(mode="after")
    def _validate_paths(self) -> "Settings":
        if not self.websocket_path.startswith("/"):
            raise ValueError("WEBSOCKET_PATH must start with '/'")
        if self.api_prefix and not self.api_prefix.startswith("/"):
            raise ValueError("API_PREFIX must start with '/'")
        return self

    @property
    def refresh_signing_key(self) -> str:
        return self.refresh_secret_key or self.secret_key

    @property
    def cors_origins_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
