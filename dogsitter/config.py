"""Application configuration settings."""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"

DEFAULT_EXPO_PUSH_URL = "https://exp.host/--/api/v2/push/send"
DEFAULT_STRIPE_API_URL = "https://api.stripe.com/v1"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    expo_push_url: str = Field(
        default=DEFAULT_EXPO_PUSH_URL,
        description="Endpoint accepting push messages addressed to Expo push tokens",
    )
    expo_access_token: str | None = Field(
        default=None,
        description="Optional Expo access token sent as a bearer credential with push requests",
    )
    stripe_secret_key: str | None = Field(
        default=None,
        description="Stripe secret key used for payment method and payment intent calls",
    )
    stripe_api_url: str = Field(
        default=DEFAULT_STRIPE_API_URL,
        description="Base URL of the Stripe REST API",
    )
    platform_fee_percentage: float = Field(
        default=0.1,
        ge=0,
        lt=1,
        description="Share of every charge retained by the platform",
    )
    payment_currency: str = Field(
        default="usd",
        min_length=3,
        max_length=3,
        description="ISO currency code used when charging bookings",
    )
    remote_call_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Upper bound for every store, push and payment call",
    )
    log_level: str = Field(default="INFO", description="Root logging level")

    @model_validator(mode="after")
    def _normalize_values(self) -> "Settings":
        level = self.log_level.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"LOG_LEVEL '{self.log_level}' is not a valid logging level")
        self.log_level = level
        self.payment_currency = self.payment_currency.lower()
        for name in ("expo_push_url", "stripe_api_url"):
            value = getattr(self, name)
            if not value.startswith(("http://", "https://")):
                raise ValueError(f"{name.upper()} must be an http(s) URL")
            setattr(self, name, value.rstrip("/"))
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
