"""Typed settings configuration - single source of truth."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Date-range expansion cap (days); longer spans expand to nothing
    max_span_days: int = 365

    # Day entry defaults
    default_timezone: str = "UTC"
    default_trip_name: str = "Travel Itinerary"

    # Budget roll-up
    default_currency: str = "USD"
    default_budget_total: float = 3500.0
    budget_warning_percent: float = 80.0

    # Fixed conversion table, units of USD per unit of currency
    fx_rates_to_usd: dict[str, float] = Field(
        default_factory=lambda: {"USD": 1.0, "PHP": 0.018, "JPY": 0.0067}
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
