"""Configuration management using Pydantic Settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

# Shipped value of OPENWEATHER_API_KEY; lookups refuse to run until it is replaced.
PLACEHOLDER_API_KEY = "YOUR_OPENWEATHERMAP_API_KEY"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # OpenWeatherMap
    openweather_api_key: str = PLACEHOLDER_API_KEY
    openweather_url: str = "https://api.openweathermap.org/data/2.5/weather"
    openweather_icon_url: str = "https://openweathermap.org/img/wn/{icon}@2x.png"

    # City looked up as soon as a page connects; empty disables it
    default_city: str = ""

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def has_api_key(self) -> bool:
        key = self.openweather_api_key.strip()
        return bool(key) and key != PLACEHOLDER_API_KEY


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
