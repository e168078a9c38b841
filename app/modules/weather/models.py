"""Pydantic models for weather lookups."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, ValidationError

from modules.weather.errors import TransportError

MS_TO_KMH = 3.6


class LookupRequest(BaseModel):
    city: str


class WeatherReading(BaseModel):
    """Display-ready snapshot of current conditions for one location."""

    location: str
    temperature: float  # °C
    feels_like: float  # °C
    humidity: int = Field(ge=0, le=100)
    description: str
    icon: str
    wind_speed_kmh: float

    @property
    def display_description(self) -> str:
        return self.description[:1].upper() + self.description[1:]

    @property
    def wind_speed_display(self) -> str:
        return f"{self.wind_speed_kmh:.1f} km/h"

    @classmethod
    def from_provider(cls, data: dict) -> WeatherReading:
        """Build a reading from an OpenWeatherMap current weather payload.

        An empty ``weather`` list yields description "N/A" and an empty icon;
        a description the provider sent is kept as is, even when blank.

        Raises:
            TransportError: If required fields are missing or mistyped.
        """
        try:
            main = data["main"]
            conditions = data.get("weather") or []
            first = conditions[0] if conditions else {}
            return cls(
                location=data["name"],
                temperature=main["temp"],
                feels_like=main["feels_like"],
                humidity=main["humidity"],
                description=first.get("description", "N/A"),
                icon=first.get("icon") or "",
                wind_speed_kmh=round(float(data["wind"]["speed"]) * MS_TO_KMH, 1),
            )
        except (KeyError, TypeError, ValueError, AttributeError, ValidationError) as e:
            raise TransportError(f"Malformed response from weather provider: {e}") from e


class RenderResult(BaseModel):
    """What a single submission resolved to."""

    status: Literal["success", "error"]
    html: str
    generation: int = 0
    reading: WeatherReading | None = None
    error: str | None = None
    # Superseded by a newer submission; nothing was rendered
    stale: bool = False
