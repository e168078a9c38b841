"""HTML fragments written into the weather output region."""

from __future__ import annotations

from jinja2 import Environment

from modules.weather.models import WeatherReading
from shared.config import get_settings

_env = Environment(autoescape=True)


def _number(value: float) -> str:
    """Whole numbers print without a trailing ".0"."""
    return str(int(value)) if float(value).is_integer() else str(value)


_env.filters["number"] = _number

READING_TEMPLATE = _env.from_string(
    """<h2 class="mb-3">{{ reading.location }}</h2>
<img src="{{ icon_url }}" alt="{{ reading.description }}" class="weather-icon">
<p><strong>Temperature:</strong> {{ reading.temperature|number }}°C (Feels like: {{ reading.feels_like|number }}°C)</p>
<p><strong>Description:</strong> {{ reading.display_description }}</p>
<p><strong>Humidity:</strong> {{ reading.humidity }}%</p>
<p><strong>Wind Speed:</strong> {{ reading.wind_speed_display }}</p>"""
)

ERROR_TEMPLATE = _env.from_string('<p class="text-danger">{{ message }}</p>')

LOADING_HTML = "<p>Fetching weather...</p>"


def icon_url(icon: str, template: str | None = None) -> str:
    """Build the provider's icon image URL for an icon identifier."""
    template = template or get_settings().openweather_icon_url
    return template.format(icon=icon)


def render_reading(reading: WeatherReading, icon_template: str | None = None) -> str:
    return READING_TEMPLATE.render(reading=reading, icon_url=icon_url(reading.icon, icon_template))


def render_error(message: str) -> str:
    return ERROR_TEMPLATE.render(message=message)


def render_loading() -> str:
    return LOADING_HTML
