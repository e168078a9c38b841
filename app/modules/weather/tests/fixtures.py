"""Test fixtures and mock data for weather module tests."""

from __future__ import annotations

from shared.config import Settings

ICON_TEMPLATE = "https://openweathermap.org/img/wn/{icon}@2x.png"

TEST_SETTINGS = Settings(
    openweather_api_key="test-key",
    openweather_url="https://api.openweathermap.org/data/2.5/weather",
    openweather_icon_url=ICON_TEMPLATE,
    default_city="",
)

PLACEHOLDER_SETTINGS = Settings(
    openweather_api_key="YOUR_OPENWEATHERMAP_API_KEY",
    openweather_icon_url=ICON_TEMPLATE,
    default_city="",
)

CURRENT_WEATHER_RESPONSE = {
    "coord": {"lon": -0.1257, "lat": 51.5085},
    "weather": [
        {"id": 500, "main": "Rain", "description": "light rain", "icon": "10d"}
    ],
    "base": "stations",
    "main": {
        "temp": 8.5,
        "feels_like": 5.3,
        "temp_min": 7.2,
        "temp_max": 9.9,
        "pressure": 1013,
        "humidity": 72,
    },
    "visibility": 10000,
    "wind": {"speed": 4.2, "deg": 230},
    "clouds": {"all": 85},
    "dt": 1771156800,
    "sys": {"country": "GB", "sunrise": 1771139700, "sunset": 1771175100},
    "timezone": 0,
    "id": 2643743,
    "name": "London",
    "cod": 200,
}

PARIS_RESPONSE = {
    "weather": [{"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}],
    "main": {"temp": 12.0, "feels_like": 10.8, "humidity": 55},
    "wind": {"speed": 10},
    "name": "Paris",
    "cod": 200,
}

NO_CONDITIONS_RESPONSE = {
    "weather": [],
    "main": {"temp": -3.0, "feels_like": -7.5, "humidity": 90},
    "wind": {"speed": 0},
    "name": "Nuuk",
    "cod": 200,
}

CITY_NOT_FOUND_RESPONSE = {"cod": "404", "message": "city not found"}

INVALID_KEY_RESPONSE = {
    "cod": 401,
    "message": "Invalid API key. Please see https://openweathermap.org/faq#error401 for more info.",
}
