"""OpenWeatherMap current-conditions API client."""

from __future__ import annotations

import httpx
import structlog

from modules.weather.errors import ConfigError, HttpError, TransportError
from shared.config import Settings, get_settings

logger = structlog.get_logger()

CONFIG_ERROR_MESSAGE = (
    "Please replace the placeholder OPENWEATHER_API_KEY with your actual "
    "OpenWeatherMap API key."
)


def _provider_message(resp: httpx.Response) -> str | None:
    """Pull the provider's ``message`` field out of an error body, if there is one."""
    try:
        body = resp.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    message = body.get("message")
    if message is None or message == "":
        return None
    return str(message)


class WeatherClient:
    """Async client for the OpenWeatherMap current weather endpoint."""

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self.api_key = self.settings.openweather_api_key.strip()
        self.base_url = self.settings.openweather_url

    def check_credential(self) -> None:
        """Raise ConfigError unless a real API key is configured."""
        if not self.settings.has_api_key:
            raise ConfigError(CONFIG_ERROR_MESSAGE)

    async def get_current_weather(self, city: str) -> dict:
        """Fetch the raw current-conditions payload for ``city``.

        Units are always metric, so temperatures come back in Celsius and
        wind speed in metres per second.

        Raises:
            ConfigError: If no usable API key is configured.
            HttpError: If the provider answers with a non-2xx status.
            TransportError: If the request fails or the body is not JSON.
        """
        self.check_credential()
        params = {"q": city, "appid": self.api_key, "units": "metric"}
        return await self._fetch(params)

    async def _fetch(self, params: dict) -> dict:
        """Make a request to the OpenWeatherMap API."""
        logger.info("weather_request", city=params["q"])
        try:
            async with httpx.AsyncClient() as client:
                resp = await client.get(self.base_url, params=params)
        except httpx.RequestError as e:
            logger.error("weather_request_error", error=str(e))
            raise TransportError(str(e) or type(e).__name__) from e

        if not resp.is_success:
            logger.error("weather_http_error", status=resp.status_code, body=resp.text[:200])
            raise HttpError(resp.status_code, _provider_message(resp))

        try:
            data = resp.json()
        except ValueError as e:
            raise TransportError(f"Malformed response from weather provider: {e}") from e
        if not isinstance(data, dict):
            raise TransportError("Malformed response from weather provider: expected a JSON object")
        return data
