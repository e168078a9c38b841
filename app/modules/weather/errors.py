"""Weather lookup error taxonomy.

Every failure of a lookup ends up as one of these, and every one of them is
rendered to the user as its ``message``.
"""

from __future__ import annotations


class WeatherLookupError(Exception):
    """Base class for failures that terminate a single lookup."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InputError(WeatherLookupError):
    """The submitted location was empty after trimming."""


class ConfigError(WeatherLookupError):
    """The provider credential is missing or still the placeholder."""


class HttpError(WeatherLookupError):
    """The provider answered with a non-success status."""

    def __init__(self, status_code: int, provider_message: str | None = None):
        self.status_code = status_code
        self.provider_message = provider_message
        super().__init__(provider_message or f"HTTP error, status {status_code}")


class TransportError(WeatherLookupError):
    """The request failed below the HTTP layer, or the body was unusable."""
