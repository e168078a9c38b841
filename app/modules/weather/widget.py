"""WeatherLookup: turns a submitted city name into a rendered reading or error.

The component owns one output region, handed to it as an ``OutputSink``.
The host surface calls :meth:`WeatherLookup.submit` for every form
submission; the returned task resolves to the :class:`RenderResult` that
was (or, for a superseded submission, would have been) rendered.

Submissions are numbered. Only the newest one may write to the sink, so a
slow response for an old query can never replace the answer to a newer one.
"""

from __future__ import annotations

import asyncio
from enum import Enum
from typing import Protocol

import structlog

from modules.weather.client import WeatherClient
from modules.weather.errors import HttpError, InputError, TransportError, WeatherLookupError
from modules.weather.models import RenderResult, WeatherReading
from modules.weather.render import render_error, render_loading, render_reading

logger = structlog.get_logger()

INPUT_ERROR_MESSAGE = "Please enter a city name."
FAILURE_PREFIX = "Failed to fetch weather data: "


class LookupState(str, Enum):
    IDLE = "idle"
    FETCHING = "fetching"
    SUCCESS = "success"
    ERROR = "error"


class OutputSink(Protocol):
    async def render(self, html: str) -> None: ...


class BufferSink:
    """Sink that keeps every fragment it was given."""

    def __init__(self):
        self.fragments: list[str] = []

    async def render(self, html: str) -> None:
        self.fragments.append(html)

    @property
    def html(self) -> str:
        """The fragment currently on display."""
        return self.fragments[-1] if self.fragments else ""


class WebSocketSink:
    """Sink that pushes each fragment to a browser as a text frame."""

    def __init__(self, websocket):
        self.websocket = websocket

    async def render(self, html: str) -> None:
        await self.websocket.send_text(html)


def _display_message(error: WeatherLookupError) -> str:
    if isinstance(error, (HttpError, TransportError)):
        return f"{FAILURE_PREFIX}{error.message}"
    return error.message


class WeatherLookup:
    """Single-region weather widget."""

    def __init__(self, client: WeatherClient, sink: OutputSink, icon_template: str | None = None):
        self.client = client
        self.sink = sink
        self.icon_template = icon_template
        self.state = LookupState.IDLE
        self._generation = 0
        self._tasks: set[asyncio.Task] = set()

    @property
    def generation(self) -> int:
        """Number of the newest submission."""
        return self._generation

    def submit(self, raw_input: str) -> asyncio.Task:
        """Start a lookup for ``raw_input`` and return its task.

        Must be called from a running event loop. Earlier submissions keep
        running but lose the right to render.
        """
        self._generation += 1
        task = asyncio.create_task(self._run(raw_input, self._generation))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def lookup(self, raw_input: str, generation: int = 0) -> RenderResult:
        """Resolve ``raw_input`` to a render instruction without touching the sink."""
        city = raw_input.strip()
        try:
            if not city:
                raise InputError(INPUT_ERROR_MESSAGE)
            data = await self.client.get_current_weather(city)
            reading = WeatherReading.from_provider(data)
        except WeatherLookupError as e:
            message = _display_message(e)
            logger.warning(
                "weather_lookup_failed",
                city=city,
                error_type=type(e).__name__,
                error=e.message,
            )
            return RenderResult(
                status="error",
                html=render_error(message),
                error=message,
                generation=generation,
            )

        return RenderResult(
            status="success",
            html=render_reading(reading, self.icon_template),
            reading=reading,
            generation=generation,
        )

    async def close(self) -> None:
        """Cancel outstanding submissions, e.g. once the sink has gone away."""
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        self.state = LookupState.IDLE

    async def _run(self, raw_input: str, generation: int) -> RenderResult:
        if raw_input.strip() and generation == self._generation:
            self.state = LookupState.FETCHING
            await self.sink.render(render_loading())

        result = await self.lookup(raw_input, generation)

        if generation != self._generation:
            logger.info("stale_lookup_dropped", generation=generation, latest=self._generation)
            return result.model_copy(update={"stale": True})

        self.state = LookupState.SUCCESS if result.status == "success" else LookupState.ERROR
        await self.sink.render(result.html)
        return result
