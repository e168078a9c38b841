"""Weather widget — FastAPI service."""

from __future__ import annotations

from pathlib import Path

import structlog
from fastapi import FastAPI, WebSocket
from fastapi.responses import HTMLResponse

from modules.weather.client import WeatherClient
from modules.weather.models import LookupRequest
from modules.weather.widget import BufferSink, WeatherLookup, WebSocketSink
from shared.config import get_settings
from shared.logging_config import configure_logging
from shared.schemas.common import HealthResponse

configure_logging(get_settings().log_level)

logger = structlog.get_logger()
app = FastAPI(title="Weather Widget", version="1.0.0")

STATIC_DIR = Path(__file__).parent / "static"

client: WeatherClient | None = None


def _get_client() -> WeatherClient:
    global client
    if client is None:
        client = WeatherClient()
    return client


def _frame_text(message: dict) -> str:
    """City name carried by a text or binary frame.

    Binary frames are read as UTF-8; undecodable ones become an empty
    submission, which renders the input error.
    """
    if message.get("text") is not None:
        return message["text"]
    try:
        return (message.get("bytes") or b"").decode("utf-8")
    except UnicodeDecodeError:
        logger.warning("weather_ws_undecodable_frame", size=len(message["bytes"]))
        return ""


@app.on_event("startup")
async def startup():
    settings = get_settings()
    _get_client()
    if not settings.has_api_key:
        logger.warning("weather_api_key_missing")
    logger.info("weather_widget_ready")


@app.get("/", response_class=HTMLResponse)
async def index():
    """Serve the widget page."""
    return HTMLResponse(content=(STATIC_DIR / "index.html").read_text(encoding="utf-8"))


@app.websocket("/ws/weather")
async def ws_weather(websocket: WebSocket) -> None:
    """One widget per page: each frame, text or UTF-8 bytes, is a submitted city name."""
    await websocket.accept()
    settings = get_settings()
    widget = WeatherLookup(_get_client(), WebSocketSink(websocket), settings.openweather_icon_url)
    logger.info("weather_ws_connected")

    if settings.default_city:
        widget.submit(settings.default_city)

    try:
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                break
            widget.submit(_frame_text(message))
    finally:
        await widget.close()
        logger.info("weather_ws_disconnected", submissions=widget.generation)


@app.post("/lookup", response_class=HTMLResponse)
async def lookup(request: LookupRequest):
    """Render one lookup as an HTML fragment. Failures are rendered, not raised."""
    sink = BufferSink()
    widget = WeatherLookup(_get_client(), sink, get_settings().openweather_icon_url)
    await widget.submit(request.city)
    return HTMLResponse(content=sink.html)


@app.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(status="ok")
