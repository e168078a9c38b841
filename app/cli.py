"""Command line entry point for the weather widget."""

from __future__ import annotations

import asyncio
import sys

import click

from modules.weather.client import WeatherClient
from modules.weather.widget import BufferSink, WeatherLookup
from shared.config import get_settings
from shared.logging_config import configure_logging


def run_async(coro):
    """Run an async function in a new event loop."""
    return asyncio.run(coro)


@click.group()
def cli():
    """Weather widget CLI."""
    pass


@cli.command()
@click.argument("city")
def lookup(city):
    """Look up current weather for CITY and print the rendered fragment."""
    configure_logging(get_settings().log_level)
    result = run_async(_lookup(city))
    click.echo(result.html)
    if result.status == "error":
        sys.exit(1)


async def _lookup(city):
    settings = get_settings()
    widget = WeatherLookup(WeatherClient(settings), BufferSink(), settings.openweather_icon_url)
    return await widget.submit(city)


@cli.command()
@click.option("--host", default="127.0.0.1", help="Interface to bind")
@click.option("--port", default=8000, type=int, help="Port to listen on")
def serve(host, port):
    """Run the widget web service."""
    import uvicorn

    uvicorn.run("modules.weather.main:app", host=host, port=port)


if __name__ == "__main__":
    cli()
