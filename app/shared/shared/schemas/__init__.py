"""Pydantic schemas shared by the widget services."""

from shared.schemas.common import HealthResponse

__all__ = [
    "HealthResponse",
]
