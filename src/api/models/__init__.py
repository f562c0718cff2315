"""API Pydantic models."""

from .responses import (
    ErrorCodes,
    ErrorResponse,
    EventResponse,
    FormDefaultsResponse,
    HealthResponse,
    MonthResponse,
)

__all__ = [
    "ErrorCodes",
    "ErrorResponse",
    "EventResponse",
    "FormDefaultsResponse",
    "HealthResponse",
    "MonthResponse",
]
