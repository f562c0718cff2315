"""Health check endpoint."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from api.dependencies import get_controller
from api.models.responses import HealthResponse
from core.config import API_VERSION
from services.controller import CalendarController

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(controller: CalendarController = Depends(get_controller)):
    """Health check endpoint for monitoring."""
    return HealthResponse(
        status="healthy",
        version=API_VERSION,
        event_count=len(controller.list_events()),
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
