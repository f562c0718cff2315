"""Event listing and creation endpoints."""

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Request, status

from api.dependencies import get_controller
from api.models.responses import ErrorCodes, EventResponse
from api.request_log import current_request_log
from core.validation import EventFormError
from services.controller import CalendarController

router = APIRouter(prefix="/v1")


@router.get("/events", response_model=list[EventResponse])
async def list_events(controller: CalendarController = Depends(get_controller)):
    """All events in the order they were added."""
    return [EventResponse.from_event(e) for e in controller.list_events()]


@router.post("/events", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
async def create_event(
    request: Request,
    data: dict[str, Any] = Body(...),
    controller: CalendarController = Depends(get_controller),
):
    """
    Submit the add-event form.

    Returns 422 with per-field messages if validation fails.
    """
    try:
        event = controller.submit_event(data)
    except EventFormError as e:
        request_log = current_request_log(request)
        if request_log is not None:
            request_log.error_code = ErrorCodes.VALIDATION_ERROR
            request_log.error_message = "Event form validation failed"
            for field, message in e.errors.items():
                request_log.details.append(("validation_error", f"{field}: {message}"))

        raise HTTPException(
            status_code=422,
            detail={
                "error": "Event form validation failed",
                "code": ErrorCodes.VALIDATION_ERROR,
                "details": [f"{field}: {message}" for field, message in e.errors.items()],
                "fields": e.errors,
            },
        )

    return EventResponse.from_event(event)
