"""Month view and navigation endpoints."""

from datetime import date

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from api.dependencies import get_controller, get_month_view
from api.models.responses import FormDefaultsResponse, MonthResponse
from services.controller import CalendarController
from services.month_view import MonthView

router = APIRouter(prefix="/v1/calendar")


class SetDateRequest(BaseModel):
    date: date


@router.get("/month", response_model=MonthResponse)
async def get_month(view: MonthView = Depends(get_month_view)):
    """Render the current month."""
    return MonthResponse.from_layout(view.render())


@router.put("/month", response_model=MonthResponse)
async def set_month(
    body: SetDateRequest,
    controller: CalendarController = Depends(get_controller),
    view: MonthView = Depends(get_month_view),
):
    """Jump to the month containing the given date."""
    controller.set_current_date(body.date)
    return MonthResponse.from_layout(view.render())


@router.post("/month/next", response_model=MonthResponse)
async def next_month(
    controller: CalendarController = Depends(get_controller),
    view: MonthView = Depends(get_month_view),
):
    controller.advance_month()
    return MonthResponse.from_layout(view.render())


@router.post("/month/previous", response_model=MonthResponse)
async def previous_month(
    controller: CalendarController = Depends(get_controller),
    view: MonthView = Depends(get_month_view),
):
    controller.retreat_month()
    return MonthResponse.from_layout(view.render())


@router.post("/month/today", response_model=MonthResponse)
async def this_month(
    controller: CalendarController = Depends(get_controller),
    view: MonthView = Depends(get_month_view),
):
    controller.go_to_today()
    return MonthResponse.from_layout(view.render())


@router.get("/days/{day}/form", response_model=FormDefaultsResponse)
async def form_defaults(day: date, controller: CalendarController = Depends(get_controller)):
    """Initial add-event form values for a clicked day cell."""
    return FormDefaultsResponse(**controller.form_defaults(day))
