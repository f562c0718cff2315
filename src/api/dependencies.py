"""FastAPI dependencies for shared calendar state."""

from fastapi import Depends, Request

from services.controller import CalendarController
from services.month_view import MonthView


def get_controller(request: Request) -> CalendarController:
    """The application's single calendar state owner."""
    return request.app.state.controller


def get_month_view(controller: CalendarController = Depends(get_controller)) -> MonthView:
    return MonthView(controller)
