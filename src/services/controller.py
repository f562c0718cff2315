"""
Calendar state owner: reference month, navigation and event creation.
"""

import logging
import uuid
from datetime import date, datetime, timedelta
from typing import Any

from core.config import DEMO_EVENT_DAYS, DEMO_EVENT_TITLE
from core.dates import add_months, format_month_title
from core.validation import EventFormError, validate_event_form
from models.colors import PaletteColor, parse_color
from models.events import Event
from services.store import EventStore

logger = logging.getLogger(__name__)


class CalendarController:
    """
    Holds the current reference date and the event store.

    This is the only writer of the store. Views receive it as a
    constructor argument and read state through it.
    """

    def __init__(self, store: EventStore | None = None, current_date: date | None = None):
        self.store = store if store is not None else EventStore()
        self._current_date = current_date or date.today()

    # -------------------------------------------------------------------------
    # State access
    # -------------------------------------------------------------------------

    def get_current_month(self) -> date:
        return self._current_date

    def list_events(self) -> list[Event]:
        return self.store.all()

    def add_event(self, event: Event) -> None:
        self.store.append(event)

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def set_current_date(self, value: date) -> None:
        self._current_date = value
        logger.debug("Reference date set to %s", value)

    def go_to_today(self) -> None:
        self.set_current_date(date.today())

    def advance_month(self) -> None:
        self.set_current_date(add_months(self._current_date, 1))

    def retreat_month(self) -> None:
        self.set_current_date(add_months(self._current_date, -1))

    @property
    def title(self) -> str:
        return format_month_title(self._current_date)

    # -------------------------------------------------------------------------
    # Event form
    # -------------------------------------------------------------------------

    def form_defaults(self, day: date) -> dict[str, Any]:
        """Initial form values when a day cell is clicked."""
        return {
            "title": "",
            "color": PaletteColor.DEFAULT.value,
            "start_date": day,
            "end_date": day,
        }

    def submit_event(self, data: dict[str, Any]) -> Event:
        """
        Validate form input and append the resulting event.

        Raises:
            EventFormError: if validation fails; the store is left untouched
        """
        try:
            form = validate_event_form(data)
        except EventFormError as e:
            logger.info("Rejected event submission: %s", e)
            raise

        event = Event(
            id=str(uuid.uuid4()),
            title=form.title,
            start=form.start,
            end=form.end,
            color=parse_color(form.color),
            organizer=form.organizer,
            description=form.description,
        )
        self.add_event(event)
        logger.info(
            "Added event %s '%s' (%s - %s)", event.id, event.title, event.start_date, event.end_date
        )
        return event


def seed_demo_event(controller: CalendarController, today: date | None = None) -> Event:
    """Add the sample multi-day event shown on a fresh calendar."""
    today = today or date.today()
    start = datetime.combine(today, datetime.min.time())
    event = Event(
        id=str(uuid.uuid4()),
        title=DEMO_EVENT_TITLE,
        start=start,
        end=start + timedelta(days=DEMO_EVENT_DAYS),
        color=PaletteColor.BLUE,
    )
    controller.add_event(event)
    return event
