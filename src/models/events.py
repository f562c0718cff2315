"""
Data models for events and day cells.

Events are immutable once created; day cells are rebuilt on every render.
"""

from dataclasses import dataclass
from datetime import date, datetime

from models.colors import EventColor, PaletteColor


@dataclass(frozen=True)
class Event:
    """A calendar event spanning one or more whole days."""

    id: str
    title: str
    start: datetime
    end: datetime
    color: EventColor = PaletteColor.DEFAULT
    organizer: str | None = None
    description: str | None = None

    @property
    def start_date(self) -> date:
        return self.start.date()

    @property
    def end_date(self) -> date:
        return self.end.date()


@dataclass(frozen=True)
class DayCell:
    """One date slot of the month grid."""

    date: date
    is_in_current_month: bool
