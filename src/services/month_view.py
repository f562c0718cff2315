"""
Month view layout: grid cells with their event segments.
"""

from dataclasses import dataclass, field
from datetime import date

from core.config import MAX_VISIBLE_EVENTS, WEEK_STARTS_ON
from core.dates import format_month_title
from models.colors import EventColor
from models.events import DayCell, Event
from services.assignment import assign_day
from services.continuation import SegmentShape, classify
from services.controller import CalendarController
from services.grid import build_month_grid, group_weeks, weekday_labels


@dataclass(frozen=True)
class EventSegment:
    """The part of one event's bar drawn inside one cell."""

    event_id: str
    title: str
    label: str  # empty when hidden, so every bar keeps the same height
    label_visible: bool
    shape: SegmentShape
    is_start: bool
    is_end: bool
    color: EventColor


@dataclass(frozen=True)
class CellLayout:
    cell: DayCell
    is_today: bool
    segments: list[EventSegment] = field(default_factory=list)
    total_events: int = 0
    overflow_count: int = 0

    @property
    def date(self) -> date:
        return self.cell.date


@dataclass(frozen=True)
class MonthLayout:
    title: str
    reference_date: date
    weekday_labels: list[str]
    weeks: list[list[CellLayout]]

    @property
    def cells(self) -> list[CellLayout]:
        return [cell for week in self.weeks for cell in week]


def build_segment(event: Event, day: date, week_starts_on: int) -> EventSegment:
    continuation = classify(event, day, week_starts_on)
    return EventSegment(
        event_id=event.id,
        title=event.title,
        label=event.title if continuation.label_visible else "",
        label_visible=continuation.label_visible,
        shape=continuation.shape,
        is_start=continuation.is_start,
        is_end=continuation.is_end,
        color=event.color,
    )


class MonthView:
    """Renders the controller's current month into a MonthLayout."""

    def __init__(
        self,
        controller: CalendarController,
        week_starts_on: int = WEEK_STARTS_ON,
        max_visible: int = MAX_VISIBLE_EVENTS,
    ):
        self.controller = controller
        self.week_starts_on = week_starts_on
        self.max_visible = max_visible

    def render(self, today: date | None = None) -> MonthLayout:
        today = today or date.today()
        reference = self.controller.get_current_month()
        events = self.controller.list_events()

        cells = []
        for cell in build_month_grid(reference, self.week_starts_on):
            assignment = assign_day(cell.date, events, self.max_visible)
            cells.append(
                CellLayout(
                    cell=cell,
                    is_today=cell.date == today,
                    segments=[
                        build_segment(event, cell.date, self.week_starts_on)
                        for event in assignment.visible
                    ],
                    total_events=assignment.total,
                    overflow_count=assignment.overflow_count,
                )
            )

        return MonthLayout(
            title=format_month_title(reference),
            reference_date=reference,
            weekday_labels=weekday_labels(self.week_starts_on),
            weeks=group_weeks(cells),
        )
