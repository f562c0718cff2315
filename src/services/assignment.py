"""
Assignment of events to day cells.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from core.config import MAX_VISIBLE_EVENTS
from core.dates import end_of_day, start_of_day
from models.events import Event


@dataclass(frozen=True)
class DayAssignment:
    """Events occupying one day, split into visible and overflow."""

    day: date
    events: list[Event]
    visible: list[Event]
    overflow_count: int

    @property
    def total(self) -> int:
        return len(self.events)

    @property
    def has_overflow(self) -> bool:
        return self.overflow_count > 0


def occupies_day(event: Event, day: date) -> bool:
    """
    Check whether an event touches a day.

    Overlap is computed on whole days: an event ending at any time on D
    occupies all of D.
    """
    return start_of_day(event.start).date() <= day <= end_of_day(event.end).date()


def display_order(event: Event) -> tuple:
    """Sort key: start instant, then title."""
    return (event.start, event.title)


def events_for_day(day: date, events: Iterable[Event]) -> list[Event]:
    """All events occupying day, in display order.

    The sort is stable, so events that tie on start and title keep the
    order they were given in.
    """
    return sorted((e for e in events if occupies_day(e, day)), key=display_order)


def assign_day(
    day: date, events: Iterable[Event], max_visible: int = MAX_VISIBLE_EVENTS
) -> DayAssignment:
    """
    Assign events to one day, keeping at most max_visible of them visible.

    Raises:
        ValueError: if max_visible is negative
    """
    if max_visible < 0:
        raise ValueError(f"max_visible must be >= 0, got {max_visible}")
    ordered = events_for_day(day, events)
    return DayAssignment(
        day=day,
        events=ordered,
        visible=ordered[:max_visible],
        overflow_count=max(0, len(ordered) - max_visible),
    )
