"""
Continuation bars for multi-day events.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum

from core.config import WEEK_STARTS_ON
from core.dates import end_of_day, start_of_day
from models.events import Event
from services.grid import is_week_start


class SegmentShape(str, Enum):
    """Corner rounding of an event bar inside one cell."""

    ROUNDED = "rounded"  # single-day bar
    ROUNDED_LEFT = "rounded-left"  # continues into the next cell
    ROUNDED_RIGHT = "rounded-right"  # continued from the previous cell
    SQUARE = "square"


@dataclass(frozen=True)
class Continuation:
    is_start: bool
    is_end: bool
    shape: SegmentShape
    label_visible: bool


def segment_shape(is_start: bool, is_end: bool) -> SegmentShape:
    if is_start and is_end:
        return SegmentShape.ROUNDED
    if is_start:
        return SegmentShape.ROUNDED_LEFT
    if is_end:
        return SegmentShape.ROUNDED_RIGHT
    return SegmentShape.SQUARE


def classify(event: Event, day: date, week_starts_on: int = WEEK_STARTS_ON) -> Continuation:
    """
    Classify how an event is drawn on a day it occupies.

    The title is shown on the start day and repeated on the first cell
    of every week row the bar wraps into.
    """
    is_start = day == start_of_day(event.start).date()
    is_end = day == end_of_day(event.end).date()
    return Continuation(
        is_start=is_start,
        is_end=is_end,
        shape=segment_shape(is_start, is_end),
        label_visible=is_start or is_week_start(day, week_starts_on),
    )
