"""
Month grid generation.
"""

import calendar
from datetime import date

from core.config import WEEK_STARTS_ON
from models.events import DayCell

WEEKDAY_ABBREVIATIONS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def build_month_grid(reference: date, week_starts_on: int = WEEK_STARTS_ON) -> list[DayCell]:
    """
    Build the day cells shown for the month containing reference.

    The grid starts on the week containing the 1st and ends on the week
    containing the last day of the month, so its length is always a
    multiple of 7. Padding days from adjacent months are included and
    flagged with is_in_current_month=False.
    """
    cal = calendar.Calendar(firstweekday=week_starts_on)
    return [
        DayCell(date=day, is_in_current_month=day.month == reference.month)
        for week in cal.monthdatescalendar(reference.year, reference.month)
        for day in week
    ]


def group_weeks(cells: list) -> list[list]:
    """Split a flat grid into rows of 7."""
    return [cells[i : i + 7] for i in range(0, len(cells), 7)]


def weekday_labels(week_starts_on: int = WEEK_STARTS_ON) -> list[str]:
    """Column headers, e.g. ['Sun', 'Mon', ...] for a Sunday start."""
    return [WEEKDAY_ABBREVIATIONS[(week_starts_on + i) % 7] for i in range(7)]


def is_week_start(day: date, week_starts_on: int = WEEK_STARTS_ON) -> bool:
    return day.weekday() == week_starts_on
