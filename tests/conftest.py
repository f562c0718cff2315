"""
Pytest configuration and shared fixtures.
"""

import sys
from datetime import date, datetime
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from models.colors import PaletteColor  # noqa: E402
from models.events import Event  # noqa: E402
from services.controller import CalendarController  # noqa: E402


@pytest.fixture
def make_event():
    """Factory for events; start/end accept 'YYYY-MM-DD' or 'YYYY-MM-DD HH:MM'."""

    def _parse(value):
        if isinstance(value, datetime):
            return value
        if isinstance(value, date):
            return datetime.combine(value, datetime.min.time())
        fmt = "%Y-%m-%d %H:%M" if " " in value else "%Y-%m-%d"
        return datetime.strptime(value, fmt)

    counter = {"n": 0}

    def _make(title, start, end=None, color=PaletteColor.DEFAULT, **kwargs):
        counter["n"] += 1
        return Event(
            id=kwargs.pop("id", f"evt-{counter['n']}"),
            title=title,
            start=_parse(start),
            end=_parse(end if end is not None else start),
            color=color,
            **kwargs,
        )

    return _make


@pytest.fixture
def controller():
    """Controller parked on June 2024."""
    return CalendarController(current_date=date(2024, 6, 15))


@pytest.fixture
def launch_event(make_event):
    """Three-day sample event."""
    return make_event("Launch", "2024-06-05", "2024-06-07", color=PaletteColor.BLUE)
