"""
Configuration constants and environment setup.
"""

import calendar
import logging
import os

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

# =============================================================================
# CALENDAR CONFIGURATION
# =============================================================================

WEEKDAY_NAMES = {
    "monday": calendar.MONDAY,
    "tuesday": calendar.TUESDAY,
    "wednesday": calendar.WEDNESDAY,
    "thursday": calendar.THURSDAY,
    "friday": calendar.FRIDAY,
    "saturday": calendar.SATURDAY,
    "sunday": calendar.SUNDAY,
}


def parse_week_start(value: str) -> int:
    """Weekday number for a day name; unknown names fall back to Sunday."""
    name = value.strip().lower()
    if name not in WEEKDAY_NAMES:
        logger.warning(
            "Unknown CALENDAR_WEEK_START '%s', expected one of %s; using sunday",
            value,
            ", ".join(WEEKDAY_NAMES),
        )
        return calendar.SUNDAY
    return WEEKDAY_NAMES[name]


def parse_max_visible(value: str) -> int:
    """
    Parse the per-cell visible event cap.

    Raises:
        ValueError: if the value is not a non-negative integer
    """
    cap = int(value)
    if cap < 0:
        raise ValueError(f"CALENDAR_MAX_VISIBLE_EVENTS must be >= 0, got {cap}")
    return cap


WEEK_STARTS_ON = parse_week_start(os.environ.get("CALENDAR_WEEK_START", "sunday"))
MAX_VISIBLE_EVENTS = parse_max_visible(os.environ.get("CALENDAR_MAX_VISIBLE_EVENTS", "2"))
SEED_DEMO_EVENT = os.environ.get("CALENDAR_SEED_DEMO", "false").lower() == "true"

DEMO_EVENT_TITLE = "Project Launch 🚀"
DEMO_EVENT_DAYS = 10

# =============================================================================
# COLORS
# =============================================================================

# Palette name -> (background, text)
PALETTE_COLORS = {
    "default": ("#f3f4f6", "#374151"),
    "blue": ("#dbeafe", "#1d4ed8"),
    "red": ("#fee2e2", "#b91c1c"),
    "green": ("#dcfce7", "#15803d"),
    "yellow": ("#fef9c3", "#a16207"),
    "purple": ("#f3e8ff", "#7e22ce"),
}
DARK_TEXT = "#000000"
LIGHT_TEXT = "#ffffff"

# =============================================================================
# LOGGING
# =============================================================================

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# =============================================================================
# API CONFIGURATION
# =============================================================================

API_HOST = os.environ.get("API_HOST", "0.0.0.0")
API_PORT = int(os.environ.get("API_PORT", "8000"))
API_DEBUG = os.environ.get("API_DEBUG", "false").lower() == "true"
API_VERSION = "1.0.0"
