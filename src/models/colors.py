"""
Event colors: a closed palette plus validated custom hex values.
"""

import re
from dataclasses import dataclass
from enum import Enum

from core.config import DARK_TEXT, LIGHT_TEXT, PALETTE_COLORS

HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


class PaletteColor(str, Enum):
    """Named colors offered by the event form."""

    DEFAULT = "default"
    BLUE = "blue"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    PURPLE = "purple"

    @property
    def background(self) -> str:
        return PALETTE_COLORS[self.value][0]

    @property
    def text(self) -> str:
        return PALETTE_COLORS[self.value][1]


@dataclass(frozen=True)
class CustomColor:
    """A user-picked color, stored as lower-case '#rrggbb'."""

    hex: str

    def __post_init__(self):
        match = HEX_PATTERN.match(self.hex)
        if not match:
            raise ValueError(f"Invalid hex color '{self.hex}'")
        digits = match.group(1).lower()
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        object.__setattr__(self, "hex", f"#{digits}")

    @property
    def background(self) -> str:
        return self.hex

    @property
    def text(self) -> str:
        # Relative luminance (ITU-R BT.709) decides contrast.
        r, g, b = (int(self.hex[i : i + 2], 16) / 255 for i in (1, 3, 5))
        luminance = 0.2126 * r + 0.7152 * g + 0.0722 * b
        return DARK_TEXT if luminance > 0.5 else LIGHT_TEXT


EventColor = PaletteColor | CustomColor


def parse_color(value: str) -> EventColor:
    """
    Parse a form color value.

    Accepts a palette name (case-insensitive) or a hex value with or
    without the leading '#'.

    Raises:
        ValueError: if the value is neither
    """
    cleaned = value.strip()
    try:
        return PaletteColor(cleaned.lower())
    except ValueError:
        pass
    return CustomColor(cleaned)


def color_kind(color: EventColor) -> str:
    return "palette" if isinstance(color, PaletteColor) else "custom"


def color_value(color: EventColor) -> str:
    """Palette name or hex string."""
    if isinstance(color, PaletteColor):
        return color.value
    return color.hex
