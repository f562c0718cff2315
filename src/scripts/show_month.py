#!/usr/bin/env python3
"""
Print a month calendar with multi-day event bars.

Events are kept in memory only, so they are passed on the command line.

Usage:
    uv run python src/scripts/show_month.py --date 2024-06-01 \
        --event "Launch,2024-06-05,2024-06-07,blue" --event "Review,2024-06-06,2024-06-06"
"""

import argparse
import sys
from datetime import date, datetime
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.config import MAX_VISIBLE_EVENTS, WEEK_STARTS_ON, WEEKDAY_NAMES, parse_max_visible
from core.validation import EventFormError
from services.continuation import SegmentShape
from services.controller import CalendarController, seed_demo_event
from services.month_view import CellLayout, EventSegment, MonthLayout, MonthView

CELL_WIDTH = 14


# =============================================================================
# TEXT RENDERING
# =============================================================================


def render_segment(segment: EventSegment, width: int = CELL_WIDTH) -> str:
    """Draw one bar segment, e.g. '(Launch======' or '=============)'."""
    left = "(" if segment.shape in (SegmentShape.ROUNDED, SegmentShape.ROUNDED_LEFT) else "="
    right = ")" if segment.shape in (SegmentShape.ROUNDED, SegmentShape.ROUNDED_RIGHT) else "="
    inner = width - 2
    body = segment.label[:inner].ljust(inner, " " if segment.shape == SegmentShape.ROUNDED else "=")
    return f"{left}{body}{right}"


def render_cell(cell: CellLayout, max_visible: int, width: int = CELL_WIDTH) -> list[str]:
    """Lines for one cell: day number, bars, then an overflow line."""
    day = str(cell.date.day)
    if not cell.cell.is_in_current_month:
        day = f"({day})"
    if cell.is_today:
        day = f"[{day}]"

    lines = [day.ljust(width)]
    for segment in cell.segments:
        lines.append(render_segment(segment, width))
    while len(lines) < max_visible + 1:
        lines.append(" " * width)
    lines.append((f"+{cell.overflow_count} more" if cell.overflow_count else "").ljust(width))
    return lines


def render_text(layout: MonthLayout, max_visible: int, width: int = CELL_WIDTH) -> str:
    out = [layout.title.center((width + 1) * 7), ""]
    out.append(" ".join(label.ljust(width) for label in layout.weekday_labels))
    for week in layout.weeks:
        columns = [render_cell(cell, max_visible, width) for cell in week]
        for row in zip(*columns):
            out.append(" ".join(row).rstrip())
        out.append("")
    return "\n".join(out)


# =============================================================================
# ARGUMENTS
# =============================================================================


def parse_event_arg(value: str) -> dict:
    """Turn 'title,start,end[,color]' into form input."""
    parts = [p.strip() for p in value.split(",")]
    if len(parts) < 3:
        raise argparse.ArgumentTypeError(
            f"Expected 'title,start,end[,color]', got '{value}'"
        )
    data = {"title": parts[0], "start_date": parts[1], "end_date": parts[2]}
    if len(parts) > 3 and parts[3]:
        data["color"] = parts[3]
    return data


def parse_max_visible_arg(value: str) -> int:
    try:
        return parse_max_visible(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid --max-visible '{value}', expected an integer >= 0")


def parse_date_arg(value: str) -> date:
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid date '{value}', expected YYYY-MM-DD")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Print a month calendar")
    parser.add_argument("--date", type=parse_date_arg, help="Any date in the month (YYYY-MM-DD)")
    parser.add_argument(
        "--week-start",
        choices=sorted(WEEKDAY_NAMES),
        help="First day of the week (default from CALENDAR_WEEK_START)",
    )
    parser.add_argument("--max-visible", type=parse_max_visible_arg, default=MAX_VISIBLE_EVENTS)
    parser.add_argument("--demo", action="store_true", help="Add the sample launch event")
    parser.add_argument(
        "--event",
        action="append",
        default=[],
        type=parse_event_arg,
        help="Event as 'title,start,end[,color]' (repeatable)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    controller = CalendarController(current_date=args.date)
    if args.demo:
        seed_demo_event(controller)

    for data in args.event:
        try:
            controller.submit_event(data)
        except EventFormError as e:
            print(f"Invalid event '{data['title']}':", file=sys.stderr)
            for field, message in e.errors.items():
                print(f"  {field}: {message}", file=sys.stderr)
            return 1

    week_starts_on = WEEKDAY_NAMES[args.week_start] if args.week_start else WEEK_STARTS_ON
    view = MonthView(controller, week_starts_on=week_starts_on, max_visible=args.max_visible)
    print(render_text(view.render(), args.max_visible))
    return 0


if __name__ == "__main__":
    sys.exit(main())
