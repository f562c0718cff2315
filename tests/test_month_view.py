import calendar
from datetime import date

import pytest

from services.continuation import SegmentShape
from services.month_view import MonthView


def cell_for(layout, day):
    return next(c for c in layout.cells if c.date == day)


def test_layout_shape(controller):
    layout = MonthView(controller, week_starts_on=calendar.SUNDAY).render(today=date(2024, 6, 12))

    assert layout.title == "June 2024"
    assert layout.reference_date == date(2024, 6, 15)
    assert layout.weekday_labels[0] == "Sun"
    assert len(layout.weeks) == 6
    assert all(len(week) == 7 for week in layout.weeks)
    assert [c.date for c in layout.cells if c.is_today] == [date(2024, 6, 12)]


def test_view_requires_controller():
    with pytest.raises(TypeError):
        MonthView()


def test_launch_segments(controller, launch_event):
    controller.add_event(launch_event)
    layout = MonthView(controller, week_starts_on=calendar.SUNDAY).render(today=date(2024, 6, 1))

    first, middle, last = (cell_for(layout, date(2024, 6, d)).segments[0] for d in (5, 6, 7))
    assert (first.shape, first.label, first.label_visible) == (
        SegmentShape.ROUNDED_LEFT,
        "Launch",
        True,
    )
    assert (middle.shape, middle.label, middle.label_visible) == (SegmentShape.SQUARE, "", False)
    assert (last.shape, last.is_end) == (SegmentShape.ROUNDED_RIGHT, True)
    assert middle.title == "Launch"
    assert cell_for(layout, date(2024, 6, 8)).segments == []


def test_padding_cells_receive_events(controller, make_event):
    controller.add_event(make_event("Wrap", "2024-05-27", "2024-06-02"))
    layout = MonthView(controller, week_starts_on=calendar.SUNDAY).render(today=date(2024, 6, 1))

    padding = cell_for(layout, date(2024, 5, 27))
    assert not padding.cell.is_in_current_month
    assert padding.segments[0].is_start
    # Jun 2 starts a new row, so the label is repeated there
    assert cell_for(layout, date(2024, 6, 2)).segments[0].label == "Wrap"


def test_overflow_in_cells(controller, make_event):
    for title in ("D", "C", "B", "A"):
        controller.add_event(make_event(title, "2024-06-10 09:00"))
    layout = MonthView(controller).render(today=date(2024, 6, 1))

    cell = cell_for(layout, date(2024, 6, 10))
    assert [s.title for s in cell.segments] == ["A", "B"]
    assert cell.total_events == 4
    assert cell.overflow_count == 2
    assert cell_for(layout, date(2024, 6, 11)).overflow_count == 0


def test_render_is_repeatable(controller, make_event):
    controller.add_event(make_event("B-event", "2024-06-05 09:00"))
    controller.add_event(make_event("A-event", "2024-06-05 09:00"))
    view = MonthView(controller)

    first = view.render(today=date(2024, 6, 1))
    second = view.render(today=date(2024, 6, 1))
    assert first == second
    assert [s.title for s in cell_for(first, date(2024, 6, 5)).segments] == ["A-event", "B-event"]


def test_render_follows_navigation(controller, launch_event):
    controller.add_event(launch_event)
    view = MonthView(controller)

    controller.advance_month()
    layout = view.render(today=date(2024, 6, 1))
    assert layout.title == "July 2024"
    assert all(c.segments == [] for c in layout.cells)


def test_monday_week_start(controller):
    layout = MonthView(controller, week_starts_on=calendar.MONDAY).render(today=date(2024, 6, 1))
    assert layout.weekday_labels[0] == "Mon"
    assert layout.weeks[0][0].date == date(2024, 5, 27)
