from datetime import date

import pytest

from scripts.show_month import main, render_segment, render_text
from services.continuation import SegmentShape
from services.controller import CalendarController
from services.month_view import EventSegment, MonthView
from models.colors import PaletteColor


def segment(shape, label="Launch"):
    return EventSegment(
        event_id="1",
        title="Launch",
        label=label,
        label_visible=bool(label),
        shape=shape,
        is_start=shape in (SegmentShape.ROUNDED, SegmentShape.ROUNDED_LEFT),
        is_end=shape in (SegmentShape.ROUNDED, SegmentShape.ROUNDED_RIGHT),
        color=PaletteColor.DEFAULT,
    )


def test_render_segment_shapes():
    assert render_segment(segment(SegmentShape.ROUNDED), 10) == "(Launch  )"
    assert render_segment(segment(SegmentShape.ROUNDED_LEFT), 10) == "(Launch==="
    assert render_segment(segment(SegmentShape.SQUARE, ""), 10) == "=========="
    assert render_segment(segment(SegmentShape.ROUNDED_RIGHT, ""), 10) == "=========)"


def test_render_text(launch_event):
    controller = CalendarController(current_date=date(2024, 6, 1))
    controller.add_event(launch_event)
    text = render_text(MonthView(controller).render(today=date(2024, 6, 6)), max_visible=2)

    assert "June 2024" in text
    assert "(Launch" in text
    assert "[6]" in text


def test_main_prints_month(capsys):
    code = main(
        [
            "--date",
            "2024-06-01",
            "--week-start",
            "monday",
            "--event",
            "Launch,2024-06-05,2024-06-07,blue",
            "--event",
            "A,2024-06-05,2024-06-05",
            "--event",
            "B,2024-06-05,2024-06-05",
        ]
    )
    out = capsys.readouterr().out

    assert code == 0
    assert "June 2024" in out
    assert out.splitlines()[2].startswith("Mon")
    assert "+1 more" in out


def test_main_rejects_invalid_event(capsys):
    code = main(["--date", "2024-06-01", "--event", "Backwards,2024-06-07,2024-06-05"])
    err = capsys.readouterr().err

    assert code == 1
    assert "end_date: End date must be after start date" in err


def test_main_rejects_negative_max_visible(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--date", "2024-06-01", "--max-visible", "-1", "--event", "A,2024-06-05,2024-06-05"])
    captured = capsys.readouterr()

    assert exc_info.value.code == 2
    assert "--max-visible" in captured.err
    assert "more" not in captured.out
