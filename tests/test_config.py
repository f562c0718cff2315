import calendar
import logging

import pytest

from core.config import parse_max_visible, parse_week_start


def test_week_start_names():
    assert parse_week_start("sunday") == calendar.SUNDAY
    assert parse_week_start(" Monday ") == calendar.MONDAY


def test_unknown_week_start_warns_and_uses_sunday(caplog):
    with caplog.at_level(logging.WARNING, logger="core.config"):
        assert parse_week_start("sundy") == calendar.SUNDAY
    assert "sundy" in caplog.text


def test_max_visible_parsing():
    assert parse_max_visible("2") == 2
    assert parse_max_visible("0") == 0


@pytest.mark.parametrize("value", ["-1", "two", ""])
def test_invalid_max_visible_rejected(value):
    with pytest.raises(ValueError):
        parse_max_visible(value)
