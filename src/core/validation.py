"""
Add-event form validation.
"""

from datetime import date, datetime, time
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from core.dates import end_of_day
from models.colors import PaletteColor, parse_color


class EventFormError(ValueError):
    """Form submission rejected; errors maps field name -> message."""

    def __init__(self, errors: dict[str, str]):
        self.errors = errors
        super().__init__("; ".join(f"{field}: {msg}" for field, msg in errors.items()))


class EventForm(BaseModel):
    """Values submitted from the add-event form."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    title: str
    color: str = PaletteColor.DEFAULT.value
    start_date: date
    end_date: date
    start_time: time | None = None
    end_time: time | None = None
    organizer: str | None = None
    description: str | None = None

    @field_validator("title")
    @classmethod
    def title_required(cls, value: str) -> str:
        if not value:
            raise PydanticCustomError("title_required", "Title is required")
        return value

    @field_validator("color")
    @classmethod
    def known_color(cls, value: str) -> str:
        try:
            parse_color(value)
        except ValueError:
            raise PydanticCustomError(
                "invalid_color",
                "Color must be one of {palette} or a hex value",
                {"palette": ", ".join(c.value for c in PaletteColor)},
            )
        return value

    @field_validator("end_date")
    @classmethod
    def end_not_before_start(cls, value: date, info: ValidationInfo) -> date:
        start = info.data.get("start_date")
        if start is not None and value < start:
            raise PydanticCustomError("end_before_start", "End date must be after start date")
        return value

    @field_validator("end_time")
    @classmethod
    def end_time_not_before_start(cls, value: time | None, info: ValidationInfo) -> time | None:
        start_date = info.data.get("start_date")
        end_date = info.data.get("end_date")
        start_time = info.data.get("start_time")
        if (
            value is not None
            and start_time is not None
            and start_date is not None
            and start_date == end_date
            and value < start_time
        ):
            raise PydanticCustomError("end_before_start", "End time must be after start time")
        return value

    @field_validator("organizer", "description")
    @classmethod
    def blank_as_none(cls, value: str | None) -> str | None:
        return value or None

    @property
    def start(self) -> datetime:
        return datetime.combine(self.start_date, self.start_time or time.min)

    @property
    def end(self) -> datetime:
        # No end time means the event runs through the end day.
        if self.end_time is None:
            return end_of_day(self.end_date)
        return datetime.combine(self.end_date, self.end_time)


def field_errors(exc: ValidationError) -> dict[str, str]:
    """Collapse pydantic errors to the first message per field."""
    errors: dict[str, str] = {}
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "__root__"
        errors.setdefault(field, error["msg"])
    return errors


def validate_event_form(data: dict[str, Any]) -> EventForm:
    """
    Validate raw form input.

    Raises:
        EventFormError: with field-scoped messages if any check fails
    """
    try:
        return EventForm.model_validate(data)
    except ValidationError as e:
        raise EventFormError(field_errors(e)) from e
