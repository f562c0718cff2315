"""Pydantic response models for API endpoints."""

from datetime import date, datetime

from pydantic import BaseModel

from models.colors import EventColor, color_kind, color_value
from models.events import Event
from services.month_view import CellLayout, EventSegment, MonthLayout


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    event_count: int
    timestamp: str  # ISO 8601 UTC


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    code: str
    details: list[str] = []
    fields: dict[str, str] = {}


class ErrorCodes:
    """Error code constants."""

    INVALID_REQUEST = "INVALID_REQUEST"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ColorResponse(BaseModel):
    kind: str  # "palette" or "custom"
    value: str
    background: str
    text: str

    @classmethod
    def from_color(cls, color: EventColor) -> "ColorResponse":
        return cls(
            kind=color_kind(color),
            value=color_value(color),
            background=color.background,
            text=color.text,
        )


class EventResponse(BaseModel):
    id: str
    title: str
    start: datetime
    end: datetime
    color: ColorResponse
    organizer: str | None = None
    description: str | None = None

    @classmethod
    def from_event(cls, event: Event) -> "EventResponse":
        return cls(
            id=event.id,
            title=event.title,
            start=event.start,
            end=event.end,
            color=ColorResponse.from_color(event.color),
            organizer=event.organizer,
            description=event.description,
        )


class SegmentResponse(BaseModel):
    event_id: str
    title: str
    label: str
    label_visible: bool
    shape: str
    is_start: bool
    is_end: bool
    color: ColorResponse

    @classmethod
    def from_segment(cls, segment: EventSegment) -> "SegmentResponse":
        return cls(
            event_id=segment.event_id,
            title=segment.title,
            label=segment.label,
            label_visible=segment.label_visible,
            shape=segment.shape.value,
            is_start=segment.is_start,
            is_end=segment.is_end,
            color=ColorResponse.from_color(segment.color),
        )


class CellResponse(BaseModel):
    date: date
    is_in_current_month: bool
    is_today: bool
    segments: list[SegmentResponse]
    total_events: int
    overflow_count: int

    @classmethod
    def from_cell(cls, cell: CellLayout) -> "CellResponse":
        return cls(
            date=cell.date,
            is_in_current_month=cell.cell.is_in_current_month,
            is_today=cell.is_today,
            segments=[SegmentResponse.from_segment(s) for s in cell.segments],
            total_events=cell.total_events,
            overflow_count=cell.overflow_count,
        )


class MonthResponse(BaseModel):
    title: str
    reference_date: date
    weekday_labels: list[str]
    weeks: list[list[CellResponse]]

    @classmethod
    def from_layout(cls, layout: MonthLayout) -> "MonthResponse":
        return cls(
            title=layout.title,
            reference_date=layout.reference_date,
            weekday_labels=layout.weekday_labels,
            weeks=[[CellResponse.from_cell(c) for c in week] for week in layout.weeks],
        )


class FormDefaultsResponse(BaseModel):
    title: str
    color: str
    start_date: date
    end_date: date
