"""
Calendar date arithmetic.
"""

from datetime import date, datetime, time

from dateutil.relativedelta import relativedelta


def start_of_day(value: datetime | date) -> datetime:
    """First instant of the calendar day containing value."""
    if isinstance(value, datetime):
        return datetime.combine(value.date(), datetime.min.time(), tzinfo=value.tzinfo)
    return datetime.combine(value, datetime.min.time())


def end_of_day(value: datetime | date) -> datetime:
    """Last representable instant of the calendar day containing value."""
    if isinstance(value, datetime):
        return datetime.combine(value.date(), time.max, tzinfo=value.tzinfo)
    return datetime.combine(value, time.max)


def add_months(value: date, months: int) -> date:
    """
    Shift a date by whole calendar months.

    The day is clamped to the length of the target month, so Jan 31 + 1
    lands on the last day of February rather than spilling into March.
    """
    return value + relativedelta(months=months)


def first_of_month(value: date) -> date:
    return value.replace(day=1)


def last_of_month(value: date) -> date:
    return first_of_month(value) + relativedelta(months=1, days=-1)


def format_month_title(value: date) -> str:
    """Header title, e.g. 'June 2024'."""
    return value.strftime("%B %Y")
