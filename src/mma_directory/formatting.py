"""Human-readable date and time formatting for event and fighter pages."""

from datetime import date, datetime
from typing import Optional
from zoneinfo import ZoneInfo

EASTERN = ZoneInfo("America/New_York")


def _localize(value: date, tz: Optional[str]) -> date:
    if tz and isinstance(value, datetime) and value.tzinfo is not None:
        return value.astimezone(ZoneInfo(tz))
    return value


def _ordinal(day: int) -> str:
    if 11 <= day % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def _hour12(value: datetime) -> str:
    """Hour on a 12-hour clock without padding, e.g. '4'."""
    return str(value.hour % 12 or 12)


def format_event_start_et(value: datetime) -> str:
    """
    Event start in Eastern time.

    Example: 'Saturday 03.29.2025 at 04:00 PM ET'
    """
    local = value.astimezone(EASTERN) if value.tzinfo is not None else value
    return local.strftime("%A %m.%d.%Y at %I:%M %p") + " ET"


def format_long_date(value: date) -> str:
    """Example: 'March 29, 2025'."""
    return f"{value.strftime('%B')} {value.day}, {value.year}"


def format_long_date_with_weekday(value: date) -> str:
    """Example: 'Saturday, March 29, 2025'."""
    return f"{value.strftime('%A')}, {format_long_date(value)}"


def format_ordinal_date(value: date) -> str:
    """Example: 'March 29th, 2025'."""
    return f"{value.strftime('%B')} {_ordinal(value.day)}, {value.year}"


def format_month_year(value: date, tz: Optional[str] = None) -> str:
    """Example: 'March 2025'."""
    return _localize(value, tz).strftime("%B %Y")


def format_short_day(value: date, tz: Optional[str] = None) -> str:
    """Example: 'Mar 29'."""
    local = _localize(value, tz)
    return f"{local.strftime('%b')} {local.day}"


def format_event_listing(value: datetime, tz: Optional[str] = None) -> str:
    """
    Full date and time for event lists.

    Example: 'Saturday, March 29, 2025 • 4:00 PM'
    """
    local = _localize(value, tz)
    return (
        f"{format_long_date_with_weekday(local)} • "
        f"{_hour12(local)}:{local.strftime('%M')} {local.strftime('%p')}"
    )


def format_event_date(value: Optional[datetime], tz: Optional[str] = None) -> str:
    """Ordinal date of an event, 'TBD' when unknown."""
    if value is None:
        return "TBD"
    return format_ordinal_date(_localize(value, tz))
