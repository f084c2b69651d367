"""
Time range parsing module.

Listing times are human-readable 12-hour clock values such as ``2:00pm``
with no date attached. This module binds them to the festival date in the
festival's time zone and converts them to epoch milliseconds.
"""

from datetime import date, datetime
from typing import Optional
from zoneinfo import ZoneInfo

from ..constants import CLOCK_TIME_FORMAT, DEFAULT_EVENT_TIMEZONE, TIME_RANGE_SEPARATOR
from ..models import TimeRange


def resolve_event_date(event_date: Optional[date], timezone: str) -> date:
    """Return the configured event date, or today's date in the event time zone."""
    if event_date is not None:
        return event_date
    return datetime.now(ZoneInfo(timezone)).date()


def parse_clock_time(
    text: str,
    event_date: Optional[date] = None,
    timezone: str = DEFAULT_EVENT_TIMEZONE,
) -> int:
    """
    Parse a 12-hour clock time on the event date into epoch milliseconds.

    Args:
        text: Time such as ``2:00pm`` or ``02:00pm``
        event_date: Date to bind the time to (today when None)
        timezone: IANA time zone name the time is expressed in

    Returns:
        Epoch milliseconds

    Raises:
        ValueError: If the text is not a valid clock time with a lowercase
            ``am``/``pm`` suffix
    """
    text = text.strip()
    # strptime matches %p in any case; listings only use lowercase
    if text != text.lower():
        raise ValueError(f"time {text!r} must use a lowercase am/pm suffix")
    clock = datetime.strptime(text, CLOCK_TIME_FORMAT)
    day = resolve_event_date(event_date, timezone)
    moment = datetime(
        day.year, day.month, day.day, clock.hour, clock.minute,
        tzinfo=ZoneInfo(timezone),
    )
    return int(moment.timestamp()) * 1000


def parse_time_range(
    text: str,
    event_date: Optional[date] = None,
    timezone: str = DEFAULT_EVENT_TIMEZONE,
) -> TimeRange:
    """
    Parse a ``<start>–<end>`` range into start and end epoch milliseconds.

    The range must use an en dash separator. On any failure the result is
    (0, 0) with ``error`` set instead of raising, so one bad row does not
    stop a batch.

    Args:
        text: Range such as ``2:00pm–4:30pm``
        event_date: Date to bind the times to (today when None)
        timezone: IANA time zone name the times are expressed in

    Returns:
        TimeRange with the parsed values or the failure reason
    """
    parts = (text or "").split(TIME_RANGE_SEPARATOR)
    if len(parts) != 2:
        return TimeRange(error=f"expected '<start>{TIME_RANGE_SEPARATOR}<end>', got {text!r}")

    try:
        start = parse_clock_time(parts[0], event_date, timezone)
        end = parse_clock_time(parts[1], event_date, timezone)
    except ValueError as e:
        return TimeRange(error=f"invalid time in {text!r}: {e}")

    return TimeRange(start=start, end=end)
