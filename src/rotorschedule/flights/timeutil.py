"""Wall-clock and ISO-8601 time resolution for flight records.

Two of the three sources report display times ("HH:MM") without a date, so
those are anchored to the day the record was captured. Flights crossing
midnight are not modelled.
"""

from datetime import date, datetime, time
from typing import Optional, Union

_INSTANT_FORMATS = (
    "%Y-%m-%dT%H:%M:%S.%f%z",
    "%Y-%m-%dT%H:%M:%S%z",
)


def resolve_wall_clock(
    hhmm: Optional[str], reference_day: Union[date, datetime]
) -> Optional[datetime]:
    """Anchor an "HH:MM" string to reference_day.

    Returns None unless the string splits into exactly two integer fields.
    If the hour/minute cannot be placed on the calendar (e.g. "25:00"),
    reference_day is returned unchanged.
    """
    if not isinstance(reference_day, datetime):
        reference_day = datetime.combine(reference_day, time())
    if not hhmm:
        return None

    parts = hhmm.split(":")
    if len(parts) != 2:
        return None
    try:
        hour, minute = int(parts[0]), int(parts[1])
    except ValueError:
        return None

    try:
        return reference_day.replace(hour=hour, minute=minute, second=0, microsecond=0)
    except ValueError:
        return reference_day


def resolve_instant(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO-8601 instant (e.g. "2022-06-12T07:27:00.000Z").

    The result is converted to local time and returned naive, so it compares
    with wall-clock results from the other sources.
    """
    if not value or not isinstance(value, str):
        return None
    for fmt in _INSTANT_FORMATS:
        try:
            dt = datetime.strptime(value.strip(), fmt)
        except ValueError:
            continue
        return dt.astimezone().replace(tzinfo=None)
    return None


def is_late(std: Optional[datetime], atd: Optional[datetime]) -> bool:
    """True when the actual departure is after the scheduled one.

    Missing either time counts as not late.
    """
    if std is None or atd is None:
        return False
    return atd > std


def display_time(value: Optional[datetime]) -> Optional[str]:
    """Format a datetime as "HH:MM"."""
    if value is None:
        return None
    return value.strftime("%H:%M")
