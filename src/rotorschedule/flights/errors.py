"""Exceptions raised while aggregating flight schedules."""

from typing import Any, Optional


class ScheduleError(Exception):
    """Base class for schedule aggregation errors."""


class DateRangeError(ScheduleError, ValueError):
    """Raised when flights are requested for a day other than today."""


class SourceFetchError(ScheduleError):
    """A source could not be fetched or its payload could not be decoded."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"{source}: {reason}")
        self.source = source
        self.reason = reason


class ParseFieldError(ScheduleError, ValueError):
    """A single record field is missing or malformed."""

    def __init__(self, field: str, value: Optional[Any] = None):
        super().__init__(f"Invalid value for field {field!r}: {value!r}")
        self.field = field
        self.value = value
