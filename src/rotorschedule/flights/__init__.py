"""Offshore helicopter schedule aggregation package."""

from rotorschedule.flights.errors import DateRangeError, ParseFieldError, SourceFetchError
from rotorschedule.flights.models import CommonFlight, ScheduleResult
from rotorschedule.flights.service import FlightAggregator

__all__ = [
    "CommonFlight",
    "DateRangeError",
    "FlightAggregator",
    "ParseFieldError",
    "ScheduleResult",
    "SourceFetchError",
]
