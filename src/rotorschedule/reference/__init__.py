"""Reference data: operators and flight status vocabularies."""

from rotorschedule.reference.operators import Operator, get_operator
from rotorschedule.reference.status import (
    ARRIVED,
    CANCELLED,
    DELAYED,
    INBOUND,
    ON_TIME,
    OUTBOUND,
    PREPARING,
    FlightStatus,
    map_status,
)

__all__ = [
    "ARRIVED",
    "CANCELLED",
    "DELAYED",
    "FlightStatus",
    "INBOUND",
    "ON_TIME",
    "OUTBOUND",
    "Operator",
    "PREPARING",
    "get_operator",
    "map_status",
]
