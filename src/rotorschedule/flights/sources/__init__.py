"""Pluggable flight schedule sources."""

from rotorschedule.flights.sources.base import SourceAdapter
from rotorschedule.flights.sources.bristow import BristowSource
from rotorschedule.flights.sources.chc import ChcSource
from rotorschedule.flights.sources.html_table import FieldSet, extract_rows
from rotorschedule.flights.sources.joiner import ChcRecord, join, join_rows
from rotorschedule.flights.sources.nhv import NhvSource

__all__ = [
    "BristowSource",
    "ChcRecord",
    "ChcSource",
    "FieldSet",
    "NhvSource",
    "SourceAdapter",
    "extract_rows",
    "join",
    "join_rows",
]
