"""Canonical flight status and per-operator status vocabularies."""

from dataclasses import dataclass
from typing import Literal, Optional

from rotorschedule.reference.operators import Operator

StatusKind = Literal[
    "delayed",
    "on_time",
    "preparing",
    "cancelled",
    "outbound",
    "inbound",
    "arrived",
    "unknown",
]

_LABELS = {
    "delayed": "Flight delayed",
    "on_time": "On Time",
    "preparing": "Flight preparing",
    "cancelled": "Flight cancelled",
    "outbound": "Flight outbound",
    "inbound": "Flight inbound",
    "arrived": "Flight arrived",
}


@dataclass(frozen=True)
class FlightStatus:
    """Canonical flight status.

    Seven known kinds, plus ``unknown`` which keeps the untranslated source
    text in ``original_text``.
    """

    kind: StatusKind
    original_text: Optional[str] = None

    def __post_init__(self) -> None:
        if self.kind not in _LABELS and self.kind != "unknown":
            raise ValueError(f"Invalid status kind: {self.kind}")
        if self.kind != "unknown" and self.original_text is not None:
            raise ValueError(f"original_text is only allowed for unknown status, got {self.kind}")

    @classmethod
    def unknown(cls, original_text: Optional[str] = None) -> "FlightStatus":
        return cls(kind="unknown", original_text=original_text)

    @property
    def is_unknown(self) -> bool:
        return self.kind == "unknown"

    @property
    def label(self) -> str:
        """Human-readable status text."""
        if self.kind == "unknown":
            return self.original_text or "Unknown"
        return _LABELS[self.kind]

    def to_dict(self) -> dict:
        return {"kind": self.kind, "original_text": self.original_text}

    @classmethod
    def from_dict(cls, data: dict) -> "FlightStatus":
        return cls(kind=data["kind"], original_text=data.get("original_text"))


DELAYED = FlightStatus("delayed")
ON_TIME = FlightStatus("on_time")
PREPARING = FlightStatus("preparing")
CANCELLED = FlightStatus("cancelled")
OUTBOUND = FlightStatus("outbound")
INBOUND = FlightStatus("inbound")
ARRIVED = FlightStatus("arrived")

# Keys are lowercase source strings
_BHL_STATUSES: dict[str, FlightStatus] = {
    "landed": ARRIVED,
    # Bristow leaves the status blank while nothing is wrong
    "": ON_TIME,
    "flight manned": PREPARING,
    "check-in now": PREPARING,
    "flight called": PREPARING,
    "outbound": OUTBOUND,
    "inbound": INBOUND,
    "delayed": DELAYED,
    "cancelled": CANCELLED,
}

_NHV_STATUSES: dict[str, FlightStatus] = {
    "departed": OUTBOUND,
    "on-time": ON_TIME,
    "boarding": PREPARING,
    "arrived": ARRIVED,
    "cancelled": CANCELLED,
    "inbound": INBOUND,
    "delayed": DELAYED,
}

_CHC_STATUSES: dict[str, FlightStatus] = {
    "departed": OUTBOUND,
    "ontime": ON_TIME,
    "arrived": ARRIVED,
    "cancelled": CANCELLED,
    "inbound": INBOUND,
    "delayed": DELAYED,
}

_STATUS_TABLES: dict[Operator, dict[str, FlightStatus]] = {
    Operator.BHL: _BHL_STATUSES,
    Operator.NHV: _NHV_STATUSES,
    Operator.CHC: _CHC_STATUSES,
}


def map_status(operator: Operator, raw_status: Optional[str]) -> FlightStatus:
    """Map an operator's raw status text to the canonical FlightStatus.

    Lookup is case-insensitive. Text outside the operator's vocabulary maps to
    ``FlightStatus.unknown(raw_status)``.
    """
    if raw_status is None or not isinstance(raw_status, str):
        return FlightStatus.unknown(raw_status)
    table = _STATUS_TABLES.get(operator, {})
    status = table.get(raw_status.lower())
    if status is None:
        return FlightStatus.unknown(raw_status)
    return status
