"""Data models for aggregated flight schedules."""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from rotorschedule.flights.timeutil import is_late
from rotorschedule.reference.operators import Operator
from rotorschedule.reference.status import FlightStatus

_DATE_FIELDS = ("std_date", "atd_date", "eta_date")


def split_routing(routing: str, delimiter: str) -> List[str]:
    """Split a display routing into waypoint codes. Empty routing gives []."""
    if not routing:
        return []
    return routing.split(delimiter)


@dataclass
class CommonFlight:
    """Normalized flight record shared by all operators.

    ``id`` is only unique within one operator's batch.
    """

    id: str
    flight_number: str
    routing: str
    routing_components: List[str]
    flight_status: FlightStatus
    operator: Operator
    client: str
    std: str
    eta: str
    # Actual times, may be filled in after construction
    atd: Optional[str] = None
    ata: Optional[str] = None
    std_date: Optional[datetime] = None
    atd_date: Optional[datetime] = None
    eta_date: Optional[datetime] = None
    captured_at: datetime = field(default_factory=datetime.now)

    @property
    def is_late(self) -> bool:
        return is_late(self.std_date, self.atd_date)

    def is_today(self, today: Optional[date] = None) -> bool:
        """True when the record was captured today."""
        return self.captured_at.date() == (today or date.today())

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-safe dictionary."""
        data: Dict[str, Any] = {
            "id": self.id,
            "flight_number": self.flight_number,
            "routing": self.routing,
            "routing_components": list(self.routing_components),
            "flight_status": self.flight_status.to_dict(),
            "operator": self.operator.value,
            "client": self.client,
            "std": self.std,
            "eta": self.eta,
            "atd": self.atd,
            "ata": self.ata,
            "captured_at": self.captured_at.isoformat(),
        }
        for name in _DATE_FIELDS:
            value = getattr(self, name)
            data[name] = value.isoformat() if value is not None else None
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CommonFlight":
        """Inverse of to_dict. Raises KeyError/ValueError on malformed input."""
        dates = {
            name: datetime.fromisoformat(data[name]) if data.get(name) else None
            for name in _DATE_FIELDS
        }
        return cls(
            id=data["id"],
            flight_number=data["flight_number"],
            routing=data["routing"],
            routing_components=list(data["routing_components"]),
            flight_status=FlightStatus.from_dict(data["flight_status"]),
            operator=Operator(data["operator"]),
            client=data["client"],
            std=data["std"],
            eta=data["eta"],
            atd=data.get("atd"),
            ata=data.get("ata"),
            captured_at=datetime.fromisoformat(data["captured_at"]),
            **dates,
        )


@dataclass
class ScheduleResult:
    """Flights aggregated for one day."""

    flights: List[CommonFlight] = field(default_factory=list)
    day: Optional[date] = None

    def to_dataframe(self):
        """Convert to pandas DataFrame."""
        import pandas as pd

        columns = [
            "operator",
            "flight_number",
            "client",
            "routing",
            "std",
            "eta",
            "atd",
            "ata",
            "status",
            "late",
        ]
        if not self.flights:
            return pd.DataFrame(columns=columns)
        return pd.DataFrame(
            [
                {
                    "operator": f.operator.short_name,
                    "flight_number": f.flight_number,
                    "client": f.client,
                    "routing": f.routing,
                    "std": f.std,
                    "eta": f.eta,
                    "atd": f.atd,
                    "ata": f.ata,
                    "status": f.flight_status.label,
                    "late": f.is_late,
                }
                for f in self.flights
            ],
            columns=columns,
        )
