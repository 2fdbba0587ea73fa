"""Join CHC departure and arrival rows into single flights.

The portal reports each flight twice: once on the departures page (scheduled
departure, customer, routing) and once on the arrivals page (arrival time,
arrival status). Departures are authoritative: every departure row yields one
flight and arrivals with no matching departure are dropped.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Sequence

from rotorschedule.flights.models import CommonFlight, split_routing
from rotorschedule.flights.sources.html_table import FieldSet
from rotorschedule.flights.timeutil import resolve_wall_clock
from rotorschedule.reference.operators import Operator
from rotorschedule.reference.status import map_status

NOT_AVAILABLE = "N/A"
ROUTING_DELIMITER = " / "
# Arrival status meaning "no exception reported"
ARRIVAL_NO_EXCEPTION = "OnTime"


@dataclass
class ChcRecord:
    """Joined CHC flight (before normalization). Missing fields are "N/A"."""

    flight_number: str
    std: str
    eta: str
    client: str
    routing: str
    status: str


def join_rows(departures: Sequence[FieldSet], arrivals: Sequence[FieldSet]) -> List[ChcRecord]:
    """Match each departure row to the first arrival row with the same flight number."""
    records = []
    for dep in departures:
        arr = next((a for a in arrivals if a.flight_number == dep.flight_number), None)
        if arr is not None:
            eta = arr.revised_time or arr.scheduled_time or NOT_AVAILABLE
            # The arrival leg's status wins unless it reports nothing unusual
            status = dep.status if arr.status == ARRIVAL_NO_EXCEPTION else arr.status
        else:
            eta = NOT_AVAILABLE
            status = dep.status
        records.append(
            ChcRecord(
                flight_number=dep.flight_number or NOT_AVAILABLE,
                std=dep.scheduled_time or NOT_AVAILABLE,
                eta=eta,
                client=dep.customer or NOT_AVAILABLE,
                routing=dep.routing or NOT_AVAILABLE,
                status=status or NOT_AVAILABLE,
            )
        )
    return records


def join(
    departures: Sequence[FieldSet],
    arrivals: Sequence[FieldSet],
    captured_at: Optional[datetime] = None,
) -> List[CommonFlight]:
    """Join departure and arrival rows into CommonFlights."""
    captured_at = captured_at or datetime.now()
    return [raw_to_flight(r, captured_at) for r in join_rows(departures, arrivals)]


def raw_to_flight(raw: ChcRecord, captured_at: datetime) -> CommonFlight:
    """Convert ChcRecord to normalized CommonFlight."""
    return CommonFlight(
        id=raw.flight_number,
        flight_number=raw.flight_number,
        routing=raw.routing,
        routing_components=split_routing(raw.routing, ROUTING_DELIMITER),
        flight_status=map_status(Operator.CHC, raw.status),
        operator=Operator.CHC,
        client=raw.client,
        std=raw.std,
        eta=raw.eta,
        std_date=resolve_wall_clock(raw.std, captured_at),
        eta_date=resolve_wall_clock(raw.eta, captured_at),
        captured_at=captured_at,
    )
