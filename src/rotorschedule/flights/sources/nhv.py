"""NHV public schedule API client.

Response: a JSON array of records keyed by ``ID`` with ISO-8601 instants
(fractional seconds, UTC) and a list of routing waypoints:

    {"ID": "42817ea0-...", "FlightNumber": "SEP900G", "Customer": "Spirit Energy",
     "ScheduleDepartureTime": "2022-06-12T07:27:00.000Z",
     "ScheduleArrivalTime": "2022-06-12T08:12:00.000Z",
     "Routing": [{"Place": "CPC1", "PlaceName": "CPC-1"}, ...],
     "Status": "arrived", "departureTime": "...", "arrivalTime": "..."}
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, List, Optional

import requests

from rotorschedule.flights.config import ScheduleConfig
from rotorschedule.flights.errors import ParseFieldError, SourceFetchError
from rotorschedule.flights.models import CommonFlight, split_routing
from rotorschedule.flights.sources.base import decode_json_list, optional_str, require_str
from rotorschedule.flights.timeutil import display_time, resolve_instant
from rotorschedule.flights.transport import RequestsTransport, Transport
from rotorschedule.reference.operators import Operator
from rotorschedule.reference.status import map_status

logger = logging.getLogger(__name__)

ROUTING_DELIMITER = " - "
NOT_AVAILABLE = "N/A"


@dataclass
class NhvWaypoint:
    place: str
    place_name: Optional[str] = None


@dataclass
class NhvRecord:
    """Raw NHV record (before normalization)."""

    id: str
    flight_number: str
    customer: str
    schedule_departure_time: str
    schedule_arrival_time: str
    status: str
    routing: List[NhvWaypoint] = field(default_factory=list)
    departure_time: Optional[str] = None
    arrival_time: Optional[str] = None
    model: Optional[str] = None


class NhvSource:
    """Schedule source for the NHV public schedule API."""

    operator = Operator.NHV

    def __init__(
        self,
        transport: Optional[Transport] = None,
        config: Optional[ScheduleConfig] = None,
    ):
        self.config = config or ScheduleConfig()
        self.transport = transport or RequestsTransport(timeout=self.config.timeout)

    async def fetch(self) -> List[CommonFlight]:
        """Fetch today's NHV flights. Returns [] if the source fails."""
        logger.info("Getting NHV flights for base: %s", self.config.nhv_base)
        try:
            payload = await self._fetch_payload()
            return self.parse(payload)
        except SourceFetchError as e:
            logger.error("Could not get NHV flights: %s", e)
        except Exception:
            logger.exception("Could not get NHV flights")
        return []

    async def _fetch_payload(self) -> List[Any]:
        headers = {"Accept": "application/json", "Accept-Encoding": "gzip, deflate"}
        try:
            body, _ = await self.transport.perform_request("GET", self.config.nhv_url, headers=headers)
        except (requests.RequestException, OSError) as e:
            raise SourceFetchError(self.operator.short_name, str(e)) from e
        return decode_json_list(body, self.operator.short_name)

    def parse(self, payload: List[Any], captured_at: Optional[datetime] = None) -> List[CommonFlight]:
        """Convert a decoded payload to CommonFlights, skipping malformed records."""
        captured_at = captured_at or datetime.now()
        flights = []
        for item in payload:
            try:
                raw = self._parse_item(item)
            except ParseFieldError as e:
                logger.warning("Skipping NHV record: %s", e)
                continue
            flights.append(self.raw_to_flight(raw, captured_at))
        return flights

    def _parse_item(self, item: Any) -> NhvRecord:
        if not isinstance(item, dict):
            raise ParseFieldError("record", item)
        return NhvRecord(
            id=require_str(item, "ID"),
            flight_number=require_str(item, "FlightNumber"),
            customer=require_str(item, "Customer"),
            schedule_departure_time=require_str(item, "ScheduleDepartureTime"),
            schedule_arrival_time=require_str(item, "ScheduleArrivalTime"),
            status=require_str(item, "Status"),
            routing=self._parse_routing(item.get("Routing")),
            departure_time=optional_str(item, "departureTime"),
            arrival_time=optional_str(item, "arrivalTime"),
            model=optional_str(item, "Model"),
        )

    def _parse_routing(self, value: Any) -> List[NhvWaypoint]:
        if not isinstance(value, list):
            raise ParseFieldError("Routing", value)
        waypoints = []
        for wp in value:
            if not isinstance(wp, dict):
                raise ParseFieldError("Routing", value)
            waypoints.append(
                NhvWaypoint(place=require_str(wp, "Place"), place_name=optional_str(wp, "PlaceName"))
            )
        return waypoints

    def raw_to_flight(self, raw: NhvRecord, captured_at: datetime) -> CommonFlight:
        """Convert NhvRecord to normalized CommonFlight."""
        routing = ROUTING_DELIMITER.join(wp.place for wp in raw.routing)
        std_date = resolve_instant(raw.schedule_departure_time)
        eta_date = resolve_instant(raw.schedule_arrival_time)
        atd_date = resolve_instant(raw.departure_time)
        ata_date = resolve_instant(raw.arrival_time)

        return CommonFlight(
            id=raw.id,
            flight_number=raw.flight_number,
            routing=routing,
            routing_components=split_routing(routing, ROUTING_DELIMITER),
            flight_status=map_status(self.operator, raw.status),
            operator=self.operator,
            client=raw.customer,
            std=display_time(std_date) or NOT_AVAILABLE,
            eta=display_time(eta_date) or NOT_AVAILABLE,
            atd=display_time(atd_date),
            ata=display_time(ata_date),
            std_date=std_date,
            atd_date=atd_date,
            eta_date=eta_date,
            captured_at=captured_at,
        )
