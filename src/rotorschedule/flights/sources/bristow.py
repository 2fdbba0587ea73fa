"""Bristow Helicopters (BHL) flight tracker API client.

Response: a JSON array of flat records with "HH:MM" display times, e.g.

    {"std": "07:00", "atd": "07:02", "flight": "76A",
     "company": "REPSOL SINOPEC RESOURCES UK LTD", "eta": "09:39",
     "status": "Landed", "routing": "EGPD / FUL / EGPD"}

Times carry no date and are anchored to the capture day.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, List, Optional

import requests

from rotorschedule.flights.config import ScheduleConfig
from rotorschedule.flights.errors import ParseFieldError, SourceFetchError
from rotorschedule.flights.models import CommonFlight, split_routing
from rotorschedule.flights.sources.base import decode_json_list, optional_str, require_str
from rotorschedule.flights.timeutil import resolve_wall_clock
from rotorschedule.flights.transport import RequestsTransport, Transport
from rotorschedule.reference.operators import Operator
from rotorschedule.reference.status import map_status

logger = logging.getLogger(__name__)

ROUTING_DELIMITER = " / "


@dataclass
class BristowRecord:
    """Raw Bristow record (before normalization)."""

    std: str
    flight: str
    company: str
    eta: str
    status: str
    routing: str
    atd: Optional[str] = None
    ata: Optional[str] = None


class BristowSource:
    """Schedule source for the Bristow flight tracker."""

    operator = Operator.BHL

    def __init__(
        self,
        transport: Optional[Transport] = None,
        config: Optional[ScheduleConfig] = None,
    ):
        self.config = config or ScheduleConfig()
        self.transport = transport or RequestsTransport(timeout=self.config.timeout)

    async def fetch(self) -> List[CommonFlight]:
        """Fetch today's Bristow flights. Returns [] if the source fails."""
        date_str = format_request_date(date.today())
        logger.info("Getting BHL flights for date: %s", date_str)
        try:
            payload = await self._fetch_payload(date_str)
            return self.parse(payload)
        except SourceFetchError as e:
            logger.error("Could not get BHL flights: %s", e)
        except Exception:
            logger.exception("Could not get BHL flights")
        return []

    async def _fetch_payload(self, date_str: str) -> List[Any]:
        params = {"basename_id": self.config.bristow_base_id, "date": date_str}
        headers = {"Accept": "application/json", "Accept-Encoding": "gzip, deflate"}
        try:
            body, _ = await self.transport.perform_request(
                "GET", self.config.bristow_url, params=params, headers=headers
            )
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
                logger.warning("Skipping BHL record: %s", e)
                continue
            flights.append(self.raw_to_flight(raw, captured_at))
        return flights

    def _parse_item(self, item: Any) -> BristowRecord:
        if not isinstance(item, dict):
            raise ParseFieldError("record", item)
        return BristowRecord(
            std=require_str(item, "std"),
            flight=require_str(item, "flight"),
            company=require_str(item, "company"),
            eta=require_str(item, "eta"),
            status=require_str(item, "status"),
            routing=require_str(item, "routing"),
            atd=optional_str(item, "atd"),
            ata=optional_str(item, "ata"),
        )

    def raw_to_flight(self, raw: BristowRecord, captured_at: datetime) -> CommonFlight:
        """Convert BristowRecord to normalized CommonFlight."""
        return CommonFlight(
            id=raw.std + raw.flight + raw.routing,
            flight_number=raw.flight,
            routing=raw.routing,
            routing_components=split_routing(raw.routing, ROUTING_DELIMITER),
            flight_status=map_status(self.operator, raw.status),
            operator=self.operator,
            client=raw.company,
            std=raw.std,
            eta=raw.eta,
            atd=raw.atd,
            ata=raw.ata,
            std_date=resolve_wall_clock(raw.std, captured_at),
            atd_date=resolve_wall_clock(raw.atd, captured_at) if raw.atd else None,
            eta_date=resolve_wall_clock(raw.eta, captured_at),
            captured_at=captured_at,
        )


_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def format_request_date(d: date) -> str:
    """Format a date as the API expects, e.g. "05-Mar-2023" (locale independent)."""
    return f"{d.day:02d}-{_MONTHS[d.month - 1]}-{d.year:04d}"
