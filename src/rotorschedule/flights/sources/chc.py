"""CHC Helicopter scheduling portal scraper.

The portal is an ASP.NET page with no JSON API. Schedules are obtained by
replaying the "Get Schedules" form submission once for departures and once for
arrivals. The submission must carry the page's ``__VIEWSTATE`` and
``__EVENTVALIDATION`` tokens, which are supplied through configuration.
"""

import asyncio
import logging
from datetime import date, datetime
from typing import Dict, List, Optional

import requests

from rotorschedule.flights.config import ScheduleConfig
from rotorschedule.flights.errors import SourceFetchError
from rotorschedule.flights.models import CommonFlight
from rotorschedule.flights.sources.html_table import extract_rows
from rotorschedule.flights.sources.joiner import join
from rotorschedule.flights.transport import RequestsTransport, Transport
from rotorschedule.reference.operators import Operator

logger = logging.getLogger(__name__)

DEPARTURES = 1
ARRIVALS = 0

FORM_HEADERS = {
    "Accept-Encoding": "gzip, deflate",
    "Accept": (
        "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,"
        "image/apng,*/*;q=0.8,application/signed-exchange;v=b3;q=0.9"
    ),
    "Cache-Control": "max-age=0",
    "Content-Type": "application/x-www-form-urlencoded",
}


class ChcSource:
    """Schedule source for the CHC scheduling portal."""

    operator = Operator.CHC

    def __init__(
        self,
        transport: Optional[Transport] = None,
        config: Optional[ScheduleConfig] = None,
    ):
        self.config = config or ScheduleConfig()
        self.transport = transport or RequestsTransport(timeout=self.config.timeout)

    async def fetch(self) -> List[CommonFlight]:
        """Fetch today's CHC flights. Returns [] if either page fails."""
        logger.info("Getting CHC flights")
        if not self.config.chc.has_tokens:
            logger.warning("CHC portal tokens are not configured; the portal will likely reject the request")
        try:
            departure_html, arrival_html = await asyncio.gather(
                self._fetch_page(DEPARTURES),
                self._fetch_page(ARRIVALS),
            )
            return self.parse(departure_html, arrival_html)
        except SourceFetchError as e:
            logger.error("Could not get CHC flights: %s", e)
        except Exception:
            logger.exception("Could not get CHC flights")
        return []

    async def _fetch_page(self, direction: int) -> str:
        body = build_form_body(self.build_form_params(direction))
        try:
            content, _ = await self.transport.perform_request(
                "POST", self.config.chc.url, headers=FORM_HEADERS, data=body
            )
        except (requests.RequestException, OSError) as e:
            raise SourceFetchError(self.operator.short_name, str(e)) from e
        return content.decode("utf-8", errors="replace")

    def build_form_params(self, direction: int, today: Optional[date] = None) -> Dict[str, str]:
        """Form fields for one page. direction is DEPARTURES or ARRIVALS."""
        today = today or date.today()
        chc = self.config.chc
        return {
            "ddlDay": str(today.day),
            "ddlMonth": str(today.month),
            "ddlYear": str(today.year),
            "ddlCountry": chc.country,
            "btGetFlight": "Get+Schedules",
            "rbDeptArr": str(direction),
            "ddlBase": chc.base,
            "__VIEWSTATE": chc.viewstate,
            "__EVENTVALIDATION": chc.event_validation,
        }

    def parse(
        self, departure_html: str, arrival_html: str, captured_at: Optional[datetime] = None
    ) -> List[CommonFlight]:
        """Extract both pages and join them into CommonFlights."""
        departures = extract_rows(departure_html)
        arrivals = extract_rows(arrival_html)
        logger.info("CHC rows: %d departures, %d arrivals", len(departures), len(arrivals))
        return join(departures, arrivals, captured_at=captured_at)


def build_form_body(params: Dict[str, str]) -> str:
    """Join form fields as key=value pairs.

    Values are sent as given: the session tokens are already percent-encoded.
    """
    return "&".join(f"{key}={value}" for key, value in params.items())
