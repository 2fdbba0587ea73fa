"""Flight aggregation - concurrent fetching and merging of all sources."""

import asyncio
import logging
from datetime import date, datetime
from typing import Iterable, List, Optional, Sequence, Union

from rotorschedule.flights.config import ScheduleConfig
from rotorschedule.flights.errors import DateRangeError
from rotorschedule.flights.models import CommonFlight, ScheduleResult
from rotorschedule.flights.sources.base import SourceAdapter
from rotorschedule.flights.sources.bristow import BristowSource
from rotorschedule.flights.sources.chc import ChcSource
from rotorschedule.flights.sources.nhv import NhvSource
from rotorschedule.flights.transport import RequestsTransport, Transport
from rotorschedule.reference.operators import Operator

logger = logging.getLogger(__name__)


class FlightAggregator:
    """Fetches today's flights from every source and merges them."""

    def __init__(
        self,
        adapters: Optional[Sequence[SourceAdapter]] = None,
        transport: Optional[Transport] = None,
        config: Optional[ScheduleConfig] = None,
    ):
        if adapters is None:
            config = config or ScheduleConfig()
            transport = transport or RequestsTransport(timeout=config.timeout)
            adapters = [
                BristowSource(transport=transport, config=config),
                NhvSource(transport=transport, config=config),
                ChcSource(transport=transport, config=config),
            ]
        self._adapters = list(adapters)

    @property
    def adapters(self) -> List[SourceAdapter]:
        return list(self._adapters)

    async def get_all_flights(
        self, for_day: Optional[Union[date, datetime]] = None
    ) -> List[CommonFlight]:
        """Fetch all sources concurrently and concatenate in source order.

        Raises DateRangeError if for_day is not today; the sources only
        publish the current day's schedule.
        """
        _check_today(for_day)

        results = await asyncio.gather(
            *(adapter.fetch() for adapter in self._adapters),
            return_exceptions=True,
        )

        flights: List[CommonFlight] = []
        for adapter, result in zip(self._adapters, results):
            if isinstance(result, BaseException):
                logger.error(
                    "Source %s failed: %r",
                    adapter.operator.short_name,
                    result,
                    exc_info=result,
                )
                continue
            flights.extend(result)
        return flights

    def query(
        self,
        for_day: Optional[Union[date, datetime]] = None,
        operators: Optional[Iterable[Operator]] = None,
    ) -> ScheduleResult:
        """Fetch today's flights, optionally keeping only some operators."""
        flights = asyncio.run(self.get_all_flights(for_day))
        if operators:
            wanted = set(operators)
            flights = [f for f in flights if f.operator in wanted]
        return ScheduleResult(flights=flights, day=date.today())

    def statistics(self, flights):
        """Compute statistics for the given flights."""
        from rotorschedule.flights.stats import compute_stats

        return compute_stats(flights)


def _check_today(for_day: Optional[Union[date, datetime]]) -> None:
    if for_day is None:
        return
    day = for_day.date() if isinstance(for_day, datetime) else for_day
    if day != date.today():
        raise DateRangeError(
            f"Date must be today ({date.today().isoformat()}), got {day.isoformat()}: "
            "the sources do not publish past or future schedules"
        )
