"""Persistence of user-pinned flights.

Pinned flights are stored as a JSON array of CommonFlight dictionaries. Only
flights captured today survive a reload; older entries are dropped silently.
"""

import json
import logging
from datetime import date
from pathlib import Path
from typing import List, Optional, Sequence, Union

from rotorschedule.flights.models import CommonFlight
from rotorschedule.reference.operators import Operator

logger = logging.getLogger(__name__)


def encode_pinned(flights: Sequence[CommonFlight]) -> str:
    """Serialize flights to a JSON string ("[]" if they cannot be encoded)."""
    try:
        return json.dumps([f.to_dict() for f in flights])
    except (TypeError, ValueError, AttributeError) as e:
        logger.warning("Could not encode pinned flights: %s", e)
        return "[]"


def decode_pinned(raw: Optional[str], today: Optional[date] = None) -> List[CommonFlight]:
    """Deserialize pinned flights, keeping only those captured today.

    Empty or malformed input gives [].
    """
    if not raw:
        return []
    try:
        data = json.loads(raw)
        if not isinstance(data, list):
            return []
        flights = [CommonFlight.from_dict(item) for item in data]
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        logger.warning("Discarding unreadable pinned flights: %s", e)
        return []
    return [f for f in flights if f.is_today(today)]


class PinnedFlightStore:
    """File-backed pinned flight store."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load(self, today: Optional[date] = None) -> List[CommonFlight]:
        if not self.path.exists():
            return []
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as e:
            logger.warning("Could not read pinned flights from %s: %s", self.path, e)
            return []
        return decode_pinned(raw, today=today)

    def save(self, flights: Sequence[CommonFlight]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(encode_pinned(flights), encoding="utf-8")

    def pin(self, flight: CommonFlight) -> List[CommonFlight]:
        """Add flight (replacing any pinned flight with the same operator and id)."""
        flights = [
            f for f in self.load() if not (f.operator == flight.operator and f.id == flight.id)
        ]
        flights.append(flight)
        self.save(flights)
        return flights

    def unpin(self, operator: Operator, flight_id: str) -> List[CommonFlight]:
        """Remove the pinned flight with this operator and id."""
        flights = [f for f in self.load() if not (f.operator == operator and f.id == flight_id)]
        self.save(flights)
        return flights
