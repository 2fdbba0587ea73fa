"""Statistics computation for aggregated schedules."""

from dataclasses import dataclass, field
from typing import Any, Dict, List

import pandas as pd

from rotorschedule.flights.models import CommonFlight


@dataclass
class FlightStats:
    """Container for flight statistics."""

    total_flights: int = 0
    late_flights: int = 0
    by_operator: Dict[str, int] = field(default_factory=dict)
    by_status: Dict[str, int] = field(default_factory=dict)
    by_client: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "total_flights": self.total_flights,
            "late_flights": self.late_flights,
            "by_operator": self.by_operator,
            "by_status": self.by_status,
            "by_client": self.by_client,
        }

    def status_dataframe(self) -> pd.DataFrame:
        """Return by_status as DataFrame, most frequent first."""
        if not self.by_status:
            return pd.DataFrame(columns=["status", "count"])
        return pd.DataFrame(
            [
                {"status": k, "count": v}
                for k, v in sorted(self.by_status.items(), key=lambda x: (-x[1], x[0]))
            ]
        )


def compute_stats(flights: List[CommonFlight]) -> FlightStats:
    """Compute statistics from a list of flights."""
    stats = FlightStats()

    if not flights:
        return stats

    stats.total_flights = len(flights)

    for f in flights:
        op = f.operator.short_name
        stats.by_operator[op] = stats.by_operator.get(op, 0) + 1

        label = f.flight_status.label
        stats.by_status[label] = stats.by_status.get(label, 0) + 1

        if f.client:
            stats.by_client[f.client] = stats.by_client.get(f.client, 0) + 1

        if f.is_late:
            stats.late_flights += 1

    return stats
