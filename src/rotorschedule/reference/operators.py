"""Helicopter operator lookup by short code."""

from enum import Enum
from typing import Optional


class Operator(str, Enum):
    """Offshore helicopter operators whose schedules can be aggregated."""

    NHV = "NHV"
    BHL = "BHL"
    CHC = "CHC"
    OHS = "OHS"

    @property
    def short_name(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return _OPERATOR_LABELS[self]


_OPERATOR_LABELS: dict[Operator, str] = {
    Operator.NHV: "Noordzee Helikopters Vlaanderen",
    Operator.BHL: "Bristow Helicopters",
    Operator.CHC: "CHC Helicopter Corporation",
    Operator.OHS: "Offshore Helicopter Services",
}


def get_operator(code: str) -> Optional[Operator]:
    """Look up operator by short code (case-insensitive). Returns None if not found."""
    if not code:
        return None
    try:
        return Operator(code.strip().upper())
    except ValueError:
        return None
