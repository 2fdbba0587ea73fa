"""Extract flight rows from the CHC scheduling portal's rendered HTML.

The portal renders one table (``id="Table1"``) with one ``<tr>`` per flight.
Each field is a ``<span>`` whose generated id contains a fixed marker, e.g.
``rptFlights_ctl01_lblFlightNumber``. The status span wraps its text in a
``<font>`` tag carrying the status colour.
"""

from dataclasses import dataclass
from typing import List, Optional

from bs4 import BeautifulSoup, Comment, Tag

TABLE_ID = "Table1"

# Checked in order; the first marker found in a span id wins
_FIELD_MARKERS = (
    ("FlightNumber", "flight_number"),
    ("ArrDept", "scheduled_time"),
    ("Customer", "customer"),
    ("Routing", "routing"),
    ("Status", "status"),
    ("RevTime", "revised_time"),
)


@dataclass
class FieldSet:
    """Labelled fields from one table row."""

    flight_number: Optional[str] = None
    scheduled_time: Optional[str] = None
    customer: Optional[str] = None
    routing: Optional[str] = None
    status: Optional[str] = None
    revised_time: Optional[str] = None


def extract_rows(html: str, table_id: str = TABLE_ID) -> List[FieldSet]:
    """Parse the flight table into FieldSets in document order.

    Rows without a flight number (headers, footers) are dropped.
    """
    soup = BeautifulSoup(html or "", "html.parser")
    table = soup.find(id=table_id)
    if table is None:
        return []

    rows = []
    for tr in table.find_all("tr"):
        fields = _extract_fields(tr)
        if fields.flight_number is None:
            continue
        rows.append(fields)
    return rows


def _extract_fields(row: Tag) -> FieldSet:
    fields = FieldSet()
    for span in row.find_all("span"):
        span_id = span.get("id") or ""
        attr = _label_for(span_id)
        if attr is None:
            continue
        if attr == "status":
            font = span.find("font")
            value = _first_text(font) if font is not None else None
        else:
            value = _first_text(span)
        setattr(fields, attr, value)
    return fields


def _label_for(span_id: str) -> Optional[str]:
    for marker, attr in _FIELD_MARKERS:
        if marker in span_id:
            return attr
    return None


def _first_text(element: Tag) -> Optional[str]:
    """First direct text node of element (comments skipped), stripped. Blank text gives None."""
    text = element.find(string=lambda s: not isinstance(s, Comment), recursive=False)
    if text is None:
        return None
    value = str(text).strip()
    return value or None
