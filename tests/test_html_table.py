"""Unit tests for CHC portal table extraction."""

from rotorschedule.flights.sources.html_table import FieldSet, extract_rows


def _page(*rows: str, table_id: str = "Table1") -> str:
    return f"<html><body><table id=\"{table_id}\">{''.join(rows)}</table></body></html>"


def _row(prefix: str, flight_number=None, status="Departed", revised="10:25") -> str:
    cells = []
    if flight_number is not None:
        cells.append(f'<td><span id="{prefix}_lblFlightNumber">{flight_number}</span></td>')
    cells.extend(
        [
            f'<td><span id="{prefix}_lblArrDeptTime">09:30</span></td>',
            f'<td><span id="{prefix}_lblCustomer">Petrofac</span></td>',
            f'<td><span id="{prefix}_lblRouting">Island Innovator / Aberdeen</span></td>',
            f'<td><span id="{prefix}_lblStatus"><font color="Green">{status}</font></span></td>',
            f'<td><span id="{prefix}_lblRevTime">{revised}</span></td>',
            f'<td><span id="{prefix}_lblComments">Crew change</span></td>',
        ]
    )
    return f"<tr>{''.join(cells)}</tr>"


class TestExtractRows:
    """Tests for extract_rows."""

    def test_row_without_flight_number_dropped(self) -> None:
        html = _page(_row("rptFlights_ctl00"))
        assert extract_rows(html) == []

    def test_row_with_flight_number_extracted(self) -> None:
        html = _page(_row("rptFlights_ctl00", flight_number="12X"))
        rows = extract_rows(html)
        assert rows == [
            FieldSet(
                flight_number="12X",
                scheduled_time="09:30",
                customer="Petrofac",
                routing="Island Innovator / Aberdeen",
                status="Departed",
                revised_time="10:25",
            )
        ]

    def test_status_requires_font_wrapper(self) -> None:
        html = _page(
            "<tr>"
            '<td><span id="r_lblFlightNumber">12X</span></td>'
            '<td><span id="r_lblStatus">Departed</span></td>'
            "</tr>"
        )
        rows = extract_rows(html)
        assert len(rows) == 1
        assert rows[0].status is None

    def test_blank_fields_are_none(self) -> None:
        html = _page(_row("r", flight_number="31B", revised="  "))
        rows = extract_rows(html)
        assert rows[0].revised_time is None

    def test_comments_are_skipped(self) -> None:
        html = _page(
            "<tr>"
            '<td><span id="r_lblFlightNumber"><!-- ctl -->12X</span></td>'
            '<td><span id="r_lblStatus"><font color="Green"><!-- s -->Departed</font></span></td>'
            '<td><span id="r_lblRevTime"><!-- none --></span></td>'
            "</tr>"
        )
        rows = extract_rows(html)
        assert rows[0].flight_number == "12X"
        assert rows[0].status == "Departed"
        assert rows[0].revised_time is None

    def test_values_are_stripped(self) -> None:
        html = _page(_row("r", flight_number="  31B\n", status=" OnTime "))
        rows = extract_rows(html)
        assert rows[0].flight_number == "31B"
        assert rows[0].status == "OnTime"

    def test_missing_table_returns_empty(self) -> None:
        html = _page(_row("r", flight_number="12X"), table_id="OtherTable")
        assert extract_rows(html) == []
        assert extract_rows("") == []

    def test_document_order_preserved(self) -> None:
        html = _page(
            _row("a", flight_number="38A"),
            _row("b", flight_number="12X"),
            _row("c", flight_number="31A"),
        )
        assert [r.flight_number for r in extract_rows(html)] == ["38A", "12X", "31A"]

    def test_departures_fixture(self, departures_html: str) -> None:
        rows = extract_rows(departures_html)
        assert [r.flight_number for r in rows] == ["31A", "12X", "38A", "31B"]
        first = rows[0]
        assert first.scheduled_time == "07:00"
        assert first.customer == "NEPTUNE E&P UK LIMITED"
        assert first.routing == "Cygnus Alpha / Cygnus Bravo / Aberdeen"
        assert first.status == "Delayed"
        assert first.revised_time == "07:25"
        assert rows[3].revised_time is None

    def test_arrivals_fixture(self, arrivals_html: str) -> None:
        rows = extract_rows(arrivals_html)
        assert [r.flight_number for r in rows] == ["38A", "31A", "77Q"]
        assert rows[1].status == "OnTime"
        assert rows[1].revised_time is None
        assert rows[1].scheduled_time == "09:40"
