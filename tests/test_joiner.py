"""Unit tests for joining CHC departure and arrival rows."""

from datetime import datetime

from rotorschedule.flights.sources.html_table import FieldSet, extract_rows
from rotorschedule.flights.sources.joiner import ChcRecord, join, join_rows
from rotorschedule.reference import ARRIVED, DELAYED, ON_TIME, OUTBOUND, Operator

CAPTURED_AT = datetime(2025, 2, 17, 6, 30)


def _departure(flight_number: str, **fields) -> FieldSet:
    values = dict(
        scheduled_time="07:00",
        customer="REPSOL SINOPEC RESOURCES UK LTD",
        routing="EGPD / FUL / EGPD",
        status="Departed",
    )
    values.update(fields)
    return FieldSet(flight_number=flight_number, **values)


class TestJoinRows:
    """Tests for join_rows."""

    def test_arrival_on_time_keeps_departure_status(self) -> None:
        dep = _departure("76A", scheduled_time="07:00", status="Delayed")
        arr = FieldSet(flight_number="76A", status="OnTime", revised_time="09:39")

        records = join_rows([dep], [arr])

        assert len(records) == 1
        r = records[0]
        assert r.std == "07:00"
        assert r.eta == "09:39"
        assert r.status == "Delayed"

    def test_no_arrival_match(self) -> None:
        dep = _departure("99Z", scheduled_time="08:00", status="Departed")

        records = join_rows([dep], [])

        assert records[0].eta == "N/A"
        assert records[0].status == "Departed"

    def test_arrival_status_wins_when_exceptional(self) -> None:
        dep = _departure("38A", status="Departed")
        arr = FieldSet(flight_number="38A", status="Arrived", scheduled_time="12:45")

        record = join_rows([dep], [arr])[0]

        assert record.status == "Arrived"
        assert record.eta == "12:45"

    def test_revised_time_preferred_over_scheduled(self) -> None:
        dep = _departure("38A")
        arr = FieldSet(flight_number="38A", status="Arrived", scheduled_time="12:45", revised_time="12:31")
        assert join_rows([dep], [arr])[0].eta == "12:31"

    def test_missing_arrival_fields_fall_back_to_not_available(self) -> None:
        dep = _departure("38A")
        arr = FieldSet(flight_number="38A")

        record = join_rows([dep], [arr])[0]

        assert record.eta == "N/A"
        # Arrival status is absent (not "OnTime"), so it is taken as is
        assert record.status == "N/A"

    def test_missing_departure_fields_are_not_available(self) -> None:
        dep = FieldSet(flight_number="12X")

        record = join_rows([dep], [])[0]

        assert record == ChcRecord(
            flight_number="12X", std="N/A", eta="N/A", client="N/A", routing="N/A", status="N/A"
        )

    def test_first_arrival_match_wins(self) -> None:
        dep = _departure("76A")
        arrivals = [
            FieldSet(flight_number="76A", status="Inbound", revised_time="09:10"),
            FieldSet(flight_number="76A", status="Arrived", revised_time="09:39"),
        ]

        record = join_rows([dep], arrivals)[0]

        assert record.status == "Inbound"
        assert record.eta == "09:10"

    def test_routing_and_client_from_departure(self) -> None:
        dep = _departure("76A", customer="Shell", routing="Brent Charlie / Aberdeen")
        arr = FieldSet(flight_number="76A", customer="Other", routing="Elsewhere", status="Arrived")

        record = join_rows([dep], [arr])[0]

        assert record.client == "Shell"
        assert record.routing == "Brent Charlie / Aberdeen"

    def test_unmatched_arrivals_dropped_and_order_follows_departures(self) -> None:
        departures = [_departure("B2"), _departure("A1")]
        arrivals = [
            FieldSet(flight_number="Z9", status="Arrived"),
            FieldSet(flight_number="A1", status="Arrived"),
        ]

        records = join_rows(departures, arrivals)

        assert [r.flight_number for r in records] == ["B2", "A1"]


class TestJoin:
    """Tests for join producing CommonFlights."""

    def test_common_flight_fields(self) -> None:
        dep = _departure("76A", scheduled_time="07:00", status="Delayed", routing="EGPD / FUL / EGPD")
        arr = FieldSet(flight_number="76A", status="OnTime", revised_time="09:39")

        flight = join([dep], [arr], captured_at=CAPTURED_AT)[0]

        assert flight.id == "76A"
        assert flight.operator is Operator.CHC
        assert flight.flight_status == DELAYED
        assert flight.routing_components == ["EGPD", "FUL", "EGPD"]
        assert flight.std_date == datetime(2025, 2, 17, 7, 0)
        assert flight.eta_date == datetime(2025, 2, 17, 9, 39)
        assert flight.atd is None
        assert flight.captured_at == CAPTURED_AT

    def test_departed_without_arrival(self) -> None:
        dep = _departure("99Z", scheduled_time="08:00", status="Departed")

        flight = join([dep], [], captured_at=CAPTURED_AT)[0]

        assert flight.eta == "N/A"
        assert flight.eta_date is None
        assert flight.flight_status == OUTBOUND

    def test_fixture_pages(self, departures_html: str, arrivals_html: str) -> None:
        flights = join(extract_rows(departures_html), extract_rows(arrivals_html), captured_at=CAPTURED_AT)

        by_number = {f.flight_number: f for f in flights}
        assert list(by_number) == ["31A", "12X", "38A", "31B"]

        assert by_number["31A"].eta == "09:40"
        assert by_number["31A"].flight_status == DELAYED

        assert by_number["12X"].eta == "N/A"
        assert by_number["12X"].flight_status == OUTBOUND

        assert by_number["38A"].eta == "12:31"
        assert by_number["38A"].flight_status == ARRIVED

        assert by_number["31B"].flight_status == ON_TIME
        assert by_number["31B"].client == "NEPTUNE E&P UK LIMITED"
        assert "77Q" not in by_number
