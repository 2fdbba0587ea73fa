"""Unit tests for flight models."""

from datetime import date, datetime

from rotorschedule.flights.models import CommonFlight, ScheduleResult, split_routing
from rotorschedule.reference import DELAYED, FlightStatus, Operator


def _make_flight(**overrides) -> CommonFlight:
    values = dict(
        id="07:0076AEGPD / FUL / EGPD",
        flight_number="76A",
        routing="EGPD / FUL / EGPD",
        routing_components=["EGPD", "FUL", "EGPD"],
        flight_status=DELAYED,
        operator=Operator.BHL,
        client="REPSOL SINOPEC RESOURCES UK LTD",
        std="07:00",
        eta="09:39",
        atd="07:02",
        std_date=datetime(2025, 2, 17, 7, 0),
        atd_date=datetime(2025, 2, 17, 7, 2),
        eta_date=datetime(2025, 2, 17, 9, 39),
        captured_at=datetime(2025, 2, 17, 6, 30),
    )
    values.update(overrides)
    return CommonFlight(**values)


class TestSplitRouting:
    """Tests for split_routing."""

    def test_split(self) -> None:
        assert split_routing("EGPD / FUL / EGPD", " / ") == ["EGPD", "FUL", "EGPD"]

    def test_single_waypoint(self) -> None:
        assert split_routing("CPC1", " - ") == ["CPC1"]

    def test_empty(self) -> None:
        assert split_routing("", " / ") == []


class TestCommonFlight:
    """Tests for CommonFlight."""

    def test_captured_at_defaults_to_now(self) -> None:
        before = datetime.now()
        flight = CommonFlight(
            id="X",
            flight_number="X",
            routing="",
            routing_components=[],
            flight_status=FlightStatus.unknown(None),
            operator=Operator.CHC,
            client="",
            std="N/A",
            eta="N/A",
        )
        assert before <= flight.captured_at <= datetime.now()
        assert flight.is_today()

    def test_is_today(self) -> None:
        flight = _make_flight()
        assert flight.is_today(date(2025, 2, 17))
        assert not flight.is_today(date(2025, 2, 18))

    def test_is_late(self) -> None:
        assert _make_flight().is_late is True
        assert _make_flight(atd_date=None).is_late is False
        assert _make_flight(atd_date=datetime(2025, 2, 17, 6, 58)).is_late is False

    def test_dict_conversion(self) -> None:
        flight = _make_flight(flight_status=FlightStatus.unknown("Weather hold"))
        data = flight.to_dict()
        assert data["operator"] == "BHL"
        assert data["flight_status"] == {"kind": "unknown", "original_text": "Weather hold"}
        assert data["std_date"] == "2025-02-17T07:00:00"
        assert data["ata"] is None
        assert CommonFlight.from_dict(data) == flight


class TestScheduleResult:
    """Tests for ScheduleResult."""

    def test_to_dataframe_empty(self) -> None:
        df = ScheduleResult(flights=[]).to_dataframe()
        assert len(df) == 0
        assert "flight_number" in df.columns
        assert "late" in df.columns

    def test_to_dataframe_with_flights(self) -> None:
        df = ScheduleResult(flights=[_make_flight()], day=date(2025, 2, 17)).to_dataframe()
        assert len(df) == 1
        row = df.iloc[0]
        assert row["operator"] == "BHL"
        assert row["flight_number"] == "76A"
        assert row["status"] == "Flight delayed"
        assert bool(row["late"]) is True
