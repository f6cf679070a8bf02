"""Tests for Aircraft, MaintenanceRecord, FlightSchedule and derived contracts."""

from datetime import datetime

from fleet.contracts import (
    Aircraft,
    AircraftStatus,
    ChartData,
    FleetStatistics,
    FlightSchedule,
    FlightStatus,
    MaintenanceRecord,
    MaintenanceStatus,
    MaintenanceType,
    chart_series,
)


def _aircraft(**overrides) -> Aircraft:
    data = dict(registration_number="UR-TST", manufacturer="Boeing", model="737")
    data.update(overrides)
    return Aircraft(**data)


class TestAircraft:
    def test_defaults(self):
        aircraft = _aircraft()
        assert aircraft.id == 0
        assert aircraft.status == AircraftStatus.ACTIVE
        assert aircraft.last_maintenance_date is None
        assert aircraft.maintenance_records == []
        assert aircraft.flight_schedules == []

    def test_status_stored_as_string(self):
        aircraft = _aircraft(status=AircraftStatus.GROUNDED)
        assert aircraft.status == "Grounded"
        assert aircraft.status == AircraftStatus.GROUNDED

    def test_serializes_camel_case(self):
        data = _aircraft(flight_hours=120).to_json_dict()
        assert data["registrationNumber"] == "UR-TST"
        assert data["flightHours"] == 120
        assert data["status"] == "Active"
        assert "registration_number" not in data

    def test_accepts_either_field_name(self):
        by_alias = Aircraft.from_json_dict(
            {"registrationNumber": "UR-A", "manufacturer": "Airbus", "model": "A320"}
        )
        by_name = Aircraft.from_json_dict(
            {"registration_number": "UR-A", "manufacturer": "Airbus", "model": "A320"}
        )
        assert by_alias == by_name

    def test_roundtrip_preserves_dates(self):
        aircraft = _aircraft(
            id=4,
            next_maintenance_date=datetime(2024, 7, 1, 9, 15, 30, 123456),
            acquisition_date=datetime(2016, 9, 12),
        )
        restored = Aircraft.from_json_dict(aircraft.to_json_dict())
        assert restored == aircraft

    def test_back_references_hold_children(self):
        aircraft = _aircraft(id=1)
        aircraft.maintenance_records.append(
            MaintenanceRecord(id=1, aircraft_id=1, description="A-check")
        )
        data = aircraft.to_json_dict()
        assert data["maintenanceRecords"][0]["description"] == "A-check"
        assert Aircraft.from_json_dict(data) == aircraft


class TestMaintenanceRecord:
    def test_defaults(self):
        record = MaintenanceRecord()
        assert record.type == MaintenanceType.ROUTINE
        assert record.status == MaintenanceStatus.SCHEDULED
        assert record.actual_date is None
        assert record.aircraft is None
        assert isinstance(record.created_date, datetime)

    def test_ten_maintenance_types(self):
        assert len(MaintenanceType) == 10
        assert MaintenanceType.C_CHECK.value == "CCheck"


class TestFlightSchedule:
    def test_embeds_aircraft_snapshot(self):
        schedule = FlightSchedule(
            id=3,
            aircraft_id=4,
            aircraft=_aircraft(id=4),
            flight_number="PS330",
            origin="Київ (Бориспіль)",
            destination="Лондон",
            flight_date=datetime(2024, 5, 2),
            status=FlightStatus.IN_FLIGHT,
        )
        data = schedule.to_json_dict()
        assert data["aircraftId"] == 4
        assert data["aircraft"]["registrationNumber"] == "UR-TST"
        assert data["status"] == "InFlight"

        restored = FlightSchedule.from_json_dict(data)
        assert restored == schedule
        assert restored.aircraft.id == 4


class TestDerived:
    def test_statistics_defaults(self):
        stats = FleetStatistics()
        assert stats.total_aircraft == 0
        assert stats.total_maintenance_cost == 0.0

    def test_chart_series_keeps_order(self):
        series = chart_series({"Boeing": 3, "Airbus": 2})
        assert series == [
            ChartData(label="Boeing", value=3),
            ChartData(label="Airbus", value=2),
        ]

    def test_chart_series_empty(self):
        assert chart_series({}) == []
