"""Tests for editor defaults and pre-save validation."""

from datetime import date, datetime, timedelta

import pytest

from fleet.contracts import Aircraft, AircraftStatus, FlightSchedule, MaintenanceRecord
from fleet.services import editing
from fleet.services.editing import ValidationFailure

NOW = datetime(2024, 5, 1, 10, 30)
TODAY = datetime(2024, 5, 1)


def _valid_aircraft(**overrides) -> Aircraft:
    data = dict(
        registration_number="UR-NEW",
        manufacturer="Airbus",
        model="A320neo",
        year_of_manufacture=2023,
        base_location="Львів",
    )
    data.update(overrides)
    return Aircraft(**data)


def _valid_flight(**overrides) -> FlightSchedule:
    data = dict(
        flight_number="PS501",
        origin="Київ (Бориспіль)",
        destination="Рига",
        aircraft_id=3,
        aircraft=_valid_aircraft(id=3),
        flight_date=TODAY,
    )
    data.update(overrides)
    return FlightSchedule(**data)


class TestAircraftEditing:
    def test_draft(self):
        draft = editing.new_aircraft_draft(NOW)
        assert draft.id == 0
        assert draft.status == AircraftStatus.ACTIVE
        assert draft.year_of_manufacture == 2024
        assert draft.current_location == draft.base_location == "Київ (Бориспіль)"
        assert draft.acquisition_date == TODAY
        assert draft.next_maintenance_date == TODAY + timedelta(days=90)

    def test_defaults_fill_gaps(self):
        aircraft = editing.apply_aircraft_defaults(_valid_aircraft(), NOW)
        assert aircraft.current_location == "Львів"
        assert aircraft.last_maintenance_date == NOW - timedelta(days=30)
        assert aircraft.next_maintenance_date == NOW + timedelta(days=90)

    def test_defaults_keep_existing_values(self):
        last = datetime(2024, 1, 1)
        aircraft = _valid_aircraft(current_location="Краків", last_maintenance_date=last)
        editing.apply_aircraft_defaults(aircraft, NOW)
        assert aircraft.current_location == "Краків"
        assert aircraft.last_maintenance_date == last

    def test_valid_aircraft_passes(self):
        editing.validate_aircraft(_valid_aircraft())

    @pytest.mark.parametrize(
        "field, value",
        [
            ("registration_number", ""),
            ("registration_number", "   "),
            ("manufacturer", ""),
            ("model", " "),
            ("year_of_manufacture", 1900),
            ("year_of_manufacture", 0),
        ],
    )
    def test_invalid_aircraft(self, field, value):
        with pytest.raises(ValidationFailure) as exc_info:
            editing.validate_aircraft(_valid_aircraft(**{field: value}))
        assert exc_info.value.field == field

    def test_validation_failure_is_value_error(self):
        with pytest.raises(ValueError):
            editing.validate_aircraft(_valid_aircraft(model=""))


class TestFlightEditing:
    def test_draft(self):
        draft = editing.new_flight_draft(NOW)
        assert draft.flight_date == TODAY
        assert draft.departure_time == TODAY + timedelta(hours=9)
        assert draft.arrival_time == TODAY + timedelta(hours=12)
        assert draft.origin == "Київ (Бориспіль)"
        assert draft.aircraft is None

    def test_combine_date_and_time(self):
        assert editing.combine_date_and_time(date(2024, 5, 1), "14:25") == datetime(2024, 5, 1, 14, 25)
        assert editing.combine_date_and_time(datetime(2024, 5, 1, 23), "07:05:30") == datetime(
            2024, 5, 1, 7, 5, 30
        )

    @pytest.mark.parametrize("clock", ["", "25:00", "noon", "14-25"])
    def test_combine_rejects_bad_clock(self, clock):
        assert editing.combine_date_and_time(date(2024, 5, 1), clock) is None

    def test_combine_without_day(self):
        assert editing.combine_date_and_time(None, "10:00") is None

    def test_set_times_on_flight_date(self):
        flight = _valid_flight()
        assert editing.set_departure_time(flight, "06:40")
        assert editing.set_arrival_time(flight, "08:15")
        assert flight.departure_time == TODAY + timedelta(hours=6, minutes=40)
        assert flight.arrival_time == TODAY + timedelta(hours=8, minutes=15)

    def test_bad_time_keeps_previous_value(self):
        flight = _valid_flight(departure_time=TODAY + timedelta(hours=9))
        assert not editing.set_departure_time(flight, "9 o'clock")
        assert flight.departure_time == TODAY + timedelta(hours=9)

    def test_valid_flight_passes(self):
        editing.validate_flight(_valid_flight())

    @pytest.mark.parametrize("field", ["flight_number", "origin", "destination"])
    def test_blank_text_fields(self, field):
        with pytest.raises(ValidationFailure) as exc_info:
            editing.validate_flight(_valid_flight(**{field: " "}))
        assert exc_info.value.field == field

    def test_aircraft_required(self):
        with pytest.raises(ValidationFailure) as exc_info:
            editing.validate_flight(_valid_flight(aircraft_id=0, aircraft=None))
        assert exc_info.value.field == "aircraft"

    def test_aircraft_id_without_snapshot_is_rejected(self):
        with pytest.raises(ValidationFailure) as exc_info:
            editing.validate_flight(_valid_flight(aircraft_id=5, aircraft=None))
        assert exc_info.value.field == "aircraft"

    def test_snapshot_must_match_aircraft_id(self):
        with pytest.raises(ValidationFailure) as exc_info:
            editing.validate_flight(_valid_flight(aircraft_id=5, aircraft=_valid_aircraft(id=7)))
        assert exc_info.value.field == "aircraft"


class TestMaintenanceEditing:
    def test_draft(self):
        draft = editing.new_maintenance_draft(NOW)
        assert draft.scheduled_date == NOW + timedelta(days=7)
        assert draft.location == "Головна база"
        assert draft.created_date == NOW
        assert draft.id == 0

    def test_attach_aircraft_takes_snapshot(self):
        aircraft = _valid_aircraft(id=8)
        record = editing.attach_aircraft(MaintenanceRecord(), aircraft)

        assert record.aircraft_id == 8
        assert record.aircraft == aircraft
        aircraft.current_location = "Париж"
        assert record.aircraft.current_location == ""

    def test_attached_flight_passes_validation(self):
        flight = editing.attach_aircraft(_valid_flight(aircraft_id=0), _valid_aircraft(id=2))
        editing.validate_flight(flight)
        assert flight.aircraft_id == 2
