"""Editor-side defaults and validation for new or edited records.

These run *before* an upsert.  The record store itself never validates;
it will happily store whatever it is given.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta

from fleet.contracts.aircraft import Aircraft
from fleet.contracts.enums import (
    AircraftStatus,
    FlightStatus,
    MaintenanceStatus,
    MaintenanceType,
)
from fleet.contracts.flight import FlightSchedule
from fleet.contracts.maintenance import MaintenanceRecord

DEFAULT_BASE = "Київ (Бориспіль)"
DEFAULT_AIRCRAFT_TYPE = "Пасажирський"
DEFAULT_MAINTENANCE_LOCATION = "Головна база"
DEFAULT_MAINTENANCE_DESCRIPTION = "Планове технічне обслуговування"

MIN_YEAR_OF_MANUFACTURE = 1900


class ValidationFailure(ValueError):
    """A record is not fit to be saved."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


def _today(now: datetime) -> datetime:
    return datetime.combine(now.date(), time())


def _require_text(value: str | None, field: str, message: str) -> None:
    if value is None or not value.strip():
        raise ValidationFailure(field, message)


# ------------------------------------------------------------------
# Aircraft
# ------------------------------------------------------------------


def new_aircraft_draft(now: datetime | None = None) -> Aircraft:
    """Blank aircraft as offered by the "add aircraft" form."""
    now = now or datetime.now()
    today = _today(now)
    return Aircraft(
        registration_number="",
        manufacturer="",
        model="",
        type=DEFAULT_AIRCRAFT_TYPE,
        year_of_manufacture=now.year,
        status=AircraftStatus.ACTIVE,
        base_location=DEFAULT_BASE,
        current_location=DEFAULT_BASE,
        acquisition_date=today,
        next_maintenance_date=today + timedelta(days=90),
    )


def apply_aircraft_defaults(aircraft: Aircraft, now: datetime | None = None) -> Aircraft:
    """Fill gaps left by the form, in place; returns *aircraft*."""
    now = now or datetime.now()
    if not aircraft.current_location.strip():
        aircraft.current_location = aircraft.base_location
    if aircraft.last_maintenance_date is None:
        aircraft.last_maintenance_date = now - timedelta(days=30)
    if aircraft.next_maintenance_date is None:
        aircraft.next_maintenance_date = now + timedelta(days=90)
    return aircraft


def validate_aircraft(aircraft: Aircraft) -> None:
    _require_text(aircraft.registration_number, "registration_number",
                  "Реєстраційний номер не може бути пустим")
    _require_text(aircraft.manufacturer, "manufacturer", "Виробник не може бути пустим")
    _require_text(aircraft.model, "model", "Модель не може бути пустою")
    if aircraft.year_of_manufacture <= MIN_YEAR_OF_MANUFACTURE:
        raise ValidationFailure(
            "year_of_manufacture",
            f"Рік випуску має бути більшим за {MIN_YEAR_OF_MANUFACTURE}",
        )


# ------------------------------------------------------------------
# Flights
# ------------------------------------------------------------------


def new_flight_draft(now: datetime | None = None) -> FlightSchedule:
    """Blank flight for today, 09:00–12:00 out of the main base."""
    today = _today(now or datetime.now())
    return FlightSchedule(
        flight_number="",
        origin=DEFAULT_BASE,
        destination="",
        flight_date=today,
        departure_time=today + timedelta(hours=9),
        arrival_time=today + timedelta(hours=12),
        status=FlightStatus.SCHEDULED,
        created_date=now or datetime.now(),
    )


def combine_date_and_time(day: date | datetime | None, clock: str) -> datetime | None:
    """Join *day* with an ``HH:MM`` (or ``HH:MM:SS``) string.

    Returns ``None`` if either part is missing or the clock does not parse.
    """
    if day is None or not clock:
        return None
    if isinstance(day, datetime):
        day = day.date()
    for fmt in ("%H:%M", "%H:%M:%S"):
        try:
            parsed = datetime.strptime(clock.strip(), fmt).time()
        except ValueError:
            continue
        return datetime.combine(day, parsed)
    return None


def set_departure_time(schedule: FlightSchedule, clock: str) -> bool:
    """Set departure from a clock string on ``flight_date``; keep the old value if unparsable."""
    combined = combine_date_and_time(schedule.flight_date, clock)
    if combined is None:
        return False
    schedule.departure_time = combined
    return True


def set_arrival_time(schedule: FlightSchedule, clock: str) -> bool:
    combined = combine_date_and_time(schedule.flight_date, clock)
    if combined is None:
        return False
    schedule.arrival_time = combined
    return True


def validate_flight(schedule: FlightSchedule) -> None:
    _require_text(schedule.flight_number, "flight_number", "Номер рейсу не може бути пустим")
    _require_text(schedule.origin, "origin", "Пункт відправлення не може бути пустим")
    _require_text(schedule.destination, "destination", "Пункт призначення не може бути пустим")
    if schedule.aircraft is None:
        raise ValidationFailure("aircraft", "Будь ласка, оберіть літак для рейсу")
    if schedule.aircraft.id != schedule.aircraft_id:
        raise ValidationFailure("aircraft", "Обраний літак не відповідає рейсу")


# ------------------------------------------------------------------
# Maintenance
# ------------------------------------------------------------------


def new_maintenance_draft(now: datetime | None = None) -> MaintenanceRecord:
    now = now or datetime.now()
    return MaintenanceRecord(
        type=MaintenanceType.ROUTINE,
        description=DEFAULT_MAINTENANCE_DESCRIPTION,
        scheduled_date=now + timedelta(days=7),
        status=MaintenanceStatus.SCHEDULED,
        location=DEFAULT_MAINTENANCE_LOCATION,
        created_date=now,
    )


def attach_aircraft(
    entity: FlightSchedule | MaintenanceRecord, aircraft: Aircraft
) -> FlightSchedule | MaintenanceRecord:
    """Point *entity* at *aircraft* and take a fresh snapshot of it."""
    entity.aircraft_id = aircraft.id
    entity.aircraft = aircraft.model_copy(deep=True)
    return entity
