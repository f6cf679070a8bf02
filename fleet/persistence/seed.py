"""First-run sample data: 22 aircraft, 5 maintenance records, 17 flights.

All dates are relative to the ``now`` passed in, so a fresh install always
shows flights today and maintenance due in the coming weeks.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Sequence

from fleet.contracts.aircraft import Aircraft
from fleet.contracts.enums import (
    AircraftStatus,
    FlightStatus,
    MaintenanceStatus,
    MaintenanceType,
)
from fleet.contracts.flight import FlightSchedule
from fleet.contracts.maintenance import MaintenanceRecord

PASSENGER = "Пасажирський"
CARGO = "Вантажний"
BUSINESS = "Бізнес-авіація"

KBP = "Київ (Бориспіль)"
IEV = "Київ (Жуляни)"
GML = "Київ (Антонов)"

# (id, registration, manufacturer, model, type, year, pax, hours, cycles, range_km,
#  status, acquired, last maintenance offset, next maintenance offset, base, current)
_AIRCRAFT_ROWS = [
    (1, "UR-PSA", "Boeing", "737-800", PASSENGER, 2015, 189, 12500, 8750, 5765,
     AircraftStatus.ACTIVE, (2015, 3, 15), -30, 60, KBP, KBP),
    (2, "UR-PSB", "Airbus", "A320", PASSENGER, 2018, 180, 8750, 5600, 6150,
     AircraftStatus.MAINTENANCE, (2018, 7, 20), -10, 80, "Львів", "Львів"),
    (3, "UR-PSC", "Embraer", "E190", PASSENGER, 2020, 100, 3200, 2800, 4450,
     AircraftStatus.ACTIVE, (2020, 12, 5), -20, 70, "Одеса", "Дніпро"),
    (4, "UR-AUA", "Airbus", "A330-300", PASSENGER, 2016, 277, 15600, 4800, 11750,
     AircraftStatus.ACTIVE, (2016, 9, 12), -45, 45, KBP, "Лондон"),
    (5, "UR-EMA", "Embraer", "E175", PASSENGER, 2019, 88, 4500, 3200, 3900,
     AircraftStatus.ACTIVE, (2019, 4, 8), -15, 75, "Харків", "Варшава"),
    (6, "UR-BOA", "Boeing", "777-200ER", PASSENGER, 2014, 314, 18200, 6100, 14260,
     AircraftStatus.ACTIVE, (2014, 11, 22), -60, 30, KBP, "Нью-Йорк"),
    (7, "UR-AIB", "Airbus", "A321", PASSENGER, 2017, 220, 11400, 7600, 7400,
     AircraftStatus.ACTIVE, (2017, 6, 14), -25, 65, "Одеса", "Стамбул"),
    (8, "UR-BOM", "Bombardier", "CRJ900", PASSENGER, 2021, 90, 2100, 1800, 2956,
     AircraftStatus.ACTIVE, (2021, 2, 18), -10, 80, "Дніпро", "Будапешт"),
    (9, "UR-ATR", "ATR", "72-600", PASSENGER, 2022, 78, 1200, 950, 1528,
     AircraftStatus.ACTIVE, (2022, 8, 5), -5, 85, "Львів", "Краків"),
    (10, "UR-BOB", "Boeing", "737-900", PASSENGER, 2016, 215, 9800, 6200, 5665,
     AircraftStatus.RESERVED, (2016, 1, 20), -40, 50, IEV, IEV),
    (11, "UR-AIC", "Airbus", "A319", PASSENGER, 2013, 156, 16800, 11200, 6850,
     AircraftStatus.GROUNDED, (2013, 5, 10), -90, -10, "Харків", "Харків"),
    (12, "UR-EMB", "Embraer", "E195", PASSENGER, 2018, 124, 6700, 4500, 4815,
     AircraftStatus.ACTIVE, (2018, 10, 3), -18, 72, "Одеса", "Афіни"),
    (13, "UR-CGA", "Boeing", "747-8F", CARGO, 2019, 0, 5600, 1800, 8130,
     AircraftStatus.ACTIVE, (2019, 11, 15), -35, 55, KBP, "Франкфурт"),
    (14, "UR-CGB", "Airbus", "A330-200F", CARGO, 2017, 0, 8900, 3200, 7400,
     AircraftStatus.ACTIVE, (2017, 3, 28), -50, 40, "Дніпро", "Доха"),
    (15, "UR-CGC", "Boeing", "777F", CARGO, 2020, 0, 3800, 1200, 9070,
     AircraftStatus.MAINTENANCE, (2020, 7, 12), -5, 85, KBP, KBP),
    (16, "UR-CGD", "Boeing", "767-300F", CARGO, 2015, 0, 12100, 4800, 6025,
     AircraftStatus.ACTIVE, (2015, 9, 8), -28, 62, "Львів", "Мілан"),
    (17, "UR-ANT", "Antonov", "An-124-100", CARGO, 2014, 88, 8500, 2200, 4800,
     AircraftStatus.ACTIVE, (2014, 4, 25), -42, 48, GML, "Лейпциг"),
    (18, "UR-CGE", "Boeing", "737-800BCF", CARGO, 2012, 0, 18600, 12400, 5765,
     AircraftStatus.ACTIVE, (2012, 6, 18), -55, 35, "Одеса", "Астана"),
    (19, "UR-CGF", "Airbus", "A310F", CARGO, 2008, 0, 22400, 8900, 8050,
     AircraftStatus.RETIRED, (2008, 2, 14), -120, -30, "Харків", "Харків"),
    (20, "UR-CGG", "Boeing", "757-200F", CARGO, 2010, 0, 19800, 7200, 7222,
     AircraftStatus.ACTIVE, (2010, 12, 1), -38, 52, "Дніпро", "Баку"),
    (21, "UR-BIZ", "Bombardier", "Global 6000", BUSINESS, 2019, 17, 2800, 1400, 11100,
     AircraftStatus.ACTIVE, (2019, 8, 22), -12, 78, IEV, "Женева"),
    (22, "UR-JET", "Embraer", "Legacy 650", BUSINESS, 2021, 14, 1100, 890, 7223,
     AircraftStatus.ACTIVE, (2021, 5, 30), -8, 82, KBP, "Дубай"),
]

# (id, aircraft id, aircraft index, type, description, scheduled offset,
#  actual offset, status, location, duration h, cost, performed by, created offset)
_MAINTENANCE_ROWS = [
    (1, 1, 0, MaintenanceType.ROUTINE, "Планове технічне обслуговування A-check",
     45, None, MaintenanceStatus.SCHEDULED, KBP, 8, 15000, "", -30),
    (2, 2, 1, MaintenanceType.EMERGENCY, "Позапланова заміна двигуна після виявлення несправності",
     -5, -2, MaintenanceStatus.IN_PROGRESS, "Львів", 24, 125000, "Львівське АТБ", -15),
    (3, 11, 10, MaintenanceType.HEAVY, "Капітальний ремонт C-check з заміною компонентів",
     -10, None, MaintenanceStatus.OVERDUE, "Харків", 120, 350000, "", -45),
    (4, 6, 5, MaintenanceType.ROUTINE, "Планове обслуговування B-check",
     30, None, MaintenanceStatus.SCHEDULED, KBP, 16, 28000, "", -20),
    (5, 15, 14, MaintenanceType.ROUTINE, "Технічне обслуговування вантажного відсіку",
     -3, 0, MaintenanceStatus.IN_PROGRESS, KBP, 12, 22000, "Київське АТБ", -10),
]

# (id, flight number, aircraft id, aircraft index, origin, destination, day offset,
#  departure hour, arrival hour (from the flight day's midnight), status,
#  passengers, cargo kg, fuel kg, notes, created offset)
_FLIGHT_ROWS = [
    (1, "PS101", 1, 0, KBP, "Париж", 0, 8, 11, FlightStatus.SCHEDULED, 165, 2500, 8500, "", -7),
    (2, "PS205", 3, 2, "Одеса", "Варшава", 0, 14, 16, FlightStatus.BOARDING, 85, 1200, 4200, "", -3),
    (3, "PS330", 4, 3, KBP, "Лондон", 1, 10, 13, FlightStatus.SCHEDULED, 245, 4200, 12500, "", -5),
    (4, "PS450", 5, 4, "Харків", "Варшава", 0, 15, 17, FlightStatus.DEPARTED, 72, 800, 3200, "", -2),
    (5, "PS777", 6, 5, KBP, "Нью-Йорк", 2, 22, 28, FlightStatus.SCHEDULED, 298, 8500, 28000, "", -10),
    (6, "PS188", 7, 6, "Одеса", "Стамбул", 0, 12, 14, FlightStatus.ARRIVED, 195, 2800, 6200, "", -4),
    (7, "PS290", 8, 7, "Дніпро", "Будапешт", 1, 7, 9, FlightStatus.SCHEDULED, 78, 950, 2800, "", -6),
    (8, "PS372", 9, 8, "Львів", "Краків", 0, 16, 17, FlightStatus.DELAYED, 65, 450, 1200,
     "Затримка через погодні умови", -1),
    (9, "PS195", 12, 11, "Одеса", "Афіни", 1, 11, 13, FlightStatus.SCHEDULED, 108, 1800, 4800, "", -8),
    (10, "CG747", 13, 12, KBP, "Франкфурт", 0, 2, 5, FlightStatus.DEPARTED, 0, 124000, 45000,
     "Спеціальний вантаж - медичне обладнання", -3),
    (11, "CG330", 14, 13, "Дніпро", "Доха", 1, 4, 10, FlightStatus.SCHEDULED, 0, 68000, 32000, "", -5),
    (12, "CG767", 16, 15, "Львів", "Мілан", 0, 18, 21, FlightStatus.SCHEDULED, 0, 45000, 18500, "", -4),
    (13, "AN124", 17, 16, GML, "Лейпциг", 2, 6, 10, FlightStatus.SCHEDULED, 12, 150000, 65000,
     "Перевезення спеціального промислового обладнання", -12),
    (14, "CH001", 21, 20, IEV, "Женева", 0, 13, 16, FlightStatus.SCHEDULED, 12, 500, 8200,
     "Приватний чартер - бізнес делегація", -2),
    (15, "CH002", 22, 21, KBP, "Дубай", 3, 9, 15, FlightStatus.SCHEDULED, 8, 300, 12500, "VIP чартер", -7),
    (16, "CH003", 10, 9, IEV, "Анталія", 4, 6, 9, FlightStatus.SCHEDULED, 189, 3200, 9500,
     "Туристичний чартер", -9),
    (17, "CH004", 7, 6, "Одеса", "Тель-Авів", 1, 20, 23, FlightStatus.SCHEDULED, 198, 2600, 7800,
     "Чартер для групової подорожі", -6),
]


def _midnight(now: datetime) -> datetime:
    return now.replace(hour=0, minute=0, second=0, microsecond=0)


def _snapshot(aircraft: Sequence[Aircraft], index: int) -> Aircraft | None:
    """Copy of the aircraft at *index*, or ``None`` if the list is shorter."""
    if index >= len(aircraft):
        return None
    return aircraft[index].model_copy(deep=True)


def seed_aircraft(now: datetime | None = None) -> list[Aircraft]:
    """Build the 22 sample aircraft (passenger, cargo and business jets)."""
    now = now or datetime.now()
    fleet: list[Aircraft] = []
    for (
        aircraft_id, registration, manufacturer, model, kind, year, pax, hours,
        cycles, range_km, status, acquired, last_offset, next_offset, base, current,
    ) in _AIRCRAFT_ROWS:
        fleet.append(Aircraft(
            id=aircraft_id,
            registration_number=registration,
            manufacturer=manufacturer,
            model=model,
            type=kind,
            year_of_manufacture=year,
            passenger_capacity=pax,
            flight_hours=hours,
            flight_cycles=cycles,
            range=range_km,
            status=status,
            acquisition_date=datetime(*acquired),
            last_maintenance_date=now + timedelta(days=last_offset),
            next_maintenance_date=now + timedelta(days=next_offset),
            base_location=base,
            current_location=current,
        ))
    return fleet


def seed_maintenance_records(
    aircraft: Sequence[Aircraft], now: datetime | None = None
) -> list[MaintenanceRecord]:
    """Build the 5 sample maintenance records against *aircraft*."""
    now = now or datetime.now()
    records: list[MaintenanceRecord] = []
    for (
        record_id, aircraft_id, index, kind, description, scheduled_offset,
        actual_offset, status, location, duration, cost, performed_by, created_offset,
    ) in _MAINTENANCE_ROWS:
        records.append(MaintenanceRecord(
            id=record_id,
            aircraft_id=aircraft_id,
            aircraft=_snapshot(aircraft, index),
            type=kind,
            description=description,
            scheduled_date=now + timedelta(days=scheduled_offset),
            actual_date=None if actual_offset is None else now + timedelta(days=actual_offset),
            status=status,
            location=location,
            duration_hours=duration,
            cost=cost,
            performed_by=performed_by,
            created_date=now + timedelta(days=created_offset),
        ))
    return records


def seed_flight_schedules(
    aircraft: Sequence[Aircraft], now: datetime | None = None
) -> list[FlightSchedule]:
    """Build the 17 sample flights: scheduled, cargo and charter."""
    now = now or datetime.now()
    today = _midnight(now)
    schedules: list[FlightSchedule] = []
    for (
        flight_id, number, aircraft_id, index, origin, destination, day_offset,
        dep_hour, arr_hour, status, pax, cargo, fuel, notes, created_offset,
    ) in _FLIGHT_ROWS:
        flight_day = today + timedelta(days=day_offset)
        schedules.append(FlightSchedule(
            id=flight_id,
            flight_number=number,
            aircraft_id=aircraft_id,
            aircraft=_snapshot(aircraft, index),
            origin=origin,
            destination=destination,
            flight_date=flight_day,
            departure_time=flight_day + timedelta(hours=dep_hour),
            arrival_time=flight_day + timedelta(hours=arr_hour),
            status=status,
            passenger_count=pax,
            cargo_weight=cargo,
            fuel_consumption=fuel,
            notes=notes,
            created_date=now + timedelta(days=created_offset),
        ))
    return schedules
