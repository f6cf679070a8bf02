"""One airframe of the fleet.

Stored in: ``aircraft_data.json`` (array of aircraft objects)
"""

from datetime import datetime

from pydantic import Field

from fleet.contracts.common import FleetModel
from fleet.contracts.enums import AircraftStatus


class Aircraft(FleetModel):
    """An aircraft with its descriptive, operational and acquisition data.

    ``flight_hours`` and ``flight_cycles`` only grow in real use, but that
    is not enforced here.  The back-reference lists are informational:
    the record store never uses them to cascade deletes.
    """

    id: int = Field(default=0, ge=0, description="0 until the store assigns one")
    registration_number: str = Field(..., description="e.g. UR-PSA")
    manufacturer: str = Field(..., description="e.g. Boeing, Airbus")
    model: str = Field(..., description="e.g. 737-800")

    type: str = ""
    year_of_manufacture: int = 0
    passenger_capacity: int = 0
    cargo_capacity: float = 0.0
    fuel_capacity: float = 0.0
    range: float = 0.0
    cruising_speed: float = 0.0

    flight_hours: int = 0
    flight_cycles: int = 0
    last_maintenance_date: datetime | None = None
    next_maintenance_date: datetime | None = None
    status: AircraftStatus = AircraftStatus.ACTIVE

    base_location: str = ""
    current_location: str = ""
    acquisition_date: datetime | None = None
    acquisition_cost: float = 0.0
    notes: str = ""

    maintenance_records: list["MaintenanceRecord"] = Field(default_factory=list)
    flight_schedules: list["FlightSchedule"] = Field(default_factory=list)
