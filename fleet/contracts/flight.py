"""A planned or flown flight of one aircraft.

Stored in: ``flight_schedules_data.json`` (array, each with an embedded
aircraft snapshot)
"""

from datetime import datetime

from pydantic import Field

from fleet.contracts.aircraft import Aircraft
from fleet.contracts.common import FleetModel
from fleet.contracts.enums import FlightStatus


class FlightSchedule(FleetModel):
    """A flight on a calendar day.

    ``flight_date`` is the day the flight belongs to.  ``departure_time``
    and ``arrival_time`` are full timestamps whose date part may differ
    from ``flight_date`` (overnight arrivals, or clock values re-combined
    by an editor).  Day filtering always uses ``flight_date``.

    ``aircraft`` is a frozen snapshot taken at creation time, never
    auto-refreshed.
    """

    id: int = Field(default=0, ge=0)
    aircraft_id: int = 0
    aircraft: Aircraft | None = None

    flight_number: str = Field(..., description="e.g. PS101")
    origin: str = Field(...)
    destination: str = Field(...)

    flight_date: datetime | None = None
    departure_time: datetime | None = None
    arrival_time: datetime | None = None
    status: FlightStatus = FlightStatus.SCHEDULED

    passenger_count: int = 0
    cargo_weight: float = 0.0
    fuel_consumption: float = 0.0
    crew_members: str = ""
    notes: str = ""
    created_date: datetime = Field(default_factory=datetime.now)
