"""One maintenance job on one aircraft.

Held in memory only; never written to disk.
"""

from datetime import datetime

from pydantic import Field

from fleet.contracts.aircraft import Aircraft
from fleet.contracts.common import FleetModel
from fleet.contracts.enums import MaintenanceStatus, MaintenanceType


class MaintenanceRecord(FleetModel):
    """A maintenance job, scheduled or performed.

    ``aircraft`` is a **point-in-time snapshot** taken when the record was
    created.  It is never refreshed when the aircraft changes; use
    ``RecordStore.resolve_aircraft`` for the current state.
    """

    id: int = Field(default=0, ge=0)
    aircraft_id: int = 0
    aircraft: Aircraft | None = None

    type: MaintenanceType = MaintenanceType.ROUTINE
    description: str = ""
    scheduled_date: datetime | None = None
    actual_date: datetime | None = None
    status: MaintenanceStatus = MaintenanceStatus.SCHEDULED
    cost: float = 0.0
    performed_by: str = ""
    location: str = ""
    duration_hours: int = 0
    parts_replaced: str = ""
    notes: str = ""
    created_date: datetime = Field(default_factory=datetime.now)
