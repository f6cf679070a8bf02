"""Fleet data contracts — Pydantic v2 models for the fleet record store.

Data authority
--------------

**JSON files** (source of truth, rewritten whole on every mutation):
- ``Aircraft`` — ``aircraft_data.json``
- ``FlightSchedule`` — ``flight_schedules_data.json`` (embeds an aircraft snapshot)

**Memory only**:
- ``MaintenanceRecord`` — seeded on first run, never written to disk

Calculated (never persisted)
----------------------------
- ``FleetStatistics`` — counters over the current collections
- ``ChartData`` — label/value points built from grouping results
"""

from fleet.contracts.enums import (
    AircraftStatus,
    FlightStatus,
    MaintenanceStatus,
    MaintenanceType,
)
from fleet.contracts.common import FleetModel
from fleet.contracts.aircraft import Aircraft
from fleet.contracts.maintenance import MaintenanceRecord
from fleet.contracts.flight import FlightSchedule
from fleet.contracts.statistics import ChartData, FleetStatistics, chart_series

# Aircraft refers back to its children by forward reference.
Aircraft.model_rebuild()
MaintenanceRecord.model_rebuild()
FlightSchedule.model_rebuild()

__all__ = [
    # Enums
    "AircraftStatus",
    "FlightStatus",
    "MaintenanceStatus",
    "MaintenanceType",
    # Common
    "FleetModel",
    # Domain models
    "Aircraft",
    "MaintenanceRecord",
    "FlightSchedule",
    # Derived
    "ChartData",
    "FleetStatistics",
    "chart_series",
]
