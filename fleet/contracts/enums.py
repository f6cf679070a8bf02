"""Enumerations shared across all fleet contracts."""

from enum import Enum


class AircraftStatus(str, Enum):
    """Operational state of an aircraft."""
    ACTIVE = "Active"
    MAINTENANCE = "Maintenance"
    GROUNDED = "Grounded"
    RESERVED = "Reserved"
    RETIRED = "Retired"


class MaintenanceType(str, Enum):
    """Category of a maintenance job."""
    ROUTINE = "Routine"
    SCHEDULED = "Scheduled"
    UNSCHEDULED = "Unscheduled"
    A_CHECK = "ACheck"
    B_CHECK = "BCheck"
    C_CHECK = "CCheck"
    D_CHECK = "DCheck"
    HEAVY = "Heavy"
    EMERGENCY = "Emergency"
    MODIFICATION = "Modification"


class MaintenanceStatus(str, Enum):
    """Lifecycle of a maintenance record."""
    SCHEDULED = "Scheduled"
    IN_PROGRESS = "InProgress"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"
    OVERDUE = "Overdue"


class FlightStatus(str, Enum):
    """Lifecycle of a scheduled flight."""
    SCHEDULED = "Scheduled"
    BOARDING = "Boarding"
    DEPARTED = "Departed"
    IN_FLIGHT = "InFlight"
    ARRIVED = "Arrived"
    CANCELLED = "Cancelled"
    DELAYED = "Delayed"
