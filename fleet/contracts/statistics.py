"""Derived views, computed on demand, never persisted."""

from collections.abc import Mapping

from pydantic import BaseModel, Field


class FleetStatistics(BaseModel):
    """Snapshot of fleet-wide counters at the time of the call."""

    total_aircraft: int = Field(default=0, ge=0)
    active_aircraft: int = Field(default=0, ge=0)
    maintenance_aircraft: int = Field(default=0, ge=0)
    total_flight_hours: int = 0
    total_maintenance_cost: float = 0.0


class ChartData(BaseModel):
    """One labelled point of a chart series."""

    label: str = ""
    value: float = 0.0


def chart_series(counts: Mapping[str, int | float]) -> list[ChartData]:
    """Turn a grouping result into chart points, keeping mapping order."""
    return [ChartData(label=label, value=value) for label, value in counts.items()]
