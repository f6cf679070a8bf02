"""Runtime settings read from the environment (and an optional ``.env``)."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

DEFAULT_AIRCRAFT_FILE = "aircraft_data.json"
DEFAULT_SCHEDULES_FILE = "flight_schedules_data.json"


class StoreSettings(BaseModel):
    """Where the record store keeps its files and how it behaves."""

    data_dir: Path = Field(default=Path("."), description="Directory holding both data files")
    aircraft_file: str = DEFAULT_AIRCRAFT_FILE
    schedules_file: str = DEFAULT_SCHEDULES_FILE
    simulated_latency_ms: int = Field(
        default=0, ge=0, description="Artificial delay per operation, for UI testing"
    )
    log_level: str = "INFO"

    @property
    def aircraft_path(self) -> Path:
        return self.data_dir / self.aircraft_file

    @property
    def schedules_path(self) -> Path:
        return self.data_dir / self.schedules_file

    @property
    def latency_seconds(self) -> float:
        return self.simulated_latency_ms / 1000.0

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> "StoreSettings":
        """Build settings from ``FLEET_*`` variables, loading ``.env`` first.

        Values already in the environment win over the file.
        """
        load_dotenv(env_file)
        return cls(
            data_dir=Path(os.getenv("FLEET_DATA_DIR", ".")),
            aircraft_file=os.getenv("FLEET_AIRCRAFT_FILE", DEFAULT_AIRCRAFT_FILE),
            schedules_file=os.getenv("FLEET_SCHEDULES_FILE", DEFAULT_SCHEDULES_FILE),
            simulated_latency_ms=int(os.getenv("FLEET_SIMULATED_LATENCY_MS", "0")),
            log_level=os.getenv("FLEET_LOG_LEVEL", "INFO").upper(),
        )
