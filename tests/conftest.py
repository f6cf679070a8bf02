"""Shared fixtures: a fixed clock and record stores backed by ``tmp_path``."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from fleet.contracts import Aircraft, FlightSchedule
from fleet.persistence.json_file import JsonCollectionFile
from fleet.services.record_store import RecordStore

NOW = datetime(2024, 5, 1, 10, 30)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def aircraft_file(tmp_path: Path) -> JsonCollectionFile[Aircraft]:
    return JsonCollectionFile(Aircraft, tmp_path / "aircraft_data.json")


@pytest.fixture
def schedules_file(tmp_path: Path) -> JsonCollectionFile[FlightSchedule]:
    return JsonCollectionFile(FlightSchedule, tmp_path / "flight_schedules_data.json")


@pytest.fixture
def make_store(aircraft_file, schedules_file):
    """Factory for stores sharing the same two files (simulates restarts)."""

    def _make() -> RecordStore:
        return RecordStore(aircraft_file, schedules_file, clock=lambda: NOW)

    return _make


@pytest.fixture
async def store(make_store) -> RecordStore:
    """A store seeded on first run (22 aircraft, 17 flights, 5 maintenance records)."""
    s = make_store()
    await s.load()
    return s


@pytest.fixture
async def empty_store(aircraft_file, schedules_file, make_store) -> RecordStore:
    """A store whose files exist but hold empty arrays."""
    aircraft_file.path.write_text("[]", encoding="utf-8")
    schedules_file.path.write_text("[]", encoding="utf-8")
    s = make_store()
    await s.load()
    return s
