"""In-memory record store for aircraft, maintenance records and flights.

The store owns three plain lists and is the only writer to them.  Aircraft
and flight schedules are mirrored to JSON files after every mutation;
maintenance records live in memory only.

Policy on missing ids: updating or deleting an id that is not present is a
silent no-op (logged at debug level), never an error.  Persistence faults
are logged and swallowed; the in-memory change is kept.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import date, datetime
from typing import Callable, TypeVar

from fleet.contracts.aircraft import Aircraft
from fleet.contracts.enums import AircraftStatus
from fleet.contracts.flight import FlightSchedule
from fleet.contracts.maintenance import MaintenanceRecord
from fleet.contracts.statistics import FleetStatistics
from fleet.persistence.errors import PersistenceError
from fleet.persistence.json_file import JsonCollectionFile
from fleet.persistence.seed import (
    seed_aircraft,
    seed_flight_schedules,
    seed_maintenance_records,
)
from fleet.services import queries

logger = logging.getLogger(__name__)

E = TypeVar("E", Aircraft, FlightSchedule, MaintenanceRecord)


def _copies(items: list[E]) -> list[E]:
    return [item.model_copy(deep=True) for item in items]


class RecordStore:
    """Authoritative holder of the fleet collections.

    Construct it explicitly and pass it to whatever needs it; call
    ``await store.load()`` once before use.  Every operation is a
    coroutine so a UI loop never blocks on disk I/O.  Mutations are
    serialized by an ``asyncio.Lock``.
    """

    def __init__(
        self,
        aircraft_file: JsonCollectionFile[Aircraft],
        schedules_file: JsonCollectionFile[FlightSchedule],
        *,
        latency: float = 0.0,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._aircraft_file = aircraft_file
        self._schedules_file = schedules_file
        self._latency = latency
        self._clock = clock
        self._lock = asyncio.Lock()

        self._aircraft: list[Aircraft] = []
        self._maintenance_records: list[MaintenanceRecord] = []
        self._flight_schedules: list[FlightSchedule] = []

    # ------------------------------------------------------------------
    # Startup
    # ------------------------------------------------------------------

    async def load(self) -> None:
        """Load both files, seeding and writing whichever one is missing.

        If any file is unreadable, all collections fall back to seed data
        in memory and nothing is written.
        """
        async with self._lock:
            aircraft, records, schedules = await asyncio.to_thread(self._load_or_seed)
            # Swapped in on the loop thread so readers never see a partial load.
            self._aircraft = aircraft
            self._maintenance_records = records
            self._flight_schedules = schedules

    def _load_or_seed(
        self,
    ) -> tuple[list[Aircraft], list[MaintenanceRecord], list[FlightSchedule]]:
        now = self._clock()
        aircraft: list[Aircraft] = []
        records: list[MaintenanceRecord] = []
        schedules: list[FlightSchedule] = []

        try:
            if self._aircraft_file.exists():
                aircraft = self._aircraft_file.load()
            else:
                logger.info("No aircraft file at %s, seeding sample fleet", self._aircraft_file.path)
                aircraft = seed_aircraft(now)
                self._save(self._aircraft_file, aircraft)

            if self._schedules_file.exists():
                schedules = self._schedules_file.load()
            else:
                logger.info(
                    "No flight schedule file at %s, seeding sample flights",
                    self._schedules_file.path,
                )
                records = seed_maintenance_records(aircraft, now)
                schedules = seed_flight_schedules(aircraft, now)
                self._save(self._schedules_file, schedules)
        except (PersistenceError, OSError) as exc:
            logger.error("Failed to load fleet data: %s", exc)
            logger.warning("Falling back to in-memory sample data")
            aircraft = seed_aircraft(now)
            records = seed_maintenance_records(aircraft, now)
            schedules = seed_flight_schedules(aircraft, now)

        return aircraft, records, schedules

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    async def _simulate_latency(self) -> None:
        if self._latency > 0:
            await asyncio.sleep(self._latency)

    @staticmethod
    def _save(file: JsonCollectionFile, items: list) -> None:
        """Write a collection, logging instead of raising on failure."""
        try:
            file.save(items)
        except PersistenceError:
            logger.exception("Failed to persist %s", file.path)

    async def _persist(self, file: JsonCollectionFile, items: list) -> None:
        snapshot = list(items)
        await asyncio.to_thread(self._save, file, snapshot)

    @staticmethod
    def _upsert(items: list[E], entity: E, kind: str) -> bool:
        """Insert (``id == 0``) or replace in place.  Returns ``False`` on a no-op."""
        if entity.id == 0:
            entity.id = queries.next_id(items)
            items.append(entity.model_copy(deep=True))
            logger.info("Added %s id=%d, total %d", kind, entity.id, len(items))
            return True

        position = queries.index_of_id(items, entity.id)
        if position is None:
            logger.debug("No %s with id=%d to update, ignoring", kind, entity.id)
            return False
        items[position] = entity.model_copy(deep=True)
        logger.info("Updated %s id=%d", kind, entity.id)
        return True

    # ------------------------------------------------------------------
    # Aircraft
    # ------------------------------------------------------------------

    async def list_aircraft(self) -> list[Aircraft]:
        await self._simulate_latency()
        return _copies(self._aircraft)

    async def get_aircraft(self, aircraft_id: int) -> Aircraft | None:
        await self._simulate_latency()
        found = queries.find_by_id(self._aircraft, aircraft_id)
        return found.model_copy(deep=True) if found is not None else None

    async def list_active_aircraft(self) -> list[Aircraft]:
        """Aircraft that can be assigned to a new flight."""
        await self._simulate_latency()
        return _copies([a for a in self._aircraft if a.status == AircraftStatus.ACTIVE])

    async def upsert_aircraft(self, aircraft: Aircraft) -> Aircraft:
        """Insert or replace by id, then rewrite the aircraft file.

        A new id is written back onto *aircraft*, which is also returned.
        """
        await self._simulate_latency()
        async with self._lock:
            self._upsert(self._aircraft, aircraft, "aircraft")
            await self._persist(self._aircraft_file, self._aircraft)
        return aircraft

    async def delete_aircraft(self, aircraft_id: int) -> None:
        await self._simulate_latency()
        async with self._lock:
            position = queries.index_of_id(self._aircraft, aircraft_id)
            if position is None:
                logger.debug("No aircraft with id=%d to delete, ignoring", aircraft_id)
            else:
                del self._aircraft[position]
                logger.info("Deleted aircraft id=%d, total %d", aircraft_id, len(self._aircraft))
            await self._persist(self._aircraft_file, self._aircraft)

    # ------------------------------------------------------------------
    # Flight schedules
    # ------------------------------------------------------------------

    async def list_flight_schedules(self) -> list[FlightSchedule]:
        await self._simulate_latency()
        return _copies(self._flight_schedules)

    async def get_flight_schedules_for_date(self, day: date | datetime) -> list[FlightSchedule]:
        """Flights whose ``flight_date`` is on *day*, whatever their clock times."""
        await self._simulate_latency()
        return _copies(queries.schedules_on(self._flight_schedules, day))

    async def upsert_flight_schedule(self, schedule: FlightSchedule) -> FlightSchedule:
        await self._simulate_latency()
        async with self._lock:
            self._upsert(self._flight_schedules, schedule, "flight schedule")
            await self._persist(self._schedules_file, self._flight_schedules)
        return schedule

    async def delete_flight_schedule(self, schedule: FlightSchedule) -> None:
        """Remove every schedule with the same id as *schedule* (not by identity)."""
        await self._simulate_latency()
        async with self._lock:
            before = len(self._flight_schedules)
            self._flight_schedules[:] = [
                s for s in self._flight_schedules if s.id != schedule.id
            ]
            if len(self._flight_schedules) == before:
                logger.debug("No flight schedule with id=%d to delete, ignoring", schedule.id)
            await self._persist(self._schedules_file, self._flight_schedules)

    # ------------------------------------------------------------------
    # Maintenance records (memory only)
    # ------------------------------------------------------------------

    async def list_maintenance_records(self) -> list[MaintenanceRecord]:
        await self._simulate_latency()
        return _copies(self._maintenance_records)

    async def upsert_maintenance_record(self, record: MaintenanceRecord) -> MaintenanceRecord:
        await self._simulate_latency()
        async with self._lock:
            self._upsert(self._maintenance_records, record, "maintenance record")
        return record

    # ------------------------------------------------------------------
    # Relations
    # ------------------------------------------------------------------

    async def resolve_aircraft(
        self, entity: FlightSchedule | MaintenanceRecord
    ) -> Aircraft | None:
        """Current aircraft for ``entity.aircraft_id``, unlike the stored snapshot."""
        return await self.get_aircraft(entity.aircraft_id)

    # ------------------------------------------------------------------
    # Aggregations
    # ------------------------------------------------------------------

    async def get_fleet_statistics(self) -> FleetStatistics:
        await self._simulate_latency()
        return FleetStatistics(
            total_aircraft=len(self._aircraft),
            active_aircraft=sum(1 for a in self._aircraft if a.status == AircraftStatus.ACTIVE),
            maintenance_aircraft=sum(
                1 for a in self._aircraft if a.status == AircraftStatus.MAINTENANCE
            ),
            total_flight_hours=sum(a.flight_hours for a in self._aircraft),
            total_maintenance_cost=sum(r.cost for r in self._maintenance_records),
        )

    async def get_aircraft_count_by_status(self) -> dict[str, int]:
        """Counts keyed by user-facing status label."""
        await self._simulate_latency()
        counts = queries.group_count(self._aircraft, lambda a: a.status)
        return {queries.translate_status(status): n for status, n in counts.items()}

    async def get_aircraft_count_by_manufacturer(self) -> dict[str, int]:
        """Counts keyed by raw manufacturer string (case-sensitive)."""
        await self._simulate_latency()
        return queries.group_count(self._aircraft, lambda a: a.manufacturer)

    async def get_upcoming_maintenance(
        self,
        within_days: int = 30,
        limit: int = 10,
        now: datetime | None = None,
    ) -> list[Aircraft]:
        await self._simulate_latency()
        due = queries.upcoming_maintenance(
            self._aircraft, now or self._clock(), within_days=within_days, limit=limit
        )
        return _copies(due)
