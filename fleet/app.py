"""Composition root: wire settings, data files and the record store.

The presentation layer calls ``build_store()`` once at startup and passes
the returned store to every screen that needs it.
"""

from __future__ import annotations

import logging

from fleet.config import StoreSettings
from fleet.contracts import Aircraft, FlightSchedule
from fleet.persistence.json_file import JsonCollectionFile
from fleet.services.record_store import RecordStore

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


async def build_store(settings: StoreSettings | None = None) -> RecordStore:
    """Create and load a record store for *settings* (default: from env)."""
    settings = settings or StoreSettings.from_env()

    store = RecordStore(
        JsonCollectionFile(Aircraft, settings.aircraft_path),
        JsonCollectionFile(FlightSchedule, settings.schedules_path),
        latency=settings.latency_seconds,
    )
    await store.load()
    logger.info("Record store ready (data dir: %s)", settings.data_dir.resolve())
    return store
